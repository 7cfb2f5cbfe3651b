import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVEL = os.getenv("NODUES_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("NODUES_LOG_FORMAT", "console")

ORG_NAME = os.getenv("NODUES_ORG_NAME", "Unacademy")
CENTRE_LOCALITY = os.getenv("NODUES_CENTRE_LOCALITY", "Near Ashirwad hospital")
CENTRE_AREA = os.getenv("NODUES_CENTRE_AREA", "Kashipur")
CENTRE_PIN = os.getenv("NODUES_CENTRE_PIN", "848101")
CENTRE_EMAIL = os.getenv("NODUES_CENTRE_EMAIL", "suman.saurabh@unacademy.com")

DEFAULT_MOCK_LATENCY = 0.5


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


@dataclass(frozen=True)
class StoreSettings:
    url: Optional[str] = None
    key: Optional[str] = None
    mock_latency: float = DEFAULT_MOCK_LATENCY

    @property
    def remote_enabled(self) -> bool:
        return bool(self.url and self.key)


def store_settings() -> StoreSettings:
    """Read the store selection from the environment.

    Both the URL and the access key must be present for the remote store;
    anything less selects the mock store.
    """
    return StoreSettings(
        url=_getenv("NODUES_STORE_URL"),
        key=_getenv("NODUES_STORE_KEY"),
        mock_latency=float(_getenv("NODUES_MOCK_LATENCY", str(DEFAULT_MOCK_LATENCY)) or DEFAULT_MOCK_LATENCY),
    )
