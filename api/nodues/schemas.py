from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON uses camelCase (educatorId, centreName); attributes stay snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeRecord(CamelModel):
    educator_id: str
    name: str
    designation: str = ""
    division: str = ""
    centre_name: str = ""
    period_start: str = ""
    period_end: str = ""
    issue_date: str = ""
    place: str = ""
    signatory_name: str = ""
    signatory_designation: str = ""


def _today() -> str:
    return date.today().strftime("%d/%m/%Y")


class EmployeeCreate(CamelModel):
    """Add-record form body. Omitted fields get the boilerplate values."""

    educator_id: str = ""
    name: str = ""
    designation: str = "Senior Faculty"
    division: str = "Academics"
    centre_name: str = "Unacademy Centre"
    period_start: str = "January 2024"
    period_end: str = "December 2024"
    issue_date: str = Field(default_factory=_today)
    place: str = "New Delhi"
    signatory_name: str = "Centre Head"
    signatory_designation: str = "Authorized Signatory"

    def to_record(self) -> EmployeeRecord:
        return EmployeeRecord(**self.model_dump())


class Assets(CamelModel):
    logo_url: str = ""
    stamp_url: str = ""
    watermark_url: str = ""
    signature_url: str = ""


class AssetsUpdate(CamelModel):
    logo_url: Optional[str] = None
    stamp_url: Optional[str] = None
    watermark_url: Optional[str] = None
    signature_url: Optional[str] = None

    def changes(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)


class CertificateData(CamelModel):
    record: EmployeeRecord
    assets: Assets


class HealthStatus(CamelModel):
    ok: bool = True
    backend: str
    assets_degraded: bool = False
