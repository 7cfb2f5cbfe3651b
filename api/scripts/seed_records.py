import structlog
from sqlmodel import Session

from nodues.config import store_settings
from nodues.db import init_db, make_engine
from nodues.logs import setup_logging
from nodues.models import ASSET_ROW_ID, AssetRow, Employee
from nodues.seed import DEFAULT_ASSETS, SAMPLE_RECORDS

setup_logging()
logger = structlog.get_logger()

settings = store_settings()
if not settings.remote_enabled:
    raise SystemExit("NODUES_STORE_URL and NODUES_STORE_KEY must both be set to seed the remote store")

engine = make_engine(settings.url, settings.key)
init_db(engine)

with Session(engine) as session:
    for record in SAMPLE_RECORDS:
        if session.get(Employee, record.educator_id):
            logger.info("seed_record_skipped", educator_id=record.educator_id)
            continue
        session.add(Employee(**record.model_dump()))
        logger.info("seed_record_added", educator_id=record.educator_id)
    if session.get(AssetRow, ASSET_ROW_ID) is None:
        session.add(AssetRow(id=ASSET_ROW_ID, **DEFAULT_ASSETS.model_dump()))
        logger.info("seed_assets_added")
    session.commit()
