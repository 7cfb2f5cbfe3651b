from typing import Optional
from datetime import datetime, timezone
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field as ORMField

ASSET_ROW_ID = 1


class Employee(SQLModel, table=True):
    __tablename__ = "employees"

    educator_id: str = ORMField(primary_key=True)
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
    created_at: datetime = ORMField(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        index=True,
    )


class AssetRow(SQLModel, table=True):
    __tablename__ = "assets"

    id: Optional[int] = ORMField(default=ASSET_ROW_ID, primary_key=True)
    logo_url: str = ""
    stamp_url: str = ""
    watermark_url: str = ""
    signature_url: str = ""
