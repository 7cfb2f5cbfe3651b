"""
Record store adapter.

Two interchangeable implementations of one capability:

- ``MockRecordStore`` keeps records and the asset bundle in process, seeded
  with sample data, and simulates network latency on every call.
- ``SqlRecordStore`` talks to the remote relational store through SQLModel.

``build_store`` picks one from an explicit ``StoreSettings`` at startup.

List order is backend dependent and not part of the contract: the SQL store
returns the most recent insertion first (ties by descending ``educator_id``),
the mock store returns insertion order.
"""

import asyncio
from typing import Dict, List, Optional, Protocol

import structlog
from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from .config import StoreSettings, DEFAULT_MOCK_LATENCY
from .db import init_db, make_engine
from .errors import BackendUnavailable, DuplicateKey, NotFound, ValidationError
from .models import ASSET_ROW_ID, AssetRow, Employee
from .schemas import Assets, AssetsUpdate, CertificateData, EmployeeRecord
from .seed import DEFAULT_ASSETS, SAMPLE_RECORDS

logger = structlog.get_logger()


class RecordStore(Protocol):
    backend: str
    assets_degraded: bool

    async def fetch_one(self, educator_id: str) -> CertificateData:
        raise NotImplementedError

    async def list_all(self) -> List[EmployeeRecord]:
        raise NotImplementedError

    async def insert(self, record: EmployeeRecord) -> EmployeeRecord:
        raise NotImplementedError

    async def get_assets(self) -> Assets:
        raise NotImplementedError

    async def update_assets(self, partial: AssetsUpdate) -> Assets:
        raise NotImplementedError


def validate_record(record: EmployeeRecord):
    if not record.educator_id or not record.name:
        raise ValidationError("Educator ID and Name are required.")


def _not_found(educator_id: str) -> NotFound:
    return NotFound(f"Record not found for Educator ID: {educator_id}")


def _duplicate(educator_id: str) -> DuplicateKey:
    return DuplicateKey(f"Record with Educator ID {educator_id} already exists.")


class MockRecordStore:
    backend = "mock"

    def __init__(
        self,
        latency: float = DEFAULT_MOCK_LATENCY,
        records: Optional[List[EmployeeRecord]] = None,
        assets: Optional[Assets] = None,
    ):
        self.latency = latency
        self.assets_degraded = False
        seed = SAMPLE_RECORDS if records is None else records
        self._records: Dict[str, EmployeeRecord] = {r.educator_id: r.model_copy() for r in seed}
        self._assets = (assets or DEFAULT_ASSETS).model_copy()

    async def _delay(self):
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def fetch_one(self, educator_id: str) -> CertificateData:
        await self._delay()
        record = self._records.get(educator_id)
        if record is None:
            raise _not_found(educator_id)
        return CertificateData(record=record.model_copy(), assets=self._assets.model_copy())

    async def list_all(self) -> List[EmployeeRecord]:
        await self._delay()
        return [r.model_copy() for r in self._records.values()]

    async def insert(self, record: EmployeeRecord) -> EmployeeRecord:
        await self._delay()
        validate_record(record)
        if record.educator_id in self._records:
            raise _duplicate(record.educator_id)
        self._records[record.educator_id] = record.model_copy()
        logger.info("record_inserted", backend=self.backend, educator_id=record.educator_id)
        return record

    async def get_assets(self) -> Assets:
        await self._delay()
        return self._assets.model_copy()

    async def update_assets(self, partial: AssetsUpdate) -> Assets:
        await self._delay()
        changes = partial.changes()
        self._assets = self._assets.model_copy(update=changes)
        logger.info("assets_updated", backend=self.backend, fields=sorted(changes))
        return self._assets.model_copy()


def _record_from_row(row: Employee) -> EmployeeRecord:
    return EmployeeRecord(**{name: getattr(row, name) for name in EmployeeRecord.model_fields})


def _row_from_record(record: EmployeeRecord) -> Employee:
    return Employee(**record.model_dump())


def _assets_from_row(row: AssetRow) -> Assets:
    return Assets(**{name: getattr(row, name) for name in Assets.model_fields})


class SqlRecordStore:
    """Remote store over the ``employees`` and ``assets`` relations.

    Asset reads never fail: if the store cannot be read, the last bundle read
    successfully (or the default bundle) is returned, a warning is logged and
    ``assets_degraded`` is set until the next successful read.
    """

    backend = "sql"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.assets_degraded = False
        self._last_assets: Optional[Assets] = None

    def init_schema(self):
        try:
            init_db(self.engine)
        except SQLAlchemyError as exc:
            logger.warning("schema_init_failed", error=str(exc))

    async def fetch_one(self, educator_id: str) -> CertificateData:
        return await run_in_threadpool(self._fetch_one, educator_id)

    async def list_all(self) -> List[EmployeeRecord]:
        return await run_in_threadpool(self._list_all)

    async def insert(self, record: EmployeeRecord) -> EmployeeRecord:
        return await run_in_threadpool(self._insert, record)

    async def get_assets(self) -> Assets:
        return await run_in_threadpool(self._get_assets)

    async def update_assets(self, partial: AssetsUpdate) -> Assets:
        return await run_in_threadpool(self._update_assets, partial.changes())

    def _fetch_one(self, educator_id: str) -> CertificateData:
        try:
            with Session(self.engine) as session:
                row = session.get(Employee, educator_id)
                record = _record_from_row(row) if row else None
        except SQLAlchemyError as exc:
            raise BackendUnavailable(f"Could not fetch record {educator_id}: {exc}") from exc
        if record is None:
            raise _not_found(educator_id)
        return CertificateData(record=record, assets=self._get_assets())

    def _list_all(self) -> List[EmployeeRecord]:
        try:
            with Session(self.engine) as session:
                statement = select(Employee).order_by(Employee.created_at.desc(), Employee.educator_id.desc())
                rows = session.exec(statement).all()
                return [_record_from_row(row) for row in rows]
        except SQLAlchemyError as exc:
            raise BackendUnavailable(f"Could not list records: {exc}") from exc

    def _insert(self, record: EmployeeRecord) -> EmployeeRecord:
        validate_record(record)
        try:
            with Session(self.engine) as session:
                session.add(_row_from_record(record))
                session.commit()
        except IntegrityError as exc:
            raise _duplicate(record.educator_id) from exc
        except SQLAlchemyError as exc:
            raise BackendUnavailable(f"Could not insert record {record.educator_id}: {exc}") from exc
        logger.info("record_inserted", backend=self.backend, educator_id=record.educator_id)
        return record

    def _get_assets(self) -> Assets:
        try:
            with Session(self.engine) as session:
                row = session.get(AssetRow, ASSET_ROW_ID)
                assets = _assets_from_row(row) if row else None
        except SQLAlchemyError as exc:
            self.assets_degraded = True
            logger.warning(
                "assets_read_failed",
                error=str(exc),
                fallback="last_known" if self._last_assets else "default",
            )
            return (self._last_assets or DEFAULT_ASSETS).model_copy()
        self.assets_degraded = False
        if assets is None:
            assets = DEFAULT_ASSETS.model_copy()
        self._last_assets = assets
        return assets.model_copy()

    def _update_assets(self, changes: Dict[str, str]) -> Assets:
        try:
            with Session(self.engine) as session:
                row = session.get(AssetRow, ASSET_ROW_ID)
                if row is None:
                    row = AssetRow(id=ASSET_ROW_ID, **DEFAULT_ASSETS.model_dump())
                for key, value in changes.items():
                    setattr(row, key, value)
                session.add(row)
                session.commit()
                session.refresh(row)
                assets = _assets_from_row(row)
        except SQLAlchemyError as exc:
            raise BackendUnavailable(f"Could not update assets: {exc}") from exc
        self._last_assets = assets
        self.assets_degraded = False
        logger.info("assets_updated", backend=self.backend, fields=sorted(changes))
        return assets.model_copy()


def build_store(settings: StoreSettings) -> RecordStore:
    if not settings.remote_enabled:
        logger.info("store_selected", backend=MockRecordStore.backend, latency=settings.mock_latency)
        return MockRecordStore(latency=settings.mock_latency)
    store = SqlRecordStore(make_engine(settings.url, settings.key))
    store.init_schema()
    logger.info("store_selected", backend=SqlRecordStore.backend)
    return store


def get_store(request: Request) -> RecordStore:
    return request.app.state.store
