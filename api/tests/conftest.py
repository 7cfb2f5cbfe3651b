import os

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine

os.environ.pop("NODUES_STORE_URL", None)
os.environ.pop("NODUES_STORE_KEY", None)
os.environ["NODUES_MOCK_LATENCY"] = "0"

from nodues.main import app  # noqa: E402
from nodues.models import Employee  # noqa: E402
from nodues.seed import SAMPLE_RECORDS  # noqa: E402
from nodues.store import MockRecordStore, SqlRecordStore, get_store  # noqa: E402


@pytest.fixture(scope="session")
def test_engine(tmp_path_factory):
    db_path = tmp_path_factory.mktemp("data") / "test.db"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    return engine


@pytest.fixture
def broken_engine(tmp_path):
    # parent directory does not exist, so every connect fails
    return create_engine(
        f"sqlite:///{tmp_path / 'missing' / 'store.db'}",
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def setup_db(test_engine):
    SQLModel.metadata.drop_all(test_engine)
    SQLModel.metadata.create_all(test_engine)
    yield
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def mock_store():
    return MockRecordStore(latency=0)


@pytest.fixture
def sql_store(test_engine, setup_db):
    with Session(test_engine) as session:
        for record in SAMPLE_RECORDS:
            session.add(Employee(**record.model_dump()))
        session.commit()
    return SqlRecordStore(test_engine)


@pytest.fixture(params=["mock", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
