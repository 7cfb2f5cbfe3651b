from sqlmodel import SQLModel, create_engine
from sqlalchemy.engine import Engine, make_url


def make_engine(url: str, key: str) -> Engine:
    """Engine for the remote store, with the access key applied as the URL password."""
    target = make_url(url)
    connect_args = {}
    if target.get_backend_name() == "sqlite":
        # sqlite has no credentials; the key only selects remote mode
        connect_args = {"check_same_thread": False}
    else:
        target = target.set(password=key)
    return create_engine(target, echo=False, pool_pre_ping=True, connect_args=connect_args)


def init_db(engine: Engine):
    from .models import Employee, AssetRow
    SQLModel.metadata.create_all(engine)
