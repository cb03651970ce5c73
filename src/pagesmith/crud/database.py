"""Engine construction and schema initialization"""

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from pagesmith.crud import models  # noqa: F401  registers tables on SQLModel.metadata


def make_engine(db_url: str):
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection so every thread sees the same in-memory database
        return create_engine(db_url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    if db_url.startswith("sqlite"):
        return create_engine(db_url, connect_args={"check_same_thread": False})
    return create_engine(db_url)


def init_db(engine) -> None:
    SQLModel.metadata.create_all(engine)
