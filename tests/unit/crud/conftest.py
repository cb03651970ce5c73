"""Shared fixtures for crud unit tests"""

import pytest
from sqlmodel import SQLModel

from pagesmith.crud.blobs import MemoryBlobStore, SQLBlobStore
from pagesmith.crud.database import init_db, make_engine


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="store", params=["memory", "sql"])
def store_fixture(request, engine):
    """Each store-level test runs against both implementations."""
    if request.param == "memory":
        return MemoryBlobStore()
    return SQLBlobStore(engine, "test")
