# tests/conftest.py
import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from estate_sales.core.rate_limiter import limiter
from estate_sales.core.seed import rebuild_schema
from estate_sales.database import build_engine, get_db, get_engine
from estate_sales.main import app

limiter.enabled = False


@pytest.fixture()
def engine():
    # one shared in-memory database per test, reloaded with the sample data
    engine = build_engine("sqlite://", poolclass=StaticPool)
    with engine.begin() as connection:
        rebuild_schema(connection)
    yield engine
    engine.dispose()


@pytest.fixture()
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_engine] = lambda: engine

    yield TestClient(app)

    app.dependency_overrides.clear()


def find(rows, key, value):
    return next((row for row in rows if row[key] == value), None)
