import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DATABASE", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from payroll.database import build_engine, get_db, init_db
from payroll.main import app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan (schema + seed) is not run against the
    # module-level engine.
    yield TestClient(app)
    app.dependency_overrides.clear()
