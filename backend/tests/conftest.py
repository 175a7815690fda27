import os
import tempfile
from pathlib import Path

# Point the app at a throwaway database and upload dir before it is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="gmao-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["UPLOAD_DIR"] = str(_TMP_DIR / "uploads")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from config import settings  # noqa: E402
from database import Base, SessionLocal, engine, init_db  # noqa: E402
from models.part import Part  # noqa: E402
from utils.seed import seed_users  # noqa: E402
import main  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    init_db()
    with SessionLocal() as db:
        seed_users(db, settings.SEED_USERS)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(main.app)


@pytest.fixture
def make_part(db):
    def _make(reference, stock=0, minimum=0, name=None, category="Bearings", **extra):
        part = Part(
            reference=reference,
            name=name or f"Part {reference}",
            category=category,
            stock_quantity=stock,
            min_quantity=minimum,
            **extra,
        )
        db.add(part)
        db.commit()
        return reference
    return _make


@pytest.fixture
def stock_of():
    """Read the current stock through a fresh session."""
    def _read(reference):
        with SessionLocal() as session:
            return session.query(Part.stock_quantity).filter(Part.reference == reference).scalar()
    return _read
