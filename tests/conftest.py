"""
Fixture principali per i test di Upload Enrolment Methods
"""
import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Aggiungi il path del progetto
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Nessuna connessione MySQL durante i test
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from src.main import app
from src.database import Base, get_db
import src.models  # noqa: F401


# ============================================================================
# Database Test Setup
# ============================================================================

# SQLite in-memory per i test
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Crea una sessione database isolata per ogni test.
    Le tabelle vengono ricreate a ogni test.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()

    try:
        yield session
        session.rollback()
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def override_get_db():
    """Override per get_db dependency"""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


# ============================================================================
# App Fixture con Overrides
# ============================================================================

@pytest.fixture(scope="function")
def test_app(db_session: Session):
    """
    Crea l'app FastAPI con dependency overrides per i test.
    """
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(test_app) -> TestClient:
    """Client HTTP sincrono"""
    return TestClient(test_app)


# ============================================================================
# File CSV
# ============================================================================

@pytest.fixture
def csv_file(tmp_path):
    """Scrive un CSV su disco e ne restituisce il percorso"""
    def _write(content, name: str = "enrolments.csv", encoding: str = "utf-8") -> str:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return str(path)
    return _write
