"""
Shared fixtures.

The app reads its settings at import time, so the database URL and session
backend are pinned here before anything from studyhub is imported.
"""
import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="studyhub-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["SESSION_BACKEND"] = "memory"
os.environ["SEED_DEFAULT_CATEGORIES"] = "true"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from studyhub.core.config import settings  # noqa: E402
from studyhub.core.sessions import MemorySessionStore  # noqa: E402
from studyhub.db.base import Base  # noqa: E402
from studyhub.db.session import SessionLocal, engine  # noqa: E402
from studyhub.main import app  # noqa: E402
from studyhub.models.category import Category  # noqa: E402
from studyhub.models.question import Question  # noqa: E402

ADMIN = {"email": settings.ADMIN_EMAIL, "password": settings.ADMIN_PASSWORD}


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts from empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def session_store():
    store = MemorySessionStore()
    app.state.session_store = store
    return store


@pytest.fixture
def client(session_store):
    """Anonymous client. Entering the context runs startup, which seeds categories."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/login", json=ADMIN)
    assert resp.status_code == 200
    return client


@pytest.fixture
def test_category(db_session):
    category = Category(
        name="Test Category",
        description="Used by the test suite",
        icon="calculator",
        color="blue",
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def other_category(db_session):
    category = Category(name="Other Category", description="Second test category")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def test_question(db_session, test_category):
    question = Question(
        title="Algebra basics",
        content="What is a variable?",
        answer="A symbol that stands for a value.",
        category_id=test_category.id,
    )
    db_session.add(question)
    db_session.commit()
    db_session.refresh(question)
    return question
