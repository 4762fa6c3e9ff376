"""
Pytest fixtures for Attribute Service tests.

Every test gets a fresh in-memory SQLite database with the schema created
from the ORM metadata.
"""

import os
from datetime import datetime, timezone

# Must be set before core.config settings are first read
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from core.domain import Attribute, CategoryAttribute, Option  # noqa: E402
from core.models import Base  # noqa: E402
from core.repositories import AttributeRepository, CategoryAttributeRepository  # noqa: E402

FIXED_NOW = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh test database for each test using ORM."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    yield "sqlite://", TestingSessionLocal, engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    _, TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def attribute_repo(test_session):
    return AttributeRepository(test_session)


@pytest.fixture
def category_attribute_repo(test_session):
    return CategoryAttributeRepository(test_session)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def color_options():
    return [
        Option(value="Red", slug="red", color_code="#FF0000", sort_order=0),
        Option(value="Blue", slug="blue", color_code="#0000FF", sort_order=1),
    ]


@pytest.fixture
def make_attribute(color_options):
    """Factory for valid attributes; keyword arguments override the defaults."""

    def _make(**overrides) -> Attribute:
        fields = {
            "name": "Color",
            "slug": "color",
            "type": "select",
            "options": color_options,
            "now": FIXED_NOW,
        }
        fields.update(overrides)
        return Attribute.create(**fields)

    return _make


@pytest.fixture
def make_category_attribute():
    def _make(**overrides) -> CategoryAttribute:
        fields = {
            "category_id": "cat-1",
            "attribute_id": "attr-1",
            "now": FIXED_NOW,
        }
        fields.update(overrides)
        return CategoryAttribute.create(**fields)

    return _make
