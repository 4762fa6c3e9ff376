"""
Database engine and session handling for the attribute store.

A single DatabaseManager owns the engine. SQLite URLs (local runs and
tests) get a StaticPool so an in-memory database survives across sessions;
anything else gets a QueuePool sized from settings.

Usage:
    from core.db import db, get_db

    db.initialize()
    db.create_all_tables()
    with db.session() as session:
        entity = session.get(AttributeEntity, attribute_id)
"""

import time
from collections.abc import Generator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import get_settings


class Base(DeclarativeBase):
    """Declarative base for the attribute and category-attribute tables."""

    pass


class DatabaseManager:
    """Process-wide engine and session factory."""

    _instance: Optional["DatabaseManager"] = None
    _initialized: bool = False

    def __new__(cls) -> "DatabaseManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def initialize(self, database_url: str | None = None) -> None:
        """Create the engine once. Later calls are no-ops."""
        if self._initialized:
            return

        settings = get_settings()
        url = database_url or settings.database_url

        if url.startswith("sqlite"):
            connect_args = {"check_same_thread": False}
            pool_class: type[StaticPool | QueuePool] = StaticPool
            pool_config = {}
        else:
            connect_args = {}
            pool_class = QueuePool
            pool_config = {
                "pool_size": settings.db_pool_size,
                "max_overflow": settings.db_max_overflow,
                "pool_pre_ping": settings.db_pool_pre_ping,
            }

        self.engine = create_engine(
            url,
            poolclass=pool_class,
            connect_args=connect_args,
            echo=settings.debug,
            **pool_config,
        )
        # Aggregates are returned after commit, so loaded state must not expire
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

        self._initialized = True

    def create_all_tables(self) -> None:
        """Create the attribute tables if they do not exist yet."""
        self._ensure_initialized()
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Session that commits on success and rolls back on any exception."""
        self._ensure_initialized()
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> dict:
        """
        Run ``SELECT 1`` against the engine.

        Returns:
            dict with 'healthy' (bool), 'latency_ms' (float), and 'error' (str or None)
        """
        if not self._initialized:
            return {"healthy": False, "latency_ms": 0, "error": "Database not initialized"}

        start = time.perf_counter()
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            latency = (time.perf_counter() - start) * 1000
            return {"healthy": True, "latency_ms": round(latency, 2), "error": None}
        except Exception as e:
            latency = (time.perf_counter() - start) * 1000
            return {"healthy": False, "latency_ms": round(latency, 2), "error": str(e)}

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("DatabaseManager not initialized. Call initialize() first.")


db = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one committed-or-rolled-back session per request."""
    with db.session() as session:
        yield session


__all__ = ["Base", "DatabaseManager", "db", "get_db"]
