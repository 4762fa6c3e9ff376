"""
Database session dependency for the routers.

Re-exports from the core.db module so routers depend on one import path:
    from ..database import get_db

Database initialization happens in main.py startup, not at import time.
"""

from core.db import db, get_db

__all__ = ["db", "get_db"]
