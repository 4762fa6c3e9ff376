"""
Attribute Service Core Library.

Domain aggregates, persistence, handlers, configuration and logging for the
attribute service.

Usage:
    # Database
    from core.db import db, get_db
    from core.repositories import AttributeRepository, CategoryAttributeRepository

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"
