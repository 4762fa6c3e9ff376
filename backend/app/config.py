"""
Application configuration.

Re-exports from core.config so the backend can import settings locally:
    from .config import get_settings
"""

from core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
