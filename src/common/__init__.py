# Common utilities and shared modules
"""
Shared components used by every storefront module:
- Data models (Pydantic schemas)
- Logging configuration
- Project configuration
"""

from .config import settings, Settings, PROJECT_ROOT, CONFIG_DIR
from .logging import setup_logging

__all__ = [
    "settings",
    "Settings",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "setup_logging",
]
