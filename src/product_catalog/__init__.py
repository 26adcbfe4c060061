"""In-memory product catalog served over HTTP with Flask."""

from .app import create_app
from .config import Settings

__all__ = ["create_app", "Settings"]
__version__ = "0.1.0"
