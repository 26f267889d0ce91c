"""Configuration management."""

from .manager import load_settings
from ..models.config import Settings

__all__ = ["Settings", "load_settings"]
