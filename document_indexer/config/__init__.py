"""Configuration management for the document indexer."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
