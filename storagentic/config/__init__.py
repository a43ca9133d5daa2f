"""
Configuration for the assistant.

Settings are read once from the environment (and `.env`) and passed
explicitly to the components that need them.
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
