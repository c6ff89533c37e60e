"""
Configuration management for Backend GiveRep.

Loads settings from environment variables and the project .env file.
Exposes a single source of truth for Sui RPC and logging configuration.
"""

from backend_giverep.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
