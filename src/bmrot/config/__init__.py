"""Configuration management for bmrot.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RotationConfig: Rotation settings
- ParserConfig: Descriptor parsing settings
- LoggingConfig: Logging settings
- BmrotSettings: Main application settings
"""

from bmrot.config.settings import (
    BmrotSettings,
    LoggingConfig,
    ParserConfig,
    RotationConfig,
    get_default_settings,
)

__all__ = [
    "BmrotSettings",
    "LoggingConfig",
    "ParserConfig",
    "RotationConfig",
    "get_default_settings",
]
