"""Configuration settings for bmrot."""

from pathlib import Path

from pydantic import BaseModel, Field


class RotationConfig(BaseModel):
    """Configuration for descriptor rotation."""

    turns: int = Field(
        default=1,
        ge=0,
        le=3,
        description="Number of 90 degree clockwise turns to apply (0 = dump only)",
    )


class ParserConfig(BaseModel):
    """Configuration for descriptor parsing."""

    encoding: str = Field(
        default="utf-8",
        description="Text encoding of descriptor files",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if None)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console logging",
    )


class BmrotSettings(BaseModel):
    """Main application settings."""

    rotation: RotationConfig = Field(default_factory=RotationConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BmrotSettings:
    """Get default application settings."""
    return BmrotSettings()
