"""Centralized configuration for protokit.

Typed configuration loaded from environment variables and .env files.
Only the CLI and logging setup read it; the inspection functions take no
configuration.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from protokit.core.errors import ConfigError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("text", "json")


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "text"  # "text" or "json"
    console_enabled: bool = True

    def __post_init__(self):
        self.level = os.getenv("PROTOKIT_LOG_LEVEL", self.level).upper()
        self.format = os.getenv("PROTOKIT_LOG_FORMAT", self.format).lower()
        self.console_enabled = _env_flag("PROTOKIT_LOG_CONSOLE", self.console_enabled)


@dataclass
class OutputConfig:
    """CLI output configuration."""
    json: bool = False

    def __post_init__(self):
        self.json = _env_flag("PROTOKIT_OUTPUT_JSON", self.json)


@dataclass
class Config:
    """Main configuration container."""
    log: LogConfig = field(default_factory=LogConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        issues = []

        if self.log.level not in VALID_LOG_LEVELS:
            issues.append(f"PROTOKIT_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")

        if self.log.format not in VALID_LOG_FORMATS:
            issues.append(f"PROTOKIT_LOG_FORMAT must be one of {', '.join(VALID_LOG_FORMATS)}")

        return issues

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0

    def require_valid(self) -> "Config":
        """Raise ConfigError for the first problem found."""
        issues = self.validate()
        if issues:
            key = issues[0].split(" ", 1)[0]
            raise ConfigError("Invalid configuration", config_key=key, details="; ".join(issues))
        return self


_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance, loading .env on first use."""
    global _config
    if _config is None:
        load_dotenv()
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
