"""Core package - errors and logging."""

from .errors import ConfigError, ProtokitError, TargetResolutionError
from .logging import get_logger, setup_logging

__all__ = [
    "ConfigError",
    "ProtokitError",
    "TargetResolutionError",
    "get_logger",
    "setup_logging",
]
