"""Custom exceptions for protokit.

The inspection and synthesis functions never raise on their own; these
exceptions cover the outer surfaces (configuration and the CLI).
"""

from typing import Optional


class ProtokitError(Exception):
    """Base exception for all protokit errors.

    Provides:
    - User-friendly message
    - Technical details for debugging
    - Suggested fixes when applicable
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestion: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.details = details
        self.suggestion = suggestion
        self.cause = cause
        super().__init__(message)

    def format_user_friendly(self) -> str:
        """Format error for display to user."""
        parts = [f"Error: {self.message}"]

        if self.details:
            parts.append(f"   Details: {self.details}")

        if self.suggestion:
            parts.append(f"   Try: {self.suggestion}")

        return "\n".join(parts)

    def __str__(self) -> str:
        return self.format_user_friendly()


class ConfigError(ProtokitError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        suggestion = kwargs.pop("suggestion", None)
        if not suggestion and config_key:
            suggestion = f"Fix the {config_key} environment variable or its entry in .env"
        super().__init__(message, suggestion=suggestion, **kwargs)
        self.config_key = config_key


class TargetResolutionError(ProtokitError):
    """A ``module:attribute`` reference could not be imported."""

    def __init__(self, message: str, target: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", None)
        if not details and target:
            details = f"Target: {target}"

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = "Use the form package.module:Attribute and check the module is importable"

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)
        self.target = target
