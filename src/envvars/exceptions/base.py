"""Base exception classes for envvars.

Every envvars exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for rendering a diagnostic
"""

from typing import Any, Dict, List, Optional, Sequence


class EnvVarsError(Exception):
    """Base exception for all envvars errors.

    Attributes:
        code: Machine-readable error code (e.g., "MISSING_KEYS")
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(EnvVarsError):
    """Base for configuration errors.

    Used when the configuration a program declared it needs is incomplete.
    """

    pass


class ValidationError(EnvVarsError):
    """Base for validation errors.

    Used when a configuration value is present but unusable.
    """

    pass


class MissingKeysError(ConfigurationError):
    """One or more required keys could not be resolved.

    ``keys`` holds every key name relevant to the failed call: all unresolved
    keys for whole-set assertions and plain lookups, or only the unresolved
    members of an explicitly requested subset.
    """

    def __init__(self, keys: Sequence[str]):
        self.keys: List[str] = list(keys)
        super().__init__(
            code="MISSING_KEYS",
            message=f"Following required env keys are missing: {', '.join(self.keys)}",
            details={"keys": self.keys},
        )


class CouldNotMapError(ValidationError):
    """A present value could not be converted by a caller-supplied mapper."""

    def __init__(self, value: str, key: Optional[str] = None):
        self.value = value
        self.key = key
        details: Dict[str, Any] = {"value": value}
        if key is not None:
            details["key"] = key
        target = f" for key '{key}'" if key is not None else ""
        super().__init__(
            code="COULD_NOT_MAP",
            message=f"Could not map value {value!r}{target}",
            details=details,
        )
