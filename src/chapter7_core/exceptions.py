"""Exceptions raised by the means test engine.

Missing jurisdiction data is never an error: lookups fall back to
documented defaults. Only nonsensical caller inputs and an unknown
standards version are raised, both as subclasses of Chapter7Error.
"""

from typing import Any, Optional


class Chapter7Error(Exception):
    """Base class for engine errors; carries a details dict for logging."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(Chapter7Error):
    """A caller amount or household figure the engine refuses to evaluate.

    Negative or non-finite money, non-positive household sizes and member
    age rosters that do not match the household size land here. The
    offending field name, value and violated constraint are copied into
    ``details``.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.value = value
        self.constraint = constraint

        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = value
        if constraint:
            self.details["constraint"] = constraint


class ConfigurationError(Chapter7Error):
    """Unknown standards table version requested through EngineConfig."""

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


__all__ = [
    "Chapter7Error",
    "ValidationError",
    "ConfigurationError",
]
