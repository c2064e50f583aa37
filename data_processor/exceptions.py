# =============================================================================
# data_processor/exceptions.py - Processor Errors
# =============================================================================
# Error taxonomy for the processor.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any


class ProcessorError(Exception):
    """
    Base error for the data processor.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        raise ProcessorError("Something broke", code="BROKEN")
    """

    def __init__(
        self,
        message: str,
        code: str = "PROCESSOR_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a plain dict (for logs and execution results)."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


class InvalidValueError(ProcessorError):
    """Raised when a parameter or initial sequence is not numeric."""

    def __init__(self, name: str, value: Any, reason: str = "must be a real number"):
        super().__init__(
            message=f"Invalid value for '{name}': {value!r} {reason}",
            code="INVALID_VALUE",
            suggestion="Pass int or float values (not bool, complex, NaN or strings)",
            details={"name": name, "value": repr(value)},
        )


class InvalidDelayError(ProcessorError):
    """Raised when delay_ms is negative or not an integer."""

    def __init__(self, delay_ms: Any):
        super().__init__(
            message=f"Invalid delay: {delay_ms!r}",
            code="INVALID_DELAY",
            suggestion="delay_ms must be an integer number of milliseconds >= 0",
            details={"delay_ms": repr(delay_ms)},
        )


class InvalidParamsError(InvalidValueError):
    """Raised when an operation's parameters fail validation."""

    def __init__(self, operation: str, errors: list[str]):
        ProcessorError.__init__(
            self,
            message=f"Invalid params for '{operation}': {'; '.join(errors)}",
            code="INVALID_VALUE",
            suggestion="Check the operation's parameters with get_operation_info()",
            details={"operation": operation, "errors": errors},
        )


class UnknownOperationError(ProcessorError):
    """Raised when an operation name is not registered (or has no async variant)."""

    def __init__(self, name: str, available: list[str], kind: str = "operation"):
        super().__init__(
            message=f"Unknown {kind}: {name}",
            code="UNKNOWN_OPERATION",
            suggestion=f"Use one of: {', '.join(sorted(available))}",
            details={"name": name, "available": sorted(available)},
        )
