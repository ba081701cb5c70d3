"""
Error handling system for linesel.

Every failure the engine reports is a ``LineSelError`` carrying an
``ErrorCode``, a developer message, a user-facing message and an
``ErrorContext`` describing what was being parsed. Parse errors also
subclass ``ValueError`` so callers that only know the builtin hierarchy
still catch them.
"""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from linesel.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Line spec parsing (3000-3999)
    INVALID_NUMERAL = 3001
    OUT_OF_DOMAIN = 3002
    INVALID_CONTEXT = 3003
    UNSUPPORTED_INPUT = 3004
    AMBIGUOUS_STRUCT = 3005
    UNRESOLVED_REFERENCE = 3006

    # Configuration (4000-4999)
    INVALID_CONFIG = 4001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    spec: str | None = None
    field: str | None = None
    timestamp: datetime = dataclass_field(default_factory=utcnow)
    additional_info: dict[str, Any] = dataclass_field(default_factory=dict)


class LineSelError(Exception):
    """Base error class for linesel."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
            f"   Detail: {self}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.spec is not None:
            parts.append(f"   Spec: {self.context.spec!r}")
        if self.context.field:
            parts.append(f"   Field: {self.context.field}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "spec": self.context.spec,
                "field": self.context.field,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class LineSpecError(LineSelError, ValueError):
    """Base for errors raised while turning an input into line ranges."""

    code: ErrorCode = ErrorCode.INVALID_NUMERAL
    default_user_message = "Invalid line selection."

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=self.code,
            message=message,
            user_message=user_message or self.default_user_message,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_error=original_error,
        )


class MalformedNumeralError(LineSpecError):
    """Non-numeric text where a line number or amount was expected."""

    code = ErrorCode.INVALID_NUMERAL
    default_user_message = "Line selection contains an invalid number."


class OutOfDomainError(LineSpecError):
    """Line numbers below 1, ranges ending before they start, negative context."""

    code = ErrorCode.OUT_OF_DOMAIN
    default_user_message = "Line selection value is out of range."


class MalformedContextError(LineSpecError):
    """A context suffix such as ``+/-3`` or ``-2 +5`` could not be parsed."""

    code = ErrorCode.INVALID_CONTEXT
    default_user_message = "Line selection has an invalid context suffix."


class UnsupportedInputError(LineSpecError):
    """Input of a shape the engine does not accept."""

    code = ErrorCode.UNSUPPORTED_INPUT
    default_user_message = (
        "Expected a line number, a line spec string, a range record, or a list of those."
    )


class AmbiguousStructError(LineSpecError):
    """A range record with fields outside the known set."""

    code = ErrorCode.AMBIGUOUS_STRUCT
    default_user_message = "Range record has unrecognized fields."


class UnresolvedSelectionError(LineSelError):
    """A selection holding from-end references was queried before resolution."""

    def __init__(self, message: str, context: ErrorContext | None = None) -> None:
        super().__init__(
            code=ErrorCode.UNRESOLVED_REFERENCE,
            message=message,
            user_message="Selection must be resolved against a line count before scanning.",
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class ConfigurationError(LineSelError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            original_error=original_error,
        )
