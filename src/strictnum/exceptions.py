"""Exceptions for strict numeric conversion"""  # noqa: D415

from pathlib import Path

from strictnum.core.models import FailureReason, NumericKind

_REASON_TEXT = {
    FailureReason.EMPTY_INPUT: "empty input",
    FailureReason.NON_NUMERIC_CHARACTER: "no numeric characters",
    FailureReason.PARTIAL_CONSUMPTION: "trailing characters",
    FailureReason.OUT_OF_RANGE: "value out of range",
    FailureReason.INVALID_CONFIGURATION: "invalid configuration",
}


class StrictnumError(Exception):
    """Base exception for strictnum errors"""  # noqa: D415


class ConversionError(StrictnumError):
    """A token could not be converted to the requested numeric kind.

    Instances are carried inside ``Failure`` rather than raised; the
    opt-in raising paths are ``parse_or_raise`` and ``unwrap``.
    """

    def __init__(
        self,
        reason: FailureReason,
        token: str,
        *,
        position: int = 0,
        kind: NumericKind | None = None,
        detail: str | None = None,
    ) -> None:
        """Initialize with the failure reason and the offending token.

        Args:
            reason: Why the conversion failed
            token: The token as given by the caller
            position: Index of the first character that was not consumed
            kind: The requested kind, when it could be resolved
            detail: Optional extra context appended to the message
        """
        self.reason = reason
        self.token = token
        self.position = position
        self.kind = kind
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = f"cannot convert {self.token!r}: {_REASON_TEXT[self.reason]}"
        if self.reason is FailureReason.PARTIAL_CONSUMPTION:
            message += f" starting at index {self.position}"
        if self.detail:
            message += f" ({self.detail})"
        return message

    def __reduce__(self):
        return (
            _rebuild_conversion_error,
            (type(self), self.reason, self.token, self.position, self.kind, self.detail),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConversionError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.reason is other.reason
            and self.token == other.token
            and self.position == other.position
            and self.kind is other.kind
            and self.detail == other.detail
        )

    def __hash__(self) -> int:
        return hash((type(self), self.reason, self.token, self.position, self.kind))


class InvalidConfigurationError(ConversionError):
    """Raised when the kind or base of a request is unusable"""  # noqa: D415

    def __init__(
        self,
        token: str,
        detail: str,
        *,
        kind: NumericKind | None = None,
    ) -> None:
        """Initialize with the token and a description of the bad argument."""
        super().__init__(
            FailureReason.INVALID_CONFIGURATION, token, kind=kind, detail=detail
        )


def _rebuild_conversion_error(
    cls: type[ConversionError],
    reason: FailureReason,
    token: str,
    position: int,
    kind: NumericKind | None,
    detail: str | None,
) -> ConversionError:
    # Subclasses take different constructor arguments; restore the shared state.
    error = cls.__new__(cls)
    ConversionError.__init__(
        error, reason, token, position=position, kind=kind, detail=detail
    )
    return error


class ConfigFileError(StrictnumError):
    """Raised when configuration file loading fails."""

    def __init__(
        self, file_path: Path, message: str, cause: Exception | None = None
    ) -> None:
        """Initialize with file path, message, and optional cause.

        Args:
            file_path: The file that failed to load
            message: Human-readable error message
            cause: The underlying exception that caused the failure
        """
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(f"Config file error in {file_path}: {message}")
