"""Core data types for conversion requests and their results.

A conversion either produces a ``Success`` carrying the value or a
``Failure`` carrying a ``ConversionError``. The two are distinct types, so a
successfully parsed zero can never be mistaken for a failed parse.
"""

from __future__ import annotations

import dataclasses
import typing

from strictnum.core.models import NumericKind

# --- Minimal guard helpers ---


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


# --- Result Monad ---

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)
T = typing.TypeVar("T")
D = typing.TypeVar("D")


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A successful conversion."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TFailure]):
    """A failed conversion, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]


def is_success(result: Result[typing.Any, typing.Any]) -> bool:
    """Return True when the result carries a value."""
    return isinstance(result, Success)


def unwrap(result: Result[T, Exception]) -> T:
    """Return the value of a ``Success`` or raise the error of a ``Failure``."""
    if isinstance(result, Success):
        return result.value
    raise result.error


def unwrap_or(result: Result[T, Exception], default: D) -> T | D:
    """Return the value of a ``Success``, or ``default`` for any ``Failure``.

    The caller chooses the default explicitly; nothing in the library
    substitutes one on its own.
    """
    if isinstance(result, Success):
        return result.value
    return default


# --- Requests ---


@dataclasses.dataclass(frozen=True, slots=True)
class ConversionRequest:
    """A single token to convert, with the requested kind and radix.

    ``kind`` is kept as given; resolving it (and rejecting unknown kinds or
    unusable bases) is the parser's job so that those problems come back as
    ``Failure`` values instead of exceptions.
    """

    token: str
    kind: NumericKind | str
    base: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants for type safety."""
        _require(
            condition=isinstance(self.token, str),
            message=f"must be str, got {type(self.token).__name__}",
            field_name="token",
            exc=TypeError,
        )
