"""All-or-nothing conversion of tokens into numbers.

``parse`` succeeds only when the whole token is a number of the requested
kind and the number fits the configured range. Every other outcome is a
``Failure`` naming the reason, so a parsed ``0`` is never confused with a
failed parse and trailing garbage is never silently dropped.

Parsing is pure: it reads only its arguments and the frozen configuration,
and never touches the environment.
"""

from __future__ import annotations

import logging
import math
import typing

from strictnum.config.types import FrozenConfig
from strictnum.core.models import FailureReason, NumericKind
from strictnum.core.types import ConversionRequest, Failure, Result, Success, unwrap
from strictnum.exceptions import ConversionError, InvalidConfigurationError
from strictnum.scanner import MAX_BASE, MIN_BASE, scan_float, scan_integer

log = logging.getLogger(__name__)

Number = int | float
ConversionResult = Result[Number, ConversionError]


class NumericParser:
    """Converts tokens using one frozen configuration.

    Instances hold no mutable state and can be shared between threads.
    """

    __slots__ = ("config",)

    def __init__(self, config: FrozenConfig | None = None) -> None:
        """Bind the parser to ``config``, or to the library defaults."""
        self.config = config if config is not None else FrozenConfig()

    def __repr__(self) -> str:
        return f"NumericParser({self.config!r})"

    def parse(
        self,
        token: str,
        kind: NumericKind | str,
        base: int | None = None,
    ) -> ConversionResult:
        """Convert ``token`` to ``kind``; see ``convert``."""
        return self.convert(ConversionRequest(token, kind, base))

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """Convert a request into exactly one Success or Failure.

        Checks run in a fixed order: the kind and base first (a problem
        there is an ``InvalidConfigurationError``), then an empty token,
        then the prefix scan, full consumption, and finally range.
        """
        token = request.token
        kind = _resolve_kind(request.kind)
        if kind is None:
            return Failure(
                InvalidConfigurationError(
                    token, f"unknown numeric kind {request.kind!r}"
                )
            )

        base_problem = _check_base(kind, request.base)
        if base_problem is not None:
            return Failure(InvalidConfigurationError(token, base_problem, kind=kind))

        if not token:
            return Failure(ConversionError(FailureReason.EMPTY_INPUT, token, kind=kind))

        if kind is NumericKind.FLOAT:
            return self._convert_float(token)

        base = request.base if kind is NumericKind.UNSIGNED else kind.fixed_base
        return self._convert_integer(token, kind, typing.cast(int, base))

    def _convert_integer(
        self, token: str, kind: NumericKind, base: int
    ) -> ConversionResult:
        signed = kind is not NumericKind.UNSIGNED
        scan = scan_integer(token, base=base, signed=signed, allow_hex_prefix=base == 16)
        failure = _consumption_failure(token, scan.consumed, kind)
        if failure is not None:
            return failure

        width = self.config.int_bits
        low, high = width.signed_range() if signed else width.unsigned_range()

        # Any number with more significant digits than the width has bits is
        # out of range for every base >= 2; checking this first keeps int()
        # away from arbitrarily long digit strings.
        significant = token[scan.digits].lstrip("0")
        if len(significant) > width.value:
            return _out_of_range(token, kind, f"exceeds {width.value}-bit range")

        value = int(significant or "0", base)
        if scan.negative:
            value = -value
        if not low <= value <= high:
            return _out_of_range(
                token, kind, f"{value} not in [{low}, {high}] for {width.value}-bit"
            )
        return Success(value)

    def _convert_float(self, token: str) -> ConversionResult:
        kind = NumericKind.FLOAT
        scan = scan_float(token, allow_special=self.config.allow_special_floats)
        failure = _consumption_failure(token, scan.consumed, kind)
        if failure is not None:
            return failure

        value = float(token)
        if scan.special:
            return Success(value)
        if math.isinf(value):
            return _out_of_range(token, kind, "overflows double precision")
        if value == 0.0 and scan.mantissa_nonzero and self.config.reject_underflow:
            return _out_of_range(token, kind, "underflows double precision")
        return Success(value)


def _resolve_kind(kind: object) -> NumericKind | None:
    if isinstance(kind, NumericKind):
        return kind
    try:
        return NumericKind(kind)
    except ValueError:
        return None


def _check_base(kind: NumericKind, base: object) -> str | None:
    """Describe what is wrong with ``base`` for ``kind``, or return None."""
    if base is None:
        if kind is NumericKind.UNSIGNED:
            return "unsigned conversion requires a base"
        return None
    if isinstance(base, bool) or not isinstance(base, int):
        return f"base must be an int, got {type(base).__name__}"
    if kind is NumericKind.FLOAT:
        return "float conversion does not take a base"
    if kind.fixed_base is not None and base != kind.fixed_base:
        return f"{kind.value} conversion is always base {kind.fixed_base}, got {base}"
    if not MIN_BASE <= base <= MAX_BASE:
        return f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}"
    return None


def _consumption_failure(
    token: str, consumed: int, kind: NumericKind
) -> Failure[ConversionError] | None:
    if consumed == 0:
        return Failure(
            ConversionError(FailureReason.NON_NUMERIC_CHARACTER, token, kind=kind)
        )
    if consumed < len(token):
        return Failure(
            ConversionError(
                FailureReason.PARTIAL_CONSUMPTION, token, position=consumed, kind=kind
            )
        )
    return None


def _out_of_range(token: str, kind: NumericKind, detail: str) -> Failure[ConversionError]:
    return Failure(
        ConversionError(
            FailureReason.OUT_OF_RANGE,
            token,
            position=len(token),
            kind=kind,
            detail=detail,
        )
    )


# --- Module-level API ---

_DEFAULT_PARSER = NumericParser()


def _parser_for(config: FrozenConfig | None) -> NumericParser:
    return _DEFAULT_PARSER if config is None else NumericParser(config)


def parse(
    token: str,
    kind: NumericKind | str,
    base: int | None = None,
    *,
    config: FrozenConfig | None = None,
) -> ConversionResult:
    """Convert the whole of ``token`` to ``kind``.

    Args:
        token: Text to convert. Not trimmed: surrounding whitespace fails.
        kind: A NumericKind or its string value.
        base: Radix for ``NumericKind.UNSIGNED`` (2 through 36). Other kinds
            accept only their own radix or None.
        config: Frozen configuration; the library defaults when omitted.

    Returns:
        ``Success(value)`` or ``Failure(ConversionError)``.

    Raises:
        TypeError: If ``token`` is not a str.
    """
    return _parser_for(config).parse(token, kind, base)


def parse_int(token: str, *, config: FrozenConfig | None = None) -> ConversionResult:
    """Signed decimal integer."""
    return parse(token, NumericKind.SIGNED_DECIMAL, config=config)


def parse_hex(token: str, *, config: FrozenConfig | None = None) -> ConversionResult:
    """Signed hexadecimal integer, ``0x`` prefix optional."""
    return parse(token, NumericKind.SIGNED_HEX, config=config)


def parse_unsigned(
    token: str, base: int = 10, *, config: FrozenConfig | None = None
) -> ConversionResult:
    """Unsigned integer in ``base``."""
    return parse(token, NumericKind.UNSIGNED, base, config=config)


def parse_float(token: str, *, config: FrozenConfig | None = None) -> ConversionResult:
    """Double-precision float."""
    return parse(token, NumericKind.FLOAT, config=config)


def parse_or_raise(
    token: str,
    kind: NumericKind | str,
    base: int | None = None,
    *,
    config: FrozenConfig | None = None,
) -> Number:
    """Like ``parse`` but return the value directly.

    Raises:
        ConversionError: The error a ``Failure`` would have carried.
            ``InvalidConfigurationError`` for a bad kind or base.
    """
    result = parse(token, kind, base, config=config)
    if isinstance(result, Failure):
        log.debug("Conversion failed: %s", result.error)
    return unwrap(result)
