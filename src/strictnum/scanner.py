"""Maximal-prefix scanners for integer and floating-point grammars.

Each scanner walks a token once and reports how many leading characters
form a valid number, the same question ``strtol``-family end pointers
answer. Scanners never look past the prefix and never fail: a token with
no valid prefix simply reports ``consumed == 0``. Deciding whether a scan
is acceptable belongs to the parser.

Only ASCII digits are recognized. Unicode digits, digit-group underscores
and surrounding whitespace (all of which ``int()`` and ``float()`` would
happily accept) end the prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
import string

_DIGITS = string.digits + string.ascii_lowercase
_DECIMAL = frozenset(string.digits)
_SPECIAL_FLOATS = ("infinity", "inf", "nan")

MIN_BASE = 2
MAX_BASE = 36


@dataclass(frozen=True, slots=True)
class IntegerScan:
    """Outcome of scanning an integer prefix.

    Attributes:
        consumed: Length of the valid prefix.
        negative: Whether a leading minus sign was consumed.
        digits_start: Index of the first digit (after sign and ``0x``).
    """

    consumed: int
    negative: bool = False
    digits_start: int = 0

    @property
    def digits(self) -> slice:
        """Slice of the token holding the digits."""
        return slice(self.digits_start, self.consumed)


@dataclass(frozen=True, slots=True)
class FloatScan:
    """Outcome of scanning a floating-point prefix.

    Attributes:
        consumed: Length of the valid prefix.
        mantissa_nonzero: Whether any mantissa digit is non-zero.
        special: True when the prefix is ``inf``/``infinity``/``nan``.
    """

    consumed: int
    mantissa_nonzero: bool = False
    special: bool = False


def digit_set(base: int) -> frozenset[str]:
    """Return the characters that are digits in ``base``, in both cases."""
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    allowed = _DIGITS[:base]
    return frozenset(allowed + allowed.upper())


def _count_run(token: str, start: int, allowed: frozenset[str]) -> int:
    end = start
    while end < len(token) and token[end] in allowed:
        end += 1
    return end - start


def _skip_sign(token: str, pos: int) -> tuple[int, bool]:
    if pos < len(token) and token[pos] in "+-":
        return pos + 1, token[pos] == "-"
    return pos, False


def scan_integer(
    token: str,
    *,
    base: int,
    signed: bool,
    allow_hex_prefix: bool = False,
) -> IntegerScan:
    """Scan the longest integer prefix of ``token`` in ``base``.

    Args:
        token: Text to scan.
        base: Radix, 2 through 36.
        signed: Accept a single leading ``+`` or ``-``.
        allow_hex_prefix: Accept ``0x``/``0X`` before the digits. Only
            meaningful for base 16. A prefix with no hex digit after it
            consumes just the ``0``.

    Returns:
        IntegerScan describing the prefix. ``consumed`` is 0 when the token
        does not start with a number.
    """
    allowed = digit_set(base)
    pos, negative = _skip_sign(token, 0) if signed else (0, False)

    if (
        allow_hex_prefix
        and token[pos : pos + 2] in ("0x", "0X")
        and _count_run(token, pos + 2, allowed) > 0
    ):
        pos += 2

    run = _count_run(token, pos, allowed)
    if run == 0:
        return IntegerScan(consumed=0)
    return IntegerScan(consumed=pos + run, negative=negative, digits_start=pos)


def scan_float(token: str, *, allow_special: bool = False) -> FloatScan:
    """Scan the longest decimal floating-point prefix of ``token``.

    The grammar is an optional sign, a mantissa of digits with an optional
    decimal point (at least one digit on either side of it), and an
    optional exponent. An exponent marker that is not followed by at least
    one digit is left unconsumed.
    """
    start, _ = _skip_sign(token, 0)

    if allow_special:
        lowered = token[start:].lower()
        for word in _SPECIAL_FLOATS:
            if lowered.startswith(word):
                return FloatScan(consumed=start + len(word), special=True)

    pos = start
    int_digits = _count_run(token, pos, _DECIMAL)
    pos += int_digits
    frac_digits = 0
    if pos < len(token) and token[pos] == ".":
        frac_digits = _count_run(token, pos + 1, _DECIMAL)
        if int_digits or frac_digits:
            pos += 1 + frac_digits
    if int_digits + frac_digits == 0:
        return FloatScan(consumed=0)

    mantissa_nonzero = any(ch in "123456789" for ch in token[start:pos])

    if pos < len(token) and token[pos] in "eE":
        exp_start, _ = _skip_sign(token, pos + 1)
        exp_digits = _count_run(token, exp_start, _DECIMAL)
        if exp_digits:
            pos = exp_start + exp_digits

    return FloatScan(consumed=pos, mantissa_nonzero=mantissa_nonzero)
