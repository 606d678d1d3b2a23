"""Numeric kinds, failure reasons and integer widths."""

from enum import Enum, IntEnum


class NumericKind(Enum):
    """The requested interpretation of a token."""

    SIGNED_DECIMAL = "signed_decimal"
    SIGNED_HEX = "signed_hex"
    UNSIGNED = "unsigned"
    FLOAT = "float"

    @property
    def fixed_base(self) -> int | None:
        """Radix implied by the kind, or None when the caller supplies it."""
        return _FIXED_BASES.get(self)


_FIXED_BASES = {
    NumericKind.SIGNED_DECIMAL: 10,
    NumericKind.SIGNED_HEX: 16,
}


class FailureReason(Enum):
    """Why a conversion did not produce a value."""

    EMPTY_INPUT = "empty_input"
    NON_NUMERIC_CHARACTER = "non_numeric_character"
    PARTIAL_CONSUMPTION = "partial_consumption"
    OUT_OF_RANGE = "out_of_range"
    INVALID_CONFIGURATION = "invalid_configuration"

    @property
    def is_parse_failure(self) -> bool:
        """False for caller errors (bad kind or base), True for token errors."""
        return self is not FailureReason.INVALID_CONFIGURATION


class IntegerWidth(IntEnum):
    """Bit width of the integer type a conversion must fit into."""

    BITS_8 = 8
    BITS_16 = 16
    BITS_32 = 32
    BITS_64 = 64

    @classmethod
    def coerce(cls, value: object) -> "IntegerWidth":
        """Return the width for an int, a numeric string or a member.

        Raises:
            ValueError: If ``value`` is not a supported width.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().isdecimal():
            value = int(value.strip())
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass

        allowed = ", ".join(str(w.value) for w in cls)
        raise ValueError(f"Invalid int_bits: {value!r}. Must be one of: {allowed}")

    def signed_range(self) -> tuple[int, int]:
        """Inclusive bounds of the two's-complement signed type."""
        half = 1 << (self.value - 1)
        return -half, half - 1

    def unsigned_range(self) -> tuple[int, int]:
        """Inclusive bounds of the unsigned type."""
        return 0, (1 << self.value) - 1
