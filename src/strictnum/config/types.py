"""Core configuration data types for strictnum.

This module defines the data structures used by the configuration system,
following the resolve-once, freeze-then-flow pattern.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

from strictnum.core.models import IntegerWidth

from .schema import StrictnumSettings

# --- Source Tracking Types ---

ConfigOrigin = Literal["programmatic", "env", "file", "default"]
SourceMap = Mapping[str, ConfigOrigin]

FIELD_ORDER = ("int_bits", "allow_special_floats", "reject_underflow")

# --- Core Configuration Data ---


class ResolvedConfig(NamedTuple):
    """Configuration after resolution from all sources, before freezing.

    This represents the validated, merged result of combining programmatic
    overrides, environment variables, the project file and defaults,
    together with where each value came from.
    """

    int_bits: IntegerWidth
    allow_special_floats: bool
    reject_underflow: bool

    # Audit metadata - tracks where each field value came from
    origin: SourceMap

    def to_frozen(self) -> "FrozenConfig":
        """Convert to the immutable configuration used by parsers.

        Returns:
            FrozenConfig with the same field values, excluding audit metadata.
        """
        return FrozenConfig(
            int_bits=self.int_bits,
            allow_special_floats=self.allow_special_floats,
            reject_underflow=self.reject_underflow,
        )

    def with_overrides(self, **overrides: object) -> "ResolvedConfig":
        """Create a new ResolvedConfig with programmatic overrides applied.

        Args:
            **overrides: Field values to override. Unknown fields are ignored.

        Returns:
            New ResolvedConfig with overrides applied and origin updated.

        Raises:
            ValueError: If an override fails schema validation.
        """
        new_values = self._asdict()
        new_origin = dict(self.origin)

        for field, value in overrides.items():
            if field in FIELD_ORDER:
                new_values[field] = value
                new_origin[field] = "programmatic"

        del new_values["origin"]
        try:
            validated = StrictnumSettings(**new_values).to_dict()
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {e}") from e
        return ResolvedConfig(**validated, origin=new_origin)

    def audit(self) -> str:
        """Generate a report showing the origin of each field.

        Returns:
            One ``field: origin:value`` line per field.
        """
        lines = []
        for field in FIELD_ORDER:
            if field not in self.origin:
                continue
            origin = self.origin[field]
            value = getattr(self, field)
            if isinstance(value, IntegerWidth):
                value = value.value
            if origin == "env":
                lines.append(f"{field}: env:STRICTNUM_{field.upper()}={value}")
            else:
                lines.append(f"{field}: {origin}:{value}")
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class FrozenConfig:
    """Immutable configuration handed to a ``NumericParser``.

    ``FrozenConfig()`` is the library default and never consults the
    environment; call ``resolve_config()`` to pick up ``STRICTNUM_*``
    variables or a ``[tool.strictnum]`` table.
    """

    int_bits: IntegerWidth = IntegerWidth.BITS_32
    allow_special_floats: bool = False
    reject_underflow: bool = True

    def __post_init__(self) -> None:
        """Normalize ``int_bits`` so parsers always see an IntegerWidth."""
        object.__setattr__(self, "int_bits", IntegerWidth.coerce(self.int_bits))
