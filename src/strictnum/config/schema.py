"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces
configuration values from the environment, the project file and
programmatic overrides into the correct types with proper defaults.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from strictnum.core.models import IntegerWidth


class StrictnumSettings(BaseSettings):
    """Pydantic settings schema for strictnum configuration.

    Integrates with environment variables using the STRICTNUM_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRICTNUM_",
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    int_bits: IntegerWidth = Field(
        default=IntegerWidth.BITS_32,
        description="Bit width integer conversions must fit into",
    )

    allow_special_floats: bool = Field(
        default=False,
        description="Accept inf, infinity and nan as float tokens",
    )

    reject_underflow: bool = Field(
        default=True,
        description="Treat a non-zero float that rounds to 0.0 as out of range",
    )

    @field_validator("int_bits", mode="before")
    @classmethod
    def parse_int_bits(cls, v: Any) -> IntegerWidth:
        """Parse the integer width from an int, a numeric string or the enum."""
        return IntegerWidth.coerce(v)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary suitable for SourceMap annotation."""
        return {
            "int_bits": self.int_bits,
            "allow_special_floats": self.allow_special_floats,
            "reject_underflow": self.reject_underflow,
        }
