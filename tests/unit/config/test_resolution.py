"""Unit tests for the configuration system.

These tests verify:
- Defaults when no source sets a value.
- Loading from STRICTNUM_* variables, a .env file and [tool.strictnum].
- Precedence: programmatic > env > file > defaults.
"""

import os
from unittest.mock import patch

import pytest

from strictnum import NumericParser, Success, parse_int
from strictnum.config import (
    ConfigFileError,
    FrozenConfig,
    StrictnumSettings,
    resolve_config,
)
from strictnum.core.models import IntegerWidth


class TestConfigurationSystem:
    """A test suite for the configuration resolution logic."""

    @pytest.mark.unit
    def test_defaults(self):
        """With no sources every field comes from the schema defaults."""
        resolved = resolve_config()

        assert resolved.int_bits is IntegerWidth.BITS_32
        assert resolved.allow_special_floats is False
        assert resolved.reject_underflow is True
        assert set(resolved.origin.values()) == {"default"}
        assert resolved.to_frozen() == FrozenConfig()

    @pytest.mark.unit
    def test_environment_variables(self):
        """STRICTNUM_* variables are read and coerced."""
        with patch.dict(
            os.environ,
            {"STRICTNUM_INT_BITS": "64", "STRICTNUM_ALLOW_SPECIAL_FLOATS": "true"},
        ):
            resolved = resolve_config()

        assert resolved.int_bits is IntegerWidth.BITS_64
        assert resolved.allow_special_floats is True
        assert resolved.origin["int_bits"] == "env"
        assert resolved.origin["reject_underflow"] == "default"

    @pytest.mark.unit
    def test_invalid_environment_value(self):
        """Unsupported widths are rejected with the offending variable named."""
        with (
            patch.dict(os.environ, {"STRICTNUM_INT_BITS": "12"}),
            pytest.raises(ValueError, match="STRICTNUM_INT_BITS=12"),
        ):
            resolve_config()

    @pytest.mark.unit
    def test_env_file(self, tmp_path):
        """A .env file supplies values the process environment lacks."""
        env_file = tmp_path / ".env"
        env_file.write_text("STRICTNUM_INT_BITS=16\nSTRICTNUM_REJECT_UNDERFLOW=false\n")

        with patch.dict(os.environ, {"STRICTNUM_REJECT_UNDERFLOW": "true"}):
            resolved = resolve_config(use_env_file=env_file)

        assert resolved.int_bits is IntegerWidth.BITS_16
        # The real environment wins over the file
        assert resolved.reject_underflow is True
        assert "STRICTNUM_INT_BITS" not in os.environ

    @pytest.mark.unit
    def test_missing_env_file(self, tmp_path):
        """Asking for a .env file that does not exist is an error."""
        with pytest.raises(ValueError, match="Environment file not found"):
            resolve_config(use_env_file=tmp_path / "missing.env")

    @pytest.mark.unit
    def test_project_file(self, write_pyproject):
        """[tool.strictnum] in pyproject.toml is read."""
        write_pyproject("[tool.strictnum]\nint_bits = 8\nallow_special_floats = true\n")

        resolved = resolve_config()

        assert resolved.int_bits is IntegerWidth.BITS_8
        assert resolved.allow_special_floats is True
        assert resolved.origin["int_bits"] == "file"

    @pytest.mark.unit
    def test_project_file_unknown_keys_ignored(self, write_pyproject):
        """Unknown keys in the table do not break resolution."""
        write_pyproject("[tool.strictnum]\nfuture_option = 1\n")

        resolved = resolve_config()

        assert "future_option" not in resolved.origin

    @pytest.mark.unit
    def test_malformed_project_file(self, write_pyproject):
        """Broken TOML raises ConfigFileError."""
        write_pyproject("[tool.strictnum\n")

        with pytest.raises(ConfigFileError, match="Failed to parse TOML"):
            resolve_config()

    @pytest.mark.unit
    def test_precedence(self, write_pyproject):
        """Programmatic beats env, env beats file."""
        write_pyproject(
            "[tool.strictnum]\nint_bits = 8\nallow_special_floats = true\n"
            "reject_underflow = false\n"
        )

        with patch.dict(
            os.environ,
            {"STRICTNUM_INT_BITS": "16", "STRICTNUM_ALLOW_SPECIAL_FLOATS": "false"},
        ):
            resolved = resolve_config(programmatic={"int_bits": 64})

        assert resolved.int_bits is IntegerWidth.BITS_64
        assert resolved.origin["int_bits"] == "programmatic"
        assert resolved.allow_special_floats is False
        assert resolved.origin["allow_special_floats"] == "env"
        assert resolved.reject_underflow is False
        assert resolved.origin["reject_underflow"] == "file"

    @pytest.mark.unit
    def test_invalid_programmatic_value(self):
        """Programmatic values are validated like any other source."""
        with pytest.raises(ValueError, match="Configuration validation failed"):
            resolve_config(programmatic={"int_bits": 128})

    @pytest.mark.unit
    def test_with_overrides_and_audit(self):
        """Overrides mark their fields programmatic and show up in the audit."""
        resolved = resolve_config().with_overrides(int_bits=IntegerWidth.BITS_64, bogus=1)

        assert resolved.origin["int_bits"] == "programmatic"
        assert "bogus" not in resolved.origin
        assert resolved.audit().splitlines() == [
            "int_bits: programmatic:64",
            "allow_special_floats: default:False",
            "reject_underflow: default:True",
        ]

    @pytest.mark.unit
    def test_with_overrides_accepts_plain_int_width(self):
        """A plain int width is coerced so the parser can use it."""
        resolved = resolve_config().with_overrides(int_bits=64)

        assert resolved.int_bits is IntegerWidth.BITS_64
        parser = NumericParser(resolved.to_frozen())
        assert parser.parse("4000000000", "signed_decimal") == Success(4_000_000_000)

    @pytest.mark.unit
    def test_with_overrides_validates_values(self):
        """Overrides go through the same validation as resolution."""
        with pytest.raises(ValueError, match="Invalid int_bits"):
            resolve_config().with_overrides(int_bits=12)

    @pytest.mark.unit
    def test_resolution_logged(self, strictnum_debug_logs):
        """Resolution logs the audit at DEBUG."""
        resolve_config()

        assert any("int_bits" in r.getMessage() for r in strictnum_debug_logs.records)

    @pytest.mark.unit
    def test_frozen_config_drives_parser(self):
        """A resolved config changes what the parser accepts."""
        big = "4000000000"
        assert not isinstance(parse_int(big), Success)

        parser = NumericParser(resolve_config({"int_bits": 64}).to_frozen())

        assert parser.parse(big, "signed_decimal") == Success(4_000_000_000)

    @pytest.mark.unit
    def test_parse_does_not_read_environment(self):
        """Module-level parse uses library defaults, not STRICTNUM_* variables."""
        with patch.dict(os.environ, {"STRICTNUM_INT_BITS": "64"}):
            assert not isinstance(parse_int("4000000000"), Success)


class TestFrozenConfig:
    """FrozenConfig construction"""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [64, "64", IntegerWidth.BITS_64])
    def test_int_bits_coerced(self, value):
        """Ints and numeric strings become IntegerWidth members."""
        config = FrozenConfig(int_bits=value)

        assert config.int_bits is IntegerWidth.BITS_64
        assert parse_int("4000000000", config=config) == Success(4_000_000_000)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [12, "wide", False])
    def test_unsupported_width_rejected(self, value):
        """Unsupported widths fail at construction, not at parse time."""
        with pytest.raises(ValueError, match="Invalid int_bits"):
            FrozenConfig(int_bits=value)


class TestSettingsSchema:
    """StrictnumSettings coercion"""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [8, "16", " 32 ", IntegerWidth.BITS_64])
    def test_int_bits_coercion(self, value):
        """Ints, numeric strings and enum members are accepted."""
        settings = StrictnumSettings(int_bits=value)
        assert isinstance(settings.int_bits, IntegerWidth)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [0, 12, "wide", True])
    def test_int_bits_rejected(self, value):
        """Anything else fails validation."""
        with pytest.raises(ValueError, match="Invalid int_bits"):
            StrictnumSettings(int_bits=value)
