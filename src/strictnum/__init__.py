"""Strict, all-or-nothing conversion of strings into numbers."""

import importlib.metadata
import logging

from strictnum.config import FrozenConfig, ResolvedConfig, resolve_config
from strictnum.core.models import FailureReason, IntegerWidth, NumericKind
from strictnum.core.types import (
    ConversionRequest,
    Failure,
    Result,
    Success,
    is_success,
    unwrap,
    unwrap_or,
)
from strictnum.exceptions import (
    ConfigFileError,
    ConversionError,
    InvalidConfigurationError,
    StrictnumError,
)
from strictnum.parser import (
    ConversionResult,
    NumericParser,
    parse,
    parse_float,
    parse_hex,
    parse_int,
    parse_or_raise,
    parse_unsigned,
)
from strictnum.scanner import FloatScan, IntegerScan, scan_float, scan_integer

# Version handling
try:
    __version__ = importlib.metadata.version("strictnum")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Parsing
    "NumericParser",
    "parse",
    "parse_int",
    "parse_hex",
    "parse_unsigned",
    "parse_float",
    "parse_or_raise",
    # Scanning
    "scan_integer",
    "scan_float",
    "IntegerScan",
    "FloatScan",
    # Core Types
    "NumericKind",
    "FailureReason",
    "IntegerWidth",
    "ConversionRequest",
    "ConversionResult",
    "Result",
    "Success",
    "Failure",
    "is_success",
    "unwrap",
    "unwrap_or",
    # Configuration
    "FrozenConfig",
    "ResolvedConfig",
    "resolve_config",
    # Exceptions
    "StrictnumError",
    "ConversionError",
    "InvalidConfigurationError",
    "ConfigFileError",
]
