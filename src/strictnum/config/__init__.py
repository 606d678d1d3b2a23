"""Configuration management for strictnum.

Resolve once, freeze, then hand the frozen config to a parser:

- ResolvedConfig: Post-resolution configuration with audit metadata
- FrozenConfig: Immutable configuration used by NumericParser
- SourceMap: Audit tracking of configuration value origins
"""

from strictnum.exceptions import ConfigFileError

from .api import resolve_config
from .audit import SourceTracker
from .env_loader import EnvironmentConfigLoader
from .file_loader import FileConfigLoader
from .resolver import ConfigResolver
from .schema import StrictnumSettings
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [  # noqa: RUF022
    # Main API
    "resolve_config",
    # Core types
    "ResolvedConfig",
    "FrozenConfig",
    "SourceMap",
    "ConfigOrigin",
    # Advanced usage
    "StrictnumSettings",
    "ConfigResolver",
    "EnvironmentConfigLoader",
    "FileConfigLoader",
    "ConfigFileError",
    "SourceTracker",
]
