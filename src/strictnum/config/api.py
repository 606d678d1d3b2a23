"""Public API for the configuration system."""

from pathlib import Path
from typing import Any

from .resolver import ConfigResolver
from .types import ResolvedConfig

# Global resolver instance for efficient reuse
_resolver = ConfigResolver()


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    use_env_file: str | Path | None = None,
    project_root: Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration from all sources with proper precedence.

    Precedence: Programmatic > Environment > Project file > Defaults

    Args:
        programmatic: Dictionary of programmatic overrides (highest precedence).
                     Only known configuration fields are used.
        use_env_file: Optional path to a .env file read alongside the
                     process environment.
        project_root: Directory to search for pyproject.toml. If None,
                     searches current directory and parents.

    Returns:
        ResolvedConfig with merged values and source tracking for audit.

    Raises:
        ValueError: If validation fails or environment variables contain
                   invalid values.
        ConfigFileError: If pyproject.toml exists but is malformed.

    Example:
        config = resolve_config({"int_bits": 64})
        parser = NumericParser(config.to_frozen())
    """
    return _resolver.resolve(
        programmatic, use_env_file=use_env_file, project_root=project_root
    )
