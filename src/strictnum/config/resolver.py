"""Configuration resolution with precedence handling.

This module merges configuration from multiple sources according to the
documented precedence order:
Programmatic > Environment > Project file > Defaults
"""

import logging
from pathlib import Path
from typing import Any

from .audit import SourceTracker
from .env_loader import EnvironmentConfigLoader
from .file_loader import FileConfigLoader
from .schema import StrictnumSettings
from .types import ResolvedConfig

log = logging.getLogger(__name__)


class ConfigResolver:
    """Resolves configuration from multiple sources with proper precedence."""

    def __init__(self) -> None:
        """Initialize the configuration resolver."""
        self.file_loader = FileConfigLoader()
        self.env_loader = EnvironmentConfigLoader()

    def resolve(
        self,
        programmatic: dict[str, Any] | None = None,
        *,
        use_env_file: str | Path | None = None,
        project_root: Path | None = None,
    ) -> ResolvedConfig:
        """Resolve configuration from all sources with proper precedence.

        Args:
            programmatic: Programmatic overrides (highest precedence)
            use_env_file: Optional .env file to read
            project_root: Directory to search for pyproject.toml

        Returns:
            ResolvedConfig with merged values and source tracking.

        Raises:
            ValueError: If validation fails.
            ConfigFileError: If the project file is malformed.
        """
        source_tracker = SourceTracker()
        merged_config: dict[str, Any] = {}

        # Step 1: Schema defaults, read without consulting the environment
        for field, info in StrictnumSettings.model_fields.items():
            merged_config[field] = info.default
            source_tracker.set_origin(field, "default")

        # Step 2: Project file
        project_config = self.file_loader.load_project_config(project_root=project_root)
        for field, value in project_config.items():
            if field in merged_config:  # Only override known fields
                merged_config[field] = value
                source_tracker.set_origin(field, "file")

        # Step 3: Environment variables
        try:
            env_config = self.env_loader.load_env_config(env_file=use_env_file)
        except (ValueError, FileNotFoundError) as e:
            raise ValueError(f"Environment configuration error: {e}") from e
        for field, value in env_config.items():
            merged_config[field] = value
            source_tracker.set_origin(field, "env")

        # Step 4: Programmatic overrides
        for field, value in (programmatic or {}).items():
            if field in merged_config:
                merged_config[field] = value
                source_tracker.set_origin(field, "programmatic")

        # Step 5: Validate the final configuration
        try:
            final_config = StrictnumSettings(**merged_config).to_dict()
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {e}") from e

        resolved = ResolvedConfig(**final_config, origin=source_tracker.get_source_map())
        log.debug("Resolved strictnum configuration:\n%s", resolved.audit())
        return resolved
