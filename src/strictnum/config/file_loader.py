"""Project file configuration loading.

Reads the ``[tool.strictnum]`` table from the nearest ``pyproject.toml``.
The lookup can be pinned to a specific file with the
``STRICTNUM_PYPROJECT_PATH`` environment variable.
"""

import os
from pathlib import Path
import tomllib
from typing import Any

from strictnum.exceptions import ConfigFileError

PYPROJECT_PATH_ENV = "STRICTNUM_PYPROJECT_PATH"


class FileConfigLoader:
    """Loads configuration from the project's pyproject.toml."""

    def load_project_config(self, project_root: Path | None = None) -> dict[str, Any]:
        """Load configuration from pyproject.toml in the project root.

        Args:
            project_root: Directory to search for pyproject.toml. If None,
                         searches current directory and parents.

        Returns:
            Dictionary of configuration values from the file.
            Empty dict if the file doesn't exist or has no strictnum section.

        Raises:
            ConfigFileError: If the file exists but cannot be parsed or the
                section is not a table.
        """
        pyproject_path = self._find_pyproject_toml(project_root)
        if not pyproject_path:
            return {}

        try:
            with Path(pyproject_path).open(mode="rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigFileError(
                pyproject_path, f"Failed to parse TOML: {e}", cause=e
            ) from e

        section = data.get("tool", {}).get("strictnum", {})
        if not isinstance(section, dict):
            raise ConfigFileError(
                pyproject_path, "[tool.strictnum] must be a table"
            )
        return dict(section)

    def _find_pyproject_toml(self, start_dir: Path | None = None) -> Path | None:
        """Find pyproject.toml by searching up the directory tree.

        Returns:
            Path to pyproject.toml if found, None otherwise.
        """
        override = os.getenv(PYPROJECT_PATH_ENV)
        if override:
            path = Path(override)
            return path if path.exists() else None

        current = Path(start_dir or Path.cwd()).resolve()
        while current != current.parent:
            pyproject_path = current / "pyproject.toml"
            if pyproject_path.exists():
                return pyproject_path
            current = current.parent

        return None
