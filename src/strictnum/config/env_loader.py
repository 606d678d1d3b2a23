"""Environment variable configuration loading.

This module handles loading configuration from environment variables with
the STRICTNUM_ prefix, including optional .env file support and type
coercion.
"""

import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from .schema import StrictnumSettings

ENV_VARS = {
    "STRICTNUM_INT_BITS": "int_bits",
    "STRICTNUM_ALLOW_SPECIAL_FLOATS": "allow_special_floats",
    "STRICTNUM_REJECT_UNDERFLOW": "reject_underflow",
}


class EnvironmentConfigLoader:
    """Loads configuration from STRICTNUM_* environment variables."""

    def load_env_config(self, env_file: str | Path | None = None) -> dict[str, Any]:
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to a .env file. Its values are used only
                for variables that are not already set in the process
                environment; ``os.environ`` itself is left untouched.

        Returns:
            Dictionary of configuration values found in the environment.
            Only includes fields that are actually set (not defaults).

        Raises:
            FileNotFoundError: If ``env_file`` does not exist.
            ValueError: If environment variables contain invalid values.
        """
        environ: dict[str, str] = {}
        if env_file:
            environ.update(self._read_env_file(env_file))
        environ.update(os.environ)

        env_values = {
            field_name: environ[env_var]
            for env_var, field_name in ENV_VARS.items()
            if environ.get(env_var) is not None
        }
        if not env_values:
            return {}

        try:
            settings = StrictnumSettings(**env_values)
        except Exception as e:
            env_var_list = [
                f"{env_var}={environ[env_var]}"
                for env_var, field_name in ENV_VARS.items()
                if field_name in env_values
            ]
            raise ValueError(
                f"Invalid environment variable values: {', '.join(env_var_list)}. "
                f"Error: {e}"
            ) from e

        return {field_name: getattr(settings, field_name) for field_name in env_values}

    def _read_env_file(self, env_file: str | Path) -> dict[str, str]:
        env_path = Path(env_file)
        if not env_path.exists():
            raise FileNotFoundError(f"Environment file not found: {env_path}")
        return {
            key: value
            for key, value in dotenv_values(env_path).items()
            if value is not None
        }
