"""Configuration loader with multi-source support."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar

import platformdirs
import toml
from pydantic import BaseModel, ValidationError

from .errors import ConfigurationError

T = TypeVar('T', bound=BaseModel)

logger = logging.getLogger(__name__)


class ConfigLoader(Generic[T]):
    """Loads configuration from multiple sources with priority.

    Sources, lowest priority first: defaults file, system config, user
    config, environment variables.
    """

    def __init__(
        self,
        app_name: str,
        config_class: Type[T],
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.app_name = app_name
        self.config_class = config_class
        self.environ = environ if environ is not None else os.environ

    def load(self, defaults_path: Optional[Path] = None) -> T:
        """Load configuration from all sources.

        Args:
            defaults_path: Optional path to a defaults TOML file

        Returns:
            Validated configuration object

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        config_dict = self._load_defaults(defaults_path)

        for path in (self._system_config_path(), self._user_config_path()):
            if path.is_file():
                config_dict = self._deep_merge(config_dict, self._read_toml(path))

        config_dict = self._apply_env_overrides(config_dict)

        try:
            return self.config_class(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"invalid configuration: {e}", errors=e.errors()) from e

    def _load_defaults(self, defaults_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load the defaults file, explicit path first."""
        if defaults_path is not None:
            if not defaults_path.is_file():
                raise ConfigurationError(
                    f"config file not found: {defaults_path}", path=str(defaults_path)
                )
            return self._read_toml(defaults_path)

        fallback = Path.cwd() / "config" / "defaults.toml"
        if fallback.is_file():
            return self._read_toml(fallback)

        return {}

    def _system_config_path(self) -> Path:
        if os.name == "nt":  # Windows
            return (
                Path(self.environ.get("PROGRAMDATA", "C:\\ProgramData"))
                / self.app_name
                / "config.toml"
            )
        return Path(f"/etc/{self.app_name}/config.toml")

    def _user_config_path(self) -> Path:
        user_config_dir = platformdirs.user_config_dir(appname=self.app_name, appauthor=False)
        return Path(user_config_dir) / "config.toml"

    def _read_toml(self, path: Path) -> Dict[str, Any]:
        logger.debug(f"Loading config from {path}")
        try:
            return toml.load(path)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigurationError(f"cannot load config file {path}: {e}", path=str(path)) from e

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Override config with environment variables.

        Format: SFVTOOL_SECTION_KEY, e.g. SFVTOOL_CHECK_IGNORE_MISSING sets
        check.ignore_missing. Section names never contain underscores.
        """
        prefix = f"{self.app_name.upper().replace('-', '_')}_"

        for env_key, env_value in self.environ.items():
            if not env_key.startswith(prefix):
                continue

            section, _, key = env_key[len(prefix):].lower().partition("_")
            if not section or not key:
                logger.debug(f"Ignoring environment variable {env_key}")
                continue

            current = config.setdefault(section, {})
            if not isinstance(current, dict):
                raise ConfigurationError(f"cannot override {section}.{key}", variable=env_key)
            current[key] = self._convert_env_value(env_value)

        return config

    def _convert_env_value(self, value: str) -> Any:
        """Convert string environment variable to appropriate type."""
        if value.lower() in ("true", "yes", "1"):
            return True
        if value.lower() in ("false", "no", "0"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        # List (comma-separated)
        if "," in value:
            return [v.strip() for v in value.split(",")]

        return value
