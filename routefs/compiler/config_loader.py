"""Configuration loader for routefs.

Parses configuration into :class:`RouteFSConfig`. Supports two sources:

1. **kind: Config YAML**, loaded via explicit path or the
   ``ROUTEFS_CONFIG_PATH`` env var.
2. **pyproject.toml [tool.routefs]**, the auto-discovery fallback.

Example YAML::

    kind: Config
    spec:
      verbose: true
      partitions:
        site: ${SITE_ROOT}
        assets: ./assets        # relative to the config file
      ignore_patterns: ["*.swp", ".git"]
      logging:
        level: DEBUG
"""

from __future__ import annotations

import os
import re
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, cast

import yaml

from routefs.kernel.config.models import LoggingConfig, RouteFSConfig
from routefs.kernel.exceptions import ConfigurationError
from routefs.kernel.logging import get_logger

# Constants for boolean environment variable parsing
_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse boolean from environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


@lru_cache(maxsize=32)
def _load_and_parse_cached(path_str: str) -> RouteFSConfig:
    """Cached configuration loader."""
    loader = ConfigLoader()
    return loader._load_and_parse(Path(path_str))


class ConfigLoader:
    """Loads and processes routefs configuration files."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    def load_config_file(self, path: str | Path | None = None) -> RouteFSConfig:
        """Load configuration from YAML or pyproject.toml.

        Parameters
        ----------
        path : str | Path | None
            Path to config file. If None, searches using discovery order.

        Returns
        -------
        RouteFSConfig
            Parsed configuration with environment variables substituted
        """
        config_path = self._find_config_file(path)
        return _load_and_parse_cached(str(config_path.absolute()))

    def _load_and_parse(self, config_path: Path) -> RouteFSConfig:
        logger.info("Loading configuration from {path}", path=str(config_path))

        if config_path.suffix in (".yaml", ".yml"):
            data = self._load_yaml(config_path)
        else:
            data = self._load_toml(config_path)

        data = self._substitute_env_vars(data)
        return self._parse_config(data, base_dir=config_path.parent)

    def _load_yaml(self, config_path: Path) -> dict[str, Any]:
        """Load the ``spec`` mapping of a kind: Config YAML file.

        Raises
        ------
        ConfigurationError
            If the YAML file is not a valid kind: Config manifest
        """
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationError(
                config_path.name, f"expected a mapping, got {type(data).__name__}"
            )

        kind = data.get("kind")
        if kind != "Config":
            raise ConfigurationError(
                config_path.name,
                f"YAML config files must use 'kind: Config', got 'kind: {kind}'",
            )

        spec = data.get("spec", {})
        if not isinstance(spec, dict):
            raise ConfigurationError(config_path.name, "'spec' must be a mapping")
        return spec

    def _load_toml(self, config_path: Path) -> dict[str, Any]:
        with config_path.open("rb") as f:
            data = tomllib.load(f)

        if "tool" in data and "routefs" in data.get("tool", {}):
            return cast("dict[str, Any]", data["tool"]["routefs"])
        if config_path.name == "pyproject.toml":
            logger.warning("No [tool.routefs] section found in pyproject.toml, using defaults")
            return {}
        return data

    def _find_config_file(self, path: str | Path | None) -> Path:
        """Find configuration file.

        Discovery order:
        1. Explicit path argument
        2. ``ROUTEFS_CONFIG_PATH`` env var
        3. ``pyproject.toml`` in CWD
        4. ``pyproject.toml`` in parent directories (with ``[tool.routefs]``)

        Raises
        ------
        FileNotFoundError
            If no configuration file is found
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("ROUTEFS_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug("Using config from ROUTEFS_CONFIG_PATH: {}", config_path)
                return config_path
            logger.warning("ROUTEFS_CONFIG_PATH set but file not found: {}", config_path)

        if Path("pyproject.toml").exists():
            return Path("pyproject.toml")

        current = Path.cwd()
        while current != current.parent:
            pyproject = current / "pyproject.toml"
            if pyproject.exists():
                with pyproject.open("rb") as f:
                    data = tomllib.load(f)
                if "routefs" in data.get("tool", {}):
                    return pyproject
            current = current.parent

        raise FileNotFoundError(
            "No configuration file found. Provide a kind: Config YAML path, "
            "set ROUTEFS_CONFIG_PATH, or add [tool.routefs] to pyproject.toml"
        )

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` placeholders with environment values.

        Unset variables keep their placeholder.
        """
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    logger.debug(
                        "Environment variable ${{{var_name}}} not found, keeping placeholder",
                        var_name=var_name,
                    )
                    return match.group(0)
                return value

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any], *, base_dir: Path) -> RouteFSConfig:
        """Parse raw configuration data into RouteFSConfig.

        Relative partition roots are resolved against ``base_dir``.

        Raises
        ------
        ConfigurationError
            If a section has the wrong shape
        """
        partitions_data = data.get("partitions", {})
        if not isinstance(partitions_data, dict):
            raise ConfigurationError("partitions", "expected a mapping of name to root path")

        partitions: dict[str, str] = {}
        for name, root in partitions_data.items():
            root_path = Path(str(root)).expanduser()
            if not root_path.is_absolute():
                root_path = (base_dir / root_path).absolute()
            partitions[str(name)] = str(root_path)
        if partitions:
            logger.debug("Loaded {count} partitions", count=len(partitions))

        ignore_patterns = data.get("ignore_patterns", [])
        if not isinstance(ignore_patterns, list):
            raise ConfigurationError("ignore_patterns", "expected a list of glob patterns")

        verbose = bool(data.get("verbose", False))
        if env_verbose := os.getenv("ROUTEFS_VERBOSE"):
            try:
                verbose = _parse_bool_env(env_verbose)
                logger.debug("Overriding verbose from env: {}", verbose)
            except ValueError as e:
                logger.warning("Invalid ROUTEFS_VERBOSE value: {}", e)

        return RouteFSConfig(
            verbose=verbose,
            strict_ordering=bool(data.get("strict_ordering", False)),
            partitions=partitions,
            ignore_patterns=[str(p) for p in ignore_patterns],
            logging=self._parse_logging_config(data.get("logging", {})),
        )

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration with environment variable overrides.

        Environment variables take precedence over config file values:
        - ROUTEFS_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        - ROUTEFS_LOG_FORMAT: Output format (console, json, structured, rich)
        - ROUTEFS_LOG_FILE: Optional file path for log output
        """
        level = logging_data.get("level", "INFO")
        format_type = logging_data.get("format", "structured")
        output_file = logging_data.get("output_file")

        if env_level := os.getenv("ROUTEFS_LOG_LEVEL"):
            level = env_level
            logger.debug("Overriding log level from env: {}", level)

        if env_format := os.getenv("ROUTEFS_LOG_FORMAT"):
            format_type = env_format.lower()
            logger.debug("Overriding log format from env: {}", format_type)

        if env_file := os.getenv("ROUTEFS_LOG_FILE"):
            output_file = env_file
            logger.debug("Overriding log file from env: {}", output_file)

        return LoggingConfig(
            level=cast("Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']", level.upper()),
            format=cast("Literal['console', 'json', 'structured', 'rich']", format_type),
            output_file=output_file,
            use_color=bool(logging_data.get("use_color", True)),
            include_timestamp=bool(logging_data.get("include_timestamp", True)),
        )


def load_config(path: str | Path | None = None) -> RouteFSConfig:
    """Load configuration from file or return defaults.

    Parameters
    ----------
    path : str | Path | None
        Path to configuration file or None to search

    Returns
    -------
    RouteFSConfig
        Loaded configuration or defaults if no file found
    """
    try:
        loader = ConfigLoader()
        return loader.load_config_file(path)
    except FileNotFoundError:
        if path:
            raise
        logger.info("No configuration file found, using defaults")
        return get_default_config()


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when configuration files have been modified.
    """
    _load_and_parse_cached.cache_clear()


def get_default_config() -> RouteFSConfig:
    """Default configuration: no partitions, quiet, unchecked ordering."""
    return RouteFSConfig()


__all__ = [
    "ConfigLoader",
    "clear_config_cache",
    "get_default_config",
    "load_config",
]
