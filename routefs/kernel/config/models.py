"""Configuration data models for routefs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from routefs.kernel.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for routefs.

    Attributes
    ----------
    level : str, default="INFO"
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to write logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.routefs.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export ROUTEFS_LOG_LEVEL=DEBUG
    export ROUTEFS_LOG_FORMAT=json
    ```
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "structured", "rich"] = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True


@dataclass(frozen=True, slots=True)
class RouteFSConfig:
    """Complete routefs configuration.

    Attributes
    ----------
    verbose : bool
        Log each change before and after it runs through the plugin gateway
    strict_ordering : bool
        Reject changes whose timestamp is below the last recorded one
    partitions : dict[str, str]
        Partition name to absolute physical root
    ignore_patterns : list[str]
        fnmatch patterns for the default plugin chain to suppress
    logging : LoggingConfig
        Logging configuration
    """

    verbose: bool = False
    strict_ordering: bool = False
    partitions: dict[str, str] = field(default_factory=dict)
    ignore_patterns: list[str] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Validate partition entries.

        Raises
        ------
        ValidationError
            If a partition name is empty or its root is empty
        """
        for name, root in self.partitions.items():
            if not name:
                raise ValidationError("partitions", "partition name cannot be empty")
            if not root:
                raise ValidationError(f"partitions.{name}", "root cannot be empty")
