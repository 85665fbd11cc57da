"""Tests for configuration models."""

from __future__ import annotations

import dataclasses

import pytest

from routefs.kernel.config import LoggingConfig, RouteFSConfig
from routefs.kernel.exceptions import ValidationError


class TestRouteFSConfig:
    def test_defaults(self) -> None:
        config = RouteFSConfig()
        assert config.verbose is False
        assert config.strict_ordering is False
        assert config.partitions == {}
        assert config.ignore_patterns == []
        assert config.logging == LoggingConfig()

    def test_is_frozen(self) -> None:
        config = RouteFSConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.verbose = True  # type: ignore[misc]

    def test_rejects_empty_partition_name(self) -> None:
        with pytest.raises(ValidationError, match="partition name cannot be empty"):
            RouteFSConfig(partitions={"": "/srv/site"})

    def test_rejects_empty_partition_root(self) -> None:
        with pytest.raises(ValidationError, match="root cannot be empty"):
            RouteFSConfig(partitions={"site": ""})


class TestLoggingConfig:
    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "structured"
        assert config.output_file is None
