"""Tests for routefs.compiler.config_loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from routefs.compiler.config_loader import (
    ConfigLoader,
    clear_config_cache,
    get_default_config,
    load_config,
)
from routefs.kernel.config import RouteFSConfig
from routefs.kernel.exceptions import ConfigurationError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestYamlConfig:
    def test_load_kind_config(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path / "routefs.yaml",
            f"""
kind: Config
spec:
  verbose: true
  strict_ordering: true
  partitions:
    site: {tmp_path / "site"}
  ignore_patterns: ["*.swp", ".git"]
  logging:
    level: debug
    format: json
""",
        )
        config = load_config(config_file)
        assert config.verbose is True
        assert config.strict_ordering is True
        assert config.partitions == {"site": str(tmp_path / "site")}
        assert config.ignore_patterns == ["*.swp", ".git"]
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_relative_partition_resolved_against_config_dir(self, tmp_path: Path) -> None:
        config_dir = tmp_path / "conf"
        config_dir.mkdir()
        config_file = _write(
            config_dir / "routefs.yaml",
            "kind: Config\nspec:\n  partitions:\n    assets: ./assets\n",
        )
        config = load_config(config_file)
        assert Path(config.partitions["assets"]) == (config_dir / "assets").absolute()

    def test_env_substitution(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_ROOT", str(tmp_path / "www"))
        config_file = _write(
            tmp_path / "routefs.yaml",
            "kind: Config\nspec:\n  partitions:\n    site: ${SITE_ROOT}\n",
        )
        assert load_config(config_file).partitions == {"site": str(tmp_path / "www")}

    def test_wrong_kind(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "routefs.yaml", "kind: Pipeline\nspec: {}\n")
        with pytest.raises(ConfigurationError, match="kind: Config"):
            load_config(config_file)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "routefs.yaml", "- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config(config_file)

    def test_partitions_must_be_mapping(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path / "routefs.yaml", "kind: Config\nspec:\n  partitions: [a, b]\n"
        )
        with pytest.raises(ConfigurationError, match="partitions"):
            load_config(config_file)

    def test_ignore_patterns_must_be_list(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path / "routefs.yaml", "kind: Config\nspec:\n  ignore_patterns: '*.swp'\n"
        )
        with pytest.raises(ConfigurationError, match="ignore_patterns"):
            load_config(config_file)


class TestTomlConfig:
    def test_pyproject_section(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path / "pyproject.toml",
            f"""
[project]
name = "blog"

[tool.routefs]
verbose = true

[tool.routefs.partitions]
site = "{tmp_path / "site"}"
""",
        )
        config = load_config(config_file)
        assert config.verbose is True
        assert config.partitions == {"site": str(tmp_path / "site")}

    def test_pyproject_without_section_uses_defaults(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "pyproject.toml", '[project]\nname = "blog"\n')
        assert load_config(config_file) == RouteFSConfig()

    def test_discovered_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write(tmp_path / "pyproject.toml", "[tool.routefs]\nstrict_ordering = true\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().strict_ordering is True


class TestDiscovery:
    def test_env_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = _write(tmp_path / "routefs.yaml", "kind: Config\nspec:\n  verbose: true\n")
        monkeypatch.setenv("ROUTEFS_CONFIG_PATH", str(config_file))
        monkeypatch.chdir(tmp_path)
        assert load_config().verbose is True

    def test_defaults_when_nothing_found(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_config() == get_default_config()

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")


class TestEnvOverrides:
    def test_verbose_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = _write(tmp_path / "routefs.yaml", "kind: Config\nspec:\n  verbose: false\n")
        monkeypatch.setenv("ROUTEFS_VERBOSE", "yes")
        assert load_config(config_file).verbose is True

    def test_invalid_verbose_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = _write(tmp_path / "routefs.yaml", "kind: Config\nspec:\n  verbose: true\n")
        monkeypatch.setenv("ROUTEFS_VERBOSE", "perhaps")
        assert load_config(config_file).verbose is True

    def test_log_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = _write(tmp_path / "routefs.yaml", "kind: Config\nspec: {}\n")
        monkeypatch.setenv("ROUTEFS_LOG_LEVEL", "warning")
        monkeypatch.setenv("ROUTEFS_LOG_FORMAT", "JSON")
        config = load_config(config_file)
        assert config.logging.level == "WARNING"
        assert config.logging.format == "json"


class TestCache:
    def test_cached_until_cleared(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "routefs.yaml", "kind: Config\nspec:\n  verbose: false\n")
        assert load_config(config_file).verbose is False

        _write(config_file, "kind: Config\nspec:\n  verbose: true\n")
        assert load_config(config_file).verbose is False

        clear_config_cache()
        assert load_config(config_file).verbose is True


class TestSubstituteEnvVars:
    def test_unset_variable_kept(self) -> None:
        loader = ConfigLoader()
        assert loader._substitute_env_vars("${ROUTEFS_TEST_UNSET_VAR}") == "${ROUTEFS_TEST_UNSET_VAR}"

    def test_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROUTEFS_TEST_VAR", "x")
        loader = ConfigLoader()
        data = {"a": ["${ROUTEFS_TEST_VAR}", 1], "b": {"c": "pre-${ROUTEFS_TEST_VAR}"}}
        assert loader._substitute_env_vars(data) == {"a": ["x", 1], "b": {"c": "pre-x"}}
