"""Shared pytest fixtures for routefs tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from routefs.compiler.config_loader import clear_config_cache

_ENV_VARS = (
    "ROUTEFS_CONFIG_PATH",
    "ROUTEFS_VERBOSE",
    "ROUTEFS_LOG_LEVEL",
    "ROUTEFS_LOG_FORMAT",
    "ROUTEFS_LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Keep process environment and cached config files out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def log_capture():
    """Collect loguru records emitted while the test runs."""
    from loguru import logger

    captured_logs: list[dict] = []

    def sink(message):
        record = message.record
        captured_logs.append({
            "level": record["level"].name,
            "message": record["message"],
            "extra": dict(record["extra"]),
        })

    handler_id = logger.add(sink, level="DEBUG", format="{message}")
    yield captured_logs
    logger.remove(handler_id)


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A small partition tree::

    site/
        index.md        "hi"
        posts/
            foo.md      "first post"
            bar.md      "second post"
        empty/
    """
    root = tmp_path / "site"
    (root / "posts").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "index.md").write_text("hi", encoding="utf-8")
    (root / "posts" / "foo.md").write_text("first post", encoding="utf-8")
    (root / "posts" / "bar.md").write_text("second post", encoding="utf-8")
    return root
