"""Tests for the change log."""

from __future__ import annotations

import pytest

from routefs.drivers.vfs.change_log import ChangeLog, KeepAll
from routefs.kernel.domain.vfs import VfsChange
from routefs.kernel.exceptions import ValidationError
from routefs.kernel.ports.vfs import ChangeRetention


class KeepLast:
    """Retention that keeps only the newest ``n`` entries."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.calls = 0

    def apply(self, history: list[VfsChange]) -> None:
        self.calls += 1
        del history[: max(0, len(history) - self.n)]


def _routes(changes: list[VfsChange]) -> list[list[str]]:
    return [change.route for change in changes]


class TestAppend:
    def test_append_shares_timestamp(self) -> None:
        log = ChangeLog()
        added = log.append(1.0, [["s", "a"], ["s", "b"]])
        assert added == 2
        assert log.history == [
            VfsChange(timestamp=1.0, route=["s", "a"]),
            VfsChange(timestamp=1.0, route=["s", "b"]),
        ]

    def test_append_nothing(self) -> None:
        log = ChangeLog()
        assert log.append(1.0, []) == 0
        assert len(log) == 0

    def test_history_returns_copy(self) -> None:
        log = ChangeLog()
        log.append(1.0, [["s", "a"]])
        log.history.clear()
        assert len(log) == 1

    def test_lenient_ordering_by_default(self) -> None:
        log = ChangeLog()
        log.append(5.0, [["s", "a"]])
        log.append(1.0, [["s", "b"]])
        assert len(log) == 2

    def test_strict_ordering_rejects_regression(self) -> None:
        log = ChangeLog(strict_ordering=True)
        log.append(5.0, [["s", "a"]])
        with pytest.raises(ValidationError, match="timestamp"):
            log.append(4.0, [["s", "b"]])
        assert len(log) == 1

    def test_strict_ordering_allows_equal(self) -> None:
        log = ChangeLog(strict_ordering=True)
        log.append(5.0, [["s", "a"]])
        log.append(5.0, [["s", "b"]])
        assert len(log) == 2


class TestSince:
    @pytest.fixture
    def log(self) -> ChangeLog:
        log = ChangeLog()
        log.append(1.0, [["s", "a"]])
        log.append(2.0, [["s", "b"], ["s", "c"]])
        log.append(3.0, [["s", "d"]])
        return log

    def test_empty_log(self) -> None:
        assert ChangeLog().since(0.0) == []

    def test_suffix_inclusive(self, log: ChangeLog) -> None:
        assert _routes(log.since(2.0)) == [["s", "b"], ["s", "c"], ["s", "d"]]

    def test_between_timestamps(self, log: ChangeLog) -> None:
        assert _routes(log.since(1.5)) == [["s", "b"], ["s", "c"], ["s", "d"]]

    def test_everything(self, log: ChangeLog) -> None:
        assert log.since(0.0) == log.history

    def test_after_newest(self, log: ChangeLog) -> None:
        assert log.since(3.5) == []

    def test_stops_at_first_older_entry(self) -> None:
        log = ChangeLog()
        log.append(5.0, [["s", "old-but-large"]])
        log.append(1.0, [["s", "a"]])
        log.append(6.0, [["s", "b"]])
        # Only the contiguous suffix is returned when ordering is violated
        assert _routes(log.since(2.0)) == [["s", "b"]]


class TestRetention:
    def test_keep_all_is_default(self) -> None:
        assert isinstance(KeepAll(), ChangeRetention)
        log = ChangeLog()
        for i in range(10):
            log.append(float(i), [["s", str(i)]])
        assert len(log) == 10

    def test_custom_retention_applied_after_append(self) -> None:
        retention = KeepLast(2)
        log = ChangeLog(retention=retention)
        log.append(1.0, [["s", "a"]])
        log.append(2.0, [["s", "b"]])
        log.append(3.0, [["s", "c"]])
        assert retention.calls == 3
        assert _routes(log.history) == [["s", "b"], ["s", "c"]]

    def test_retention_not_applied_for_empty_append(self) -> None:
        retention = KeepLast(2)
        log = ChangeLog(retention=retention)
        log.append(1.0, [])
        assert retention.calls == 0
