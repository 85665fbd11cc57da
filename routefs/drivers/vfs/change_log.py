"""Append-only, timestamp-ordered change log."""

from __future__ import annotations

from typing import TYPE_CHECKING

from routefs.kernel.domain.vfs import VfsChange
from routefs.kernel.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from routefs.kernel.ports.vfs import ChangeRetention


class KeepAll:
    """Default retention: the log grows for the lifetime of the process."""

    def apply(self, history: list[VfsChange]) -> None:
        return None


class ChangeLog:
    """Chronologically sorted list of changes.

    Callers must append with non-decreasing timestamps. With
    ``strict_ordering`` enabled this is checked and a regressing
    timestamp raises :class:`ValidationError`; otherwise it is trusted and
    :meth:`since` may return wrong results if it is violated.
    """

    def __init__(
        self,
        *,
        strict_ordering: bool = False,
        retention: ChangeRetention | None = None,
    ) -> None:
        self._history: list[VfsChange] = []
        self._strict_ordering = strict_ordering
        self._retention: ChangeRetention = retention or KeepAll()

    @property
    def history(self) -> list[VfsChange]:
        """A copy of the full log, oldest first."""
        return list(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def check_order(self, timestamp: float) -> None:
        """Reject ``timestamp`` in strict mode if it would break ordering.

        Raises
        ------
        ValidationError
            In strict mode, if ``timestamp`` is below the newest entry's.
        """
        if self._strict_ordering and self._history and timestamp < self._history[-1].timestamp:
            raise ValidationError(
                "timestamp",
                f"must be >= last recorded timestamp {self._history[-1].timestamp}",
                value=timestamp,
            )

    def append(self, timestamp: float, routes: Iterable[Sequence[str]]) -> int:
        """Append one entry per route, all sharing ``timestamp``.

        Returns
        -------
            Number of entries appended.
        """
        self.check_order(timestamp)
        entries = [VfsChange(timestamp=timestamp, route=list(route)) for route in routes]
        if not entries:
            return 0
        self._history.extend(entries)
        self._retention.apply(self._history)
        return len(entries)

    def since(self, timestamp: float) -> list[VfsChange]:
        """Return the maximal suffix with entry timestamps ``>= timestamp``.

        Scans backward from the newest entry and stops at the first one
        below the threshold.
        """
        marker: int | None = None
        for index in range(len(self._history) - 1, -1, -1):
            if self._history[index].timestamp >= timestamp:
                marker = index
            else:
                break

        if marker is None:
            return []
        return self._history[marker:]


__all__ = ["ChangeLog", "KeepAll"]
