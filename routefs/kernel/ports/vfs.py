"""VFS port: symbolic route access over physical partitions.

Every item is addressed by a route whose first segment names a
partition. Reads materialize a full snapshot; changes are recorded in an
append-only log that consumers poll with time-window queries.

**Namespace:**

.. code-block:: text

    [<partition>]                 partition root
    [<partition>, "a", "b.txt"]   <root>/a/b.txt

Drivers
-------
- ``LocalVFS``: partitions on the local filesystem, in-process change log.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from routefs.kernel.domain.vfs import Route, SkippedEntry, VfsChange, VfsItem


@runtime_checkable
class ChangeRetention(Protocol):
    """Retention hook applied to the change log after every append.

    Implementations may drop entries from the front of ``history`` in
    place; they must keep the remaining entries in order.
    """

    @abstractmethod
    def apply(self, history: list[VfsChange]) -> None: ...


@runtime_checkable
class VFS(Protocol):
    """Virtual filesystem port."""

    @abstractmethod
    def register_partition(self, name: str, root: str | Path) -> None:
        """Register (or replace) a partition.

        Args
        ----
            name: Partition name, used as the first route segment.
            root: Absolute physical directory root.
        """
        ...

    @abstractmethod
    def partitions(self) -> dict[str, Path]:
        """Return a copy of the partition table."""
        ...

    @abstractmethod
    def resolve(self, route: Sequence[str]) -> Path:
        """Translate a route into a physical path."""
        ...

    @abstractmethod
    def read(
        self, route: Sequence[str], *, skipped: list[SkippedEntry] | None = None
    ) -> VfsItem:
        """Materialize the item at ``route``.

        Args
        ----
            route: Route to read.
            skipped: Optional list collecting children omitted because
                they could not be read.

        Returns
        -------
            A fully materialized snapshot.
        """
        ...

    @abstractmethod
    def write(self, route: Sequence[str], item: VfsItem) -> None: ...

    @abstractmethod
    def delete(self, route: Sequence[str]) -> None: ...

    @abstractmethod
    def current_time(self) -> float:
        """Seconds elapsed since the VFS was constructed."""
        ...

    @abstractmethod
    def add_change(self, timestamp: float, route: Sequence[str]) -> None:
        """Record a raw change through the plugin gateway."""
        ...

    @abstractmethod
    def changes_since(self, timestamp: float) -> list[VfsChange]:
        """Return every logged change with ``timestamp`` at or after the given one."""
        ...


__all__ = ["VFS", "ChangeRetention"]
