"""Local in-process VFS driver.

Resolves routes against partitions on the local filesystem, reads
snapshots with :class:`TreeReader` and records changes expanded by an
injected :class:`PluginGateway`. This is the default VFS implementation.

Example
-------
.. code-block:: python

    vfs = LocalVFS(PluginChain())
    vfs.register_partition("site", "/srv/site")

    item = vfs.read(["site", "posts"])
    vfs.add_change(vfs.current_time(), ["site", "posts", "foo.md"])
    recent = vfs.changes_since(0.0)

The driver holds no locks. ``read`` and ``changes_since`` only read
state; ``add_change`` mutates the log and must be serialized by callers
that share one instance across threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from routefs.drivers.vfs.change_log import ChangeLog
from routefs.drivers.vfs.partitions import PartitionTable
from routefs.drivers.vfs.reader import TreeReader
from routefs.kernel.exceptions import UnsupportedOperationError
from routefs.kernel.logging import get_logger
from routefs.kernel.utils.clock import MonotonicClock

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from routefs.kernel.domain.vfs import SkippedEntry, VfsChange, VfsItem
    from routefs.kernel.ports.plugin_gateway import PluginGateway
    from routefs.kernel.ports.vfs import ChangeRetention

logger = get_logger(__name__)


class LocalVFS:
    """Virtual layer over several named parts of the local filesystem.

    Routes are lists of strings whose first segment names a partition;
    partitions are absolute physical directory roots.
    """

    def __init__(
        self,
        plugin_gateway: PluginGateway,
        *,
        verbose: bool = False,
        strict_ordering: bool = False,
        retention: ChangeRetention | None = None,
    ) -> None:
        self._partitions = PartitionTable()
        self._reader = TreeReader()
        self._clock = MonotonicClock()
        self._log = ChangeLog(strict_ordering=strict_ordering, retention=retention)
        self._plugin_gateway = plugin_gateway
        self._verbose = verbose

    # ------------------------------------------------------------------
    # Partitions
    # ------------------------------------------------------------------
    def register_partition(self, name: str, root: str | Path) -> None:
        self._partitions.register(name, root)

    def partitions(self) -> dict[str, Path]:
        """Return a copy of the partition table."""
        return self._partitions.as_dict()

    def resolve(self, route: Sequence[str]) -> Path:
        return self._partitions.resolve(route)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def read(
        self, route: Sequence[str], *, skipped: list[SkippedEntry] | None = None
    ) -> VfsItem:
        """Materialize the item at ``route``.

        Raises
        ------
        RouteError
            If the route cannot be resolved.
        ReadError
            If the entry at ``route`` cannot be read.
        UnsupportedTypeError
            If the entry at ``route`` is not a regular file or directory.
        """
        path = self._partitions.resolve(route)
        # A partition root may itself be a link; everything below it is not followed
        return self._reader.read_path(
            route, path, skipped=skipped, follow_symlinks=len(route) == 1
        )

    def write(self, route: Sequence[str], item: VfsItem) -> None:
        raise UnsupportedOperationError("write", route)

    def delete(self, route: Sequence[str]) -> None:
        raise UnsupportedOperationError("delete", route)

    # ------------------------------------------------------------------
    # Change tracking
    # ------------------------------------------------------------------
    def current_time(self) -> float:
        """Seconds elapsed since this VFS was constructed."""
        return self._clock.elapsed()

    @property
    def change_history(self) -> list[VfsChange]:
        """A copy of every recorded change, oldest first."""
        return self._log.history

    def add_change(self, timestamp: float, route: Sequence[str]) -> None:
        """Run a raw change through the plugin gateway and record the result.

        Every route the gateway returns is appended with the same
        ``timestamp`` in the gateway's order. ``None`` or an empty result
        records nothing.
        """
        self._log.check_order(timestamp)

        if self._verbose:
            logger.info("Received change {route}, running through plugins...", route=list(route))

        result = self._plugin_gateway.handle_file_change(list(route))
        routes = [list(r) for r in result] if result else []
        if not routes:
            return

        if self._verbose:
            logger.info("Adding changes from plugin: {routes}", routes=routes)

        self._log.append(timestamp, routes)

    def changes_since(self, timestamp: float) -> list[VfsChange]:
        """Return every change with a timestamp ``>= timestamp``, oldest first."""
        return self._log.since(timestamp)


__all__ = ["LocalVFS"]
