"""VFS API: assembly and wire helpers.

Functions that transport layers (CLI, IPC servers, websocket bridges)
consume to build a configured VFS and to turn snapshots and change
records into plain JSON-compatible data.

Server usage::

    from routefs.api import vfs as vfs_api

    instance = vfs_api.create_vfs(load_config())

    def on_read(route: list[str]) -> dict:
        return vfs_api.read_snapshot(instance, route)

    def on_poll(since: float) -> dict:
        return vfs_api.poll_changes(instance, since)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from routefs.drivers.plugins import IgnorePatternsPlugin, PluginChain
from routefs.drivers.vfs import LocalVFS
from routefs.kernel.domain.vfs import VfsItemAdapter

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from routefs.kernel.config.models import RouteFSConfig
    from routefs.kernel.domain.vfs import SkippedEntry, VfsChange, VfsItem
    from routefs.kernel.ports.plugin_gateway import PluginGateway
    from routefs.kernel.ports.vfs import VFS, ChangeRetention


def build_plugin_chain(config: RouteFSConfig) -> PluginChain:
    """Default gateway: a chain that drops ``config.ignore_patterns``."""
    chain = PluginChain()
    if config.ignore_patterns:
        chain.add(IgnorePatternsPlugin(config.ignore_patterns))
    return chain


def create_vfs(
    config: RouteFSConfig,
    gateway: PluginGateway | None = None,
    *,
    retention: ChangeRetention | None = None,
) -> LocalVFS:
    """Create a VFS with every configured partition registered.

    Parameters
    ----------
    config : RouteFSConfig
        Loaded configuration.
    gateway : PluginGateway | None
        Change expansion capability; defaults to :func:`build_plugin_chain`.
    retention : ChangeRetention | None
        Change-log retention policy; defaults to keeping everything.

    Returns
    -------
    LocalVFS
        A fully configured VFS.
    """
    vfs = LocalVFS(
        gateway if gateway is not None else build_plugin_chain(config),
        verbose=config.verbose,
        strict_ordering=config.strict_ordering,
        retention=retention,
    )
    for name, root in config.partitions.items():
        vfs.register_partition(name, root)
    return vfs


def snapshot_to_dict(item: VfsItem) -> dict[str, Any]:
    """Serialize a snapshot to ``{"type": "file"|"dir", ...}`` form."""
    return VfsItemAdapter.dump_python(item, by_alias=True, mode="json")


def snapshot_from_dict(data: dict[str, Any]) -> VfsItem:
    """Parse a serialized snapshot back into a :data:`VfsItem`."""
    return VfsItemAdapter.validate_python(data)


def changes_to_dicts(changes: Iterable[VfsChange]) -> list[dict[str, Any]]:
    """Serialize change records to ``{"timestamp": ..., "route": [...]}``."""
    return [change.model_dump(by_alias=True, mode="json") for change in changes]


def read_snapshot(
    vfs: VFS, route: Sequence[str], *, skipped: list[SkippedEntry] | None = None
) -> dict[str, Any]:
    """Read ``route`` and return its serialized snapshot."""
    return snapshot_to_dict(vfs.read(route, skipped=skipped))


def poll_changes(vfs: VFS, since: float) -> dict[str, Any]:
    """Return the current VFS time and every change at or after ``since``.

    Consumers pass the returned ``now`` back as ``since`` on their next poll.
    """
    now = vfs.current_time()
    return {"now": now, "changes": changes_to_dicts(vfs.changes_since(since))}


__all__ = [
    "build_plugin_chain",
    "changes_to_dicts",
    "create_vfs",
    "poll_changes",
    "read_snapshot",
    "snapshot_from_dict",
    "snapshot_to_dict",
]
