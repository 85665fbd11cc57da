"""VFS drivers."""

from routefs.drivers.vfs.change_log import ChangeLog, KeepAll
from routefs.drivers.vfs.local import LocalVFS
from routefs.drivers.vfs.partitions import PartitionTable
from routefs.drivers.vfs.reader import TreeReader

__all__ = ["ChangeLog", "KeepAll", "LocalVFS", "PartitionTable", "TreeReader"]
