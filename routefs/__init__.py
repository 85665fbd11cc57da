"""routefs - route-addressed virtual filesystem.

Symbolic routes resolve against named physical directory roots and read
back as in-memory snapshots. Raw file changes run through an injected
plugin gateway into a time-ordered change log.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("routefs")
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = "0.0.0.dev0"

from routefs.drivers.plugins import IgnorePatternsPlugin, PluginChain
from routefs.drivers.vfs import LocalVFS
from routefs.kernel.domain.vfs import DirItem, FileItem, Route, VfsChange, VfsItem
from routefs.kernel.exceptions import (
    ReadError,
    RouteError,
    RouteFSError,
    UnsupportedOperationError,
    UnsupportedTypeError,
)

__all__ = [
    "DirItem",
    "FileItem",
    "IgnorePatternsPlugin",
    "LocalVFS",
    "PluginChain",
    "ReadError",
    "Route",
    "RouteError",
    "RouteFSError",
    "UnsupportedOperationError",
    "UnsupportedTypeError",
    "VfsChange",
    "VfsItem",
    "__version__",
]
