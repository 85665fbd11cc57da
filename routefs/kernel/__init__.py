"""routefs kernel: domain types, ports, configuration and errors.

User-space code (``routefs.api``, ``routefs.cli`` and applications)
should import from ``routefs.kernel``; drivers may import kernel
submodules directly.
"""

from routefs.kernel.config import LoggingConfig, RouteFSConfig
from routefs.kernel.domain import (
    DirItem,
    FileItem,
    Route,
    SkippedEntry,
    VfsChange,
    VfsItem,
    VfsItemAdapter,
)
from routefs.kernel.exceptions import (
    ConfigurationError,
    ReadError,
    RouteError,
    RouteFSError,
    UnsupportedOperationError,
    UnsupportedTypeError,
    ValidationError,
)
from routefs.kernel.logging import configure_logging, get_logger
from routefs.kernel.ports import VFS, ChangePlugin, ChangeRetention, PluginGateway

__all__ = [
    # Domain
    "DirItem",
    "FileItem",
    "Route",
    "SkippedEntry",
    "VfsChange",
    "VfsItem",
    "VfsItemAdapter",
    # Ports
    "VFS",
    "ChangePlugin",
    "ChangeRetention",
    "PluginGateway",
    # Config
    "LoggingConfig",
    "RouteFSConfig",
    # Exceptions
    "ConfigurationError",
    "ReadError",
    "RouteError",
    "RouteFSError",
    "UnsupportedOperationError",
    "UnsupportedTypeError",
    "ValidationError",
    # Logging
    "configure_logging",
    "get_logger",
]
