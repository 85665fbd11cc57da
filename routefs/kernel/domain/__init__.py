"""Domain layer exports for routefs."""

from routefs.kernel.domain.vfs import (
    DirItem,
    FileItem,
    Route,
    SkippedEntry,
    VfsChange,
    VfsItem,
    VfsItemAdapter,
)

__all__ = [
    "DirItem",
    "FileItem",
    "Route",
    "SkippedEntry",
    "VfsChange",
    "VfsItem",
    "VfsItemAdapter",
]
