"""Public API consumed by transport layers."""

from routefs.api import vfs

__all__ = ["vfs"]
