"""Port interfaces for routefs."""

from routefs.kernel.ports.plugin_gateway import ChangePlugin, PluginGateway
from routefs.kernel.ports.vfs import VFS, ChangeRetention

__all__ = ["VFS", "ChangePlugin", "ChangeRetention", "PluginGateway"]
