"""Change plugins and the plugin chain gateway."""

from routefs.drivers.plugins.chain import PluginChain
from routefs.drivers.plugins.ignore import IgnorePatternsPlugin

__all__ = ["IgnorePatternsPlugin", "PluginChain"]
