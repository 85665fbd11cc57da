"""Plugin chain: a :class:`PluginGateway` built from ordered plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from routefs.kernel.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from routefs.kernel.domain.vfs import Route
    from routefs.kernel.ports.plugin_gateway import ChangePlugin

logger = get_logger(__name__)


class PluginChain:
    """Runs each changed route through plugins in order.

    Starting from ``[route]``, every plugin is applied to each current
    route and the results are flattened. A plugin returning ``None`` or
    an empty sequence drops that route. An empty chain passes changes
    through unchanged.

    Examples
    --------
    Example usage::

        chain = PluginChain([IgnorePatternsPlugin(["*.swp"])])
        chain.handle_file_change(["site", "a.md"])         # [["site", "a.md"]]
        chain.handle_file_change(["site", ".a.md.swp"])    # None
    """

    def __init__(self, plugins: Iterable[ChangePlugin] = ()) -> None:
        self._plugins: list[ChangePlugin] = list(plugins)

    @property
    def plugins(self) -> list[ChangePlugin]:
        return list(self._plugins)

    def add(self, plugin: ChangePlugin) -> None:
        """Append a plugin to the end of the chain."""
        self._plugins.append(plugin)
        logger.debug("Added change plugin {plugin}", plugin=type(plugin).__name__)

    def handle_file_change(self, route: Route) -> list[Route] | None:
        current: list[Route] = [list(route)]
        for plugin in self._plugins:
            expanded: list[Route] = []
            for item in current:
                result = plugin.handle_file_change(item)
                if result:
                    expanded.extend(list(r) for r in result)
            current = expanded
            if not current:
                return None
        return current


__all__ = ["PluginChain"]
