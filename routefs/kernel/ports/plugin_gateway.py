"""Plugin gateway port: expands raw filesystem changes into logical routes.

The VFS does not interpret raw change notifications itself. Every raw
route reported by a watcher is handed to a :class:`PluginGateway`, which
may suppress it (``None`` or an empty sequence), pass it through, or fan
it out into several logical routes.

Implementations
---------------
- ``PluginChain`` (``routefs.drivers.plugins``) runs a sequence of
  :class:`ChangePlugin` instances.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from routefs.kernel.domain.vfs import Route


@runtime_checkable
class PluginGateway(Protocol):
    """Long-lived capability injected into the VFS at construction.

    Calls are synchronous and treated as deterministic and side-effect
    free from the VFS's point of view.
    """

    @abstractmethod
    def handle_file_change(self, route: Route) -> Sequence[Route] | None:
        """Expand one raw changed route.

        Args
        ----
            route: Raw route of the changed entry.

        Returns
        -------
            Ordered logical routes to record, or ``None`` when the change
            should be ignored.
        """
        ...


@runtime_checkable
class ChangePlugin(Protocol):
    """A single stage of a plugin chain.

    Same contract as :class:`PluginGateway`, applied to one route at a time.
    """

    @abstractmethod
    def handle_file_change(self, route: Route) -> Sequence[Route] | None: ...


__all__ = ["ChangePlugin", "PluginGateway"]
