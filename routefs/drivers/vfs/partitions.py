"""Partition table and route resolution.

Maps partition names to absolute physical roots and translates routes
(``[partition, *relative]``) into physical paths.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from routefs.kernel.exceptions import RouteError, ValidationError
from routefs.kernel.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


def _check_segment(route: Sequence[str], segment: str) -> None:
    """Reject segments that would not stay inside the partition root."""
    if segment in ("", ".", ".."):
        raise RouteError(route, f"invalid segment {segment!r}")
    if any(sep in segment for sep in _SEPARATORS) or PurePath(segment).drive:
        raise RouteError(route, f"segment {segment!r} must be a single relative name")


class PartitionTable:
    """Named absolute directory roots that routes resolve against."""

    def __init__(self) -> None:
        self._partitions: dict[str, Path] = {}

    def register(self, name: str, root: str | Path) -> None:
        """Register a partition, replacing any existing root under ``name``.

        Args
        ----
            name: Partition name (first route segment).
            root: Absolute physical root.

        Raises
        ------
        ValidationError
            If ``name`` is empty or ``root`` is not absolute.
        """
        if not name:
            raise ValidationError("name", "partition name cannot be empty")
        root_path = Path(root)
        if not root_path.is_absolute():
            raise ValidationError("root", "must be an absolute path", value=str(root))

        previous = self._partitions.get(name)
        self._partitions[name] = root_path
        if previous is not None and previous != root_path:
            logger.warning(
                "Partition {name} remapped from {old} to {new}",
                name=name,
                old=str(previous),
                new=str(root_path),
            )
        else:
            logger.debug("Registered partition {name} at {root}", name=name, root=str(root_path))

    def get(self, name: str) -> Path | None:
        return self._partitions.get(name)

    def names(self) -> list[str]:
        return sorted(self._partitions)

    def as_dict(self) -> dict[str, Path]:
        """Return a copy of the partition table."""
        return dict(self._partitions)

    def __contains__(self, name: object) -> bool:
        return name in self._partitions

    def __len__(self) -> int:
        return len(self._partitions)

    def resolve(self, route: Sequence[str]) -> Path:
        """Translate a route into a physical path.

        Args
        ----
            route: ``[partition, *segments]``.

        Returns
        -------
            The partition root itself when ``segments`` is empty, otherwise
            the root joined with the segments.

        Raises
        ------
        RouteError
            If the route is empty or names an unregistered partition, or if a
            segment is empty, ``.``, ``..`` or contains a path separator.
        """
        if not route:
            raise RouteError(route, "route is empty")

        partition_name, *rest = route
        root = self._partitions.get(partition_name)
        if root is None:
            raise RouteError(
                route,
                f"unknown partition {partition_name!r}. Available: {self.names()}",
            )

        # A bare partition resolves to its root exactly, with no trailing separator.
        if not rest:
            return root
        for segment in rest:
            _check_segment(route, segment)
        return root.joinpath(*rest)


__all__ = ["PartitionTable"]
