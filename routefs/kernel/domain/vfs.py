"""Domain models for the routefs virtual filesystem.

A :data:`Route` addresses an item symbolically: the first segment names a
partition and the rest is a path relative to that partition's root.

Snapshots are a tagged union of :class:`FileItem` and :class:`DirItem`
discriminated on ``type``; the serialized form uses lowerCamelCase keys.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, TypeAdapter
from pydantic.alias_generators import to_camel

Route = list[str]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FileItem(_WireModel):
    """A regular file and its full text content."""

    type: Literal["file"] = "file"
    route: Route
    contents: str

    @property
    def name(self) -> str:
        return self.route[-1]


class DirItem(_WireModel):
    """A directory and its fully materialized children, keyed by name."""

    type: Literal["dir"] = "dir"
    route: Route
    children: dict[str, VfsItem] = Field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.route[-1]


# Discriminated union for snapshot nodes
VfsItem = Annotated[FileItem | DirItem, Discriminator("type")]

DirItem.model_rebuild()

VfsItemAdapter: TypeAdapter[VfsItem] = TypeAdapter(VfsItem)


class VfsChange(_WireModel):
    """A single change-log entry.

    Attributes
    ----------
    timestamp : float
        Seconds since the owning VFS was constructed.
    route : Route
        Logical route produced by the plugin gateway.
    """

    timestamp: float
    route: Route


class SkippedEntry(BaseModel):
    """A directory child that was left out of a snapshot because it failed to read."""

    model_config = ConfigDict(frozen=True)

    route: Route
    reason: str


__all__ = [
    "DirItem",
    "FileItem",
    "Route",
    "SkippedEntry",
    "VfsChange",
    "VfsItem",
    "VfsItemAdapter",
]
