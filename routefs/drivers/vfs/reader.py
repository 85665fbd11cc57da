"""Recursive tree reader.

Materializes a physical path into a :data:`VfsItem` snapshot. Directory
children that fail to read are left out of the snapshot; a failure on
the entry being read itself always propagates.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from routefs.kernel.domain.vfs import DirItem, FileItem, SkippedEntry, VfsItem
from routefs.kernel.exceptions import ReadError, UnsupportedTypeError
from routefs.kernel.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

ENCODING = "utf-8"


def _describe_mode(mode: int) -> str:
    if stat.S_ISLNK(mode):
        return "symlink"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISCHR(mode):
        return "character device"
    if stat.S_ISBLK(mode):
        return "block device"
    return "unknown"


def _display_name(name: str) -> str:
    return os.fsencode(name).decode(ENCODING, errors="replace")


def _check_name(parent: Path, name: str) -> None:
    # Undecodable names come back surrogate-escaped from os.listdir
    try:
        name.encode(ENCODING)
    except UnicodeEncodeError as exc:
        raise ReadError(
            str(parent / _display_name(name)), f"file name is not valid {ENCODING}"
        ) from exc


class TreeReader:
    """Eager, synchronous reader producing fully materialized snapshots.

    Symlinks below the entry being read are not followed. They and special
    files are reported as :class:`UnsupportedTypeError`.
    """

    def read_path(
        self,
        route: Sequence[str],
        path: Path,
        *,
        skipped: list[SkippedEntry] | None = None,
        follow_symlinks: bool = False,
    ) -> VfsItem:
        """Read ``path`` and label the result with ``route``.

        Args
        ----
            route: Route of the entry being read.
            path: Physical path of the entry.
            skipped: Optional list collecting children omitted from
                directory snapshots.
            follow_symlinks: Follow a link at ``path`` itself. Entries
                below it are never followed.

        Raises
        ------
        ReadError
            If the entry cannot be inspected or read.
        UnsupportedTypeError
            If the entry is neither a regular file nor a directory.
        """
        try:
            mode = (path.stat() if follow_symlinks else path.lstat()).st_mode
        except OSError as exc:
            raise ReadError(str(path), exc.strerror or str(exc)) from exc

        if stat.S_ISDIR(mode):
            return self._read_dir(route, path, skipped)
        if stat.S_ISREG(mode):
            return self._read_file(route, path)
        raise UnsupportedTypeError(str(path), _describe_mode(mode))

    def _read_file(self, route: Sequence[str], path: Path) -> FileItem:
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ReadError(str(path), exc.strerror or str(exc)) from exc

        try:
            contents = data.decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise ReadError(str(path), f"contents are not valid {ENCODING} text") from exc

        return FileItem(route=list(route), contents=contents)

    def _read_dir(
        self,
        route: Sequence[str],
        path: Path,
        skipped: list[SkippedEntry] | None,
    ) -> DirItem:
        try:
            names = os.listdir(path)
        except OSError as exc:
            raise ReadError(str(path), exc.strerror or str(exc)) from exc

        children: dict[str, VfsItem] = {}
        for name in names:
            child_route = [*route, _display_name(name)]
            try:
                _check_name(path, name)
                children[name] = self.read_path(child_route, path / name, skipped=skipped)
            except (ReadError, UnsupportedTypeError) as exc:
                # Broken children are omitted; the directory itself still reads.
                logger.debug("Skipping {route}: {error}", route=child_route, error=str(exc))
                if skipped is not None:
                    skipped.append(SkippedEntry(route=child_route, reason=str(exc)))

        return DirItem(route=list(route), children=children)


__all__ = ["TreeReader"]
