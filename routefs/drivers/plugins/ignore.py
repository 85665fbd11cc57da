"""Plugin that suppresses noise changes matching glob patterns."""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from routefs.kernel.domain.vfs import Route


class IgnorePatternsPlugin:
    """Drop routes whose path, or any single segment, matches a pattern.

    The partition name is not part of the matched path: for
    ``["site", ".git", "HEAD"]`` the candidates are ``.git/HEAD``,
    ``.git`` and ``HEAD``.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self._patterns = tuple(patterns)

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    def matches(self, route: Route) -> bool:
        segments = route[1:]
        if not segments:
            return False
        joined = "/".join(segments)
        for pattern in self._patterns:
            if fnmatch.fnmatchcase(joined, pattern):
                return True
            if any(fnmatch.fnmatchcase(segment, pattern) for segment in segments):
                return True
        return False

    def handle_file_change(self, route: Route) -> list[Route] | None:
        if self.matches(route):
            return None
        return [route]


__all__ = ["IgnorePatternsPlugin"]
