"""Core exception hierarchy for routefs.

All routefs exceptions inherit from RouteFSError so callers can catch
every framework failure with a single handler.
"""

from __future__ import annotations

from collections.abc import Sequence

# ============================================================================
# Base Exception
# ============================================================================


class RouteFSError(Exception):
    """Base exception for all routefs errors."""

    pass


# ============================================================================
# Configuration & Validation Errors
# ============================================================================


class ConfigurationError(RouteFSError):
    """Raised when configuration is invalid or missing.

    Examples
    --------
    Example usage::

        raise ConfigurationError("partitions", "expected a mapping")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the component with invalid configuration
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


class ValidationError(RouteFSError):
    """Raised when data validation fails.

    Examples
    --------
    Example usage::

        raise ValidationError("root", "must be an absolute path", value="site")
    """

    def __init__(self, field: str, constraint: str, value: object = None) -> None:
        """Initialize validation error.

        Args
        ----
            field: Name of the field that failed validation
            constraint: Description of the validation constraint
            value: The invalid value (optional)
        """
        if value is not None:
            msg = f"Validation failed for '{field}': {constraint} (got {value!r})"
        else:
            msg = f"Validation failed for '{field}': {constraint}"
        super().__init__(msg)
        self.field = field
        self.constraint = constraint
        self.value = value


# ============================================================================
# VFS Errors
# ============================================================================


class RouteError(RouteFSError):
    """Raised when a route is empty or names an unregistered partition.

    Examples
    --------
    Example usage::

        raise RouteError(["unknown", "x"], "unknown partition 'unknown'")
    """

    def __init__(self, route: Sequence[str], reason: str) -> None:
        super().__init__(f"Route error at {list(route)!r}: {reason}")
        self.route = list(route)
        self.reason = reason


class ReadError(RouteFSError):
    """Raised when the underlying read of a file or directory fails.

    Covers permission errors, missing entries, I/O faults and content
    that is not valid UTF-8 text.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize read error.

        Args
        ----
            path: Physical path that could not be read
            reason: Explanation of what went wrong
        """
        super().__init__(f"Read error at '{path}': {reason}")
        self.path = path
        self.reason = reason


class UnsupportedTypeError(RouteFSError):
    """Raised when an entry is neither a regular file nor a directory."""

    def __init__(self, path: str, kind: str) -> None:
        super().__init__(f"Unsupported entry type at '{path}': {kind}")
        self.path = path
        self.kind = kind


class UnsupportedOperationError(RouteFSError):
    """Raised when an operation is not implemented by the VFS.

    Examples
    --------
    Example usage::

        raise UnsupportedOperationError("write", ["site", "index.html"])
    """

    def __init__(self, operation: str, route: Sequence[str]) -> None:
        super().__init__(f"Operation '{operation}' is not supported (route {list(route)!r})")
        self.operation = operation
        self.route = list(route)


__all__ = [
    # Base
    "RouteFSError",
    # Configuration & Validation
    "ConfigurationError",
    "ValidationError",
    # VFS
    "RouteError",
    "ReadError",
    "UnsupportedTypeError",
    "UnsupportedOperationError",
]
