"""CLI helper utilities for routefs commands."""

from __future__ import annotations

import json
from typing import Any, Protocol

import typer
import yaml
from rich.console import Console


class ContextProtocol(Protocol):
    """Protocol for common interface between Click and Typer contexts."""

    @property
    def obj(self) -> dict[str, Any] | None: ...


console = Console()


def output_format(ctx: ContextProtocol | None) -> str:
    """Return ``"json"``, ``"yaml"`` or ``"pretty"`` from the CLI context."""
    if ctx is not None and isinstance(ctx.obj, dict):
        return str(ctx.obj.get("output_format", "pretty"))
    return "pretty"


def print_output(data: Any, ctx: ContextProtocol | None = None) -> None:
    """Print ``data`` according to ``ctx.obj['output_format']``.

    If ctx is None or no format specified, pretty-print using rich.console.
    """
    fmt = output_format(ctx)

    if fmt == "json":
        typer.echo(json.dumps(data, default=str, indent=2))
    elif fmt == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False))
    elif isinstance(data, (str, int, float)):
        typer.echo(str(data))
    else:
        console.print(data)
