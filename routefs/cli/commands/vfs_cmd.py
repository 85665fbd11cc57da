"""VFS commands: read snapshots, resolve routes, list partitions."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from routefs.api import vfs as vfs_api
from routefs.cli.utils import output_format, print_output
from routefs.compiler.config_loader import load_config
from routefs.drivers.vfs import LocalVFS
from routefs.kernel.domain.vfs import DirItem, FileItem, SkippedEntry, VfsItem
from routefs.kernel.exceptions import RouteFSError
from routefs.kernel.logging import configure_logging

console = Console()
err_console = Console(stderr=True)


def _parse_partition_overrides(values: list[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for value in values:
        name, sep, root = value.partition("=")
        if not sep or not name or not root:
            err_console.print(
                f"[red]Invalid partition '{escape(value)}'. Expected name=/absolute/path[/red]"
            )
            raise typer.Exit(1)
        overrides[name] = str(Path(root).expanduser())
    return overrides


def _build_vfs(ctx: typer.Context) -> LocalVFS:
    """Load configuration, apply CLI overrides and assemble a VFS."""
    obj: dict[str, Any] = ctx.obj or {}
    try:
        config = load_config(obj.get("config_path"))
    except (FileNotFoundError, RouteFSError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    configure_logging(
        level=obj.get("log_level") or config.logging.level,
        format=config.logging.format,
        output_file=config.logging.output_file,
        use_color=config.logging.use_color,
        include_timestamp=config.logging.include_timestamp,
    )

    try:
        vfs = vfs_api.create_vfs(config)
        for name, root in _parse_partition_overrides(obj.get("partitions", [])).items():
            vfs.register_partition(name, root)
    except RouteFSError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    return vfs


def _render_tree(item: VfsItem, tree: Tree | None = None) -> Tree:
    label = escape("/".join(item.route))
    if tree is None:
        node = Tree(f"[bold blue]{label}[/bold blue]" if isinstance(item, DirItem) else label)
    else:
        if isinstance(item, DirItem):
            node = tree.add(f"[bold blue]{escape(item.name)}/[/bold blue]")
        else:
            node = tree.add(f"{escape(item.name)} [dim]({len(item.contents)} chars)[/dim]")

    if isinstance(item, DirItem):
        for name in sorted(item.children):
            _render_tree(item.children[name], node)
    return node


def read_command(
    ctx: typer.Context,
    route: list[str] = typer.Argument(..., help="Route segments: PARTITION [SEGMENT...]"),
    show_skipped: bool = typer.Option(
        False, "--show-skipped", help="Report children that could not be read"
    ),
) -> None:
    """Read a route and print its snapshot."""
    vfs = _build_vfs(ctx)
    skipped: list[SkippedEntry] = []
    try:
        item = vfs.read(route, skipped=skipped)
    except RouteFSError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if output_format(ctx) in ("json", "yaml"):
        data: dict[str, Any] = vfs_api.snapshot_to_dict(item)
        if show_skipped:
            data = {
                "snapshot": data,
                "skipped": [entry.model_dump() for entry in skipped],
            }
        print_output(data, ctx)
        return

    if isinstance(item, FileItem):
        typer.echo(item.contents, nl=False)
    else:
        console.print(_render_tree(item))

    if show_skipped and skipped:
        for entry in skipped:
            label = escape("/".join(entry.route))
            err_console.print(f"[yellow]skipped[/yellow] {label}: {escape(entry.reason)}")


def resolve_command(
    ctx: typer.Context,
    route: list[str] = typer.Argument(..., help="Route segments: PARTITION [SEGMENT...]"),
) -> None:
    """Print the physical path a route resolves to."""
    vfs = _build_vfs(ctx)
    try:
        path = vfs.resolve(route)
    except RouteFSError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if output_format(ctx) in ("json", "yaml"):
        print_output({"route": list(route), "path": str(path)}, ctx)
    else:
        typer.echo(str(path))


def partitions_command(ctx: typer.Context) -> None:
    """List registered partitions."""
    vfs = _build_vfs(ctx)
    partitions = vfs.partitions()

    if output_format(ctx) in ("json", "yaml"):
        print_output({name: str(root) for name, root in sorted(partitions.items())}, ctx)
        return

    if not partitions:
        console.print("[yellow]No partitions configured[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Partition")
    table.add_column("Root")
    table.add_column("Exists")
    for name, root in sorted(partitions.items()):
        table.add_row(name, str(root), "[green]yes[/green]" if root.exists() else "[red]no[/red]")
    console.print(table)
