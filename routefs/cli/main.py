"""routefs CLI - Main entrypoint."""

import typer
from rich.console import Console

from routefs import __version__
from routefs.cli.commands import vfs_cmd

# Create the main Typer app
app = typer.Typer(
    name="routefs",
    help="routefs - route-addressed virtual filesystem over physical partitions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()

app.command("read")(vfs_cmd.read_command)
app.command("resolve")(vfs_cmd.resolve_command)
app.command("partitions")(vfs_cmd.partitions_command)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    *,
    config: str | None = typer.Option(
        None, "--config", "-c", help="kind: Config YAML or pyproject.toml path"
    ),
    partition: list[str] = typer.Option(
        [], "--partition", "-p", help="Add or override a partition (name=/abs/path)"
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress non-error output"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable verbose logging"),
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
    yaml_out: bool = typer.Option(False, "--yaml", help="Output machine-readable YAML"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level: debug|info|warning|error"
    ),
    version: bool = typer.Option(False, "--version", "-v", help="Show version and exit"),
) -> None:
    """routefs CLI - read partitions through symbolic routes.

    Global flags are parsed here and stored on `ctx.obj` for subcommands.
    """
    if version:
        console.print(f"[bold blue]routefs[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    if ctx.obj is None:
        ctx.obj = {}

    output_format = "pretty"
    if json_out:
        output_format = "json"
    elif yaml_out:
        output_format = "yaml"

    effective_level = log_level.upper() if log_level else None
    if effective_level == "WARN":
        effective_level = "WARNING"
    if quiet:
        effective_level = "ERROR"
    elif verbose:
        effective_level = "DEBUG"

    ctx.obj.update({
        "config_path": config,
        "partitions": partition,
        "quiet": quiet,
        "verbose": verbose,
        "output_format": output_format,
        "log_level": effective_level,
    })


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
