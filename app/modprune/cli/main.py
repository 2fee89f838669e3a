"""Main CLI application entry point.

Defines the Typer application that prunes a node_modules tree.
"""

import sys
from pathlib import Path
from typing import Annotated

import click
import typer

from modprune import __version__
from modprune.core.config import ConfigError, load_config
from modprune.prune.errors import PathValidationError, PruneAbortedError
from modprune.prune.models import PruneResult, RuleKind
from modprune.prune.enumerator import resolve_root
from modprune.prune.pruner import prune
from modprune.utils.formatting import (
    configure_logging,
    console,
    create_removed_table,
    format_duration,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="modprune",
    help="Remove unused files from node_modules.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="Example: modprune --path=node_modules/.pnpm",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"modprune version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    path: Annotated[
        str | None,
        typer.Option(
            "--path",
            "-p",
            help="Relative or absolute path to your node_modules directory.",
            show_default=False,
        ),
    ] = None,
    concurrency: Annotated[
        str | None,
        typer.Option(
            "--concurrency",
            "-c",
            help="How many entries to remove at the same time [default: 100]. "
            "Tweak according to your system's abilities.",
            show_default=False,
            metavar="N",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed without deleting."),
    ] = False,
    list_removed: Annotated[
        bool,
        typer.Option("--list", "-l", help="List every removed path."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to a TOML config file [default: ~/.config/modprune/config.toml].",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress non-essential output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Remove unused files from node_modules.

    Deletes test suites, docs, CI config, and other files that a
    package does not need at runtime.
    """
    configure_logging(verbose)

    if not path:
        print_error("--path is required")
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    workers = _parse_concurrency(concurrency, config.concurrency)

    try:
        root = resolve_root(path)
    except PathValidationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not quiet:
        print_info(f"Pruning: {root}")

    try:
        result = prune(root, workers, rules=config.build_rules(), dry_run=dry_run)
    except PathValidationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except PruneAbortedError as e:
        for error in e.errors:
            print_error(str(error))
        if not quiet:
            print_warning(f"Aborted after removing {e.result.count} entries")
        raise typer.Exit(code=1) from e

    if list_removed and result.removed:
        title = "Would Remove (dry-run)" if dry_run else "Removed"
        console.print(create_removed_table(result.removed, title=title))

    if not quiet:
        _print_summary(result)


def _parse_concurrency(value: str | None, default: int) -> int:
    """Parse the --concurrency option, exiting with code 1 when invalid."""
    if value is None:
        return default
    try:
        workers = int(value)
    except ValueError:
        print_error(f"--concurrency must be an integer, got {value!r}")
        raise typer.Exit(code=1) from None
    if workers < 1:
        print_error(f"--concurrency must be at least 1, got {workers}")
        raise typer.Exit(code=1)
    return workers


def _print_summary(result: PruneResult) -> None:
    """Display the removed count and elapsed time."""
    counts = result.count_by_rule()
    breakdown = ", ".join(
        f"[rule.{rule.value}]{counts[rule]} by {rule.value}[/]" for rule in RuleKind if counts[rule]
    )
    verb = "Would remove" if result.dry_run else "Removed"
    print_success(f"{verb}: {result.count} files and dirs")
    if breakdown:
        console.print(f"[dim]({breakdown}; {result.scanned} entries scanned)[/dim]")
    console.print(f"[dim]Prune time: {format_duration(result.elapsed)}[/dim]")


def run(argv: list[str] | None = None) -> int:
    """Run the application, reporting usage errors with exit code 1.

    Args:
        argv: Command-line arguments; defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    command = typer.main.get_command(app)
    try:
        code = command.main(args=argv, prog_name="modprune", standalone_mode=False)
    except click.UsageError as e:
        print_error(e.format_message())
        if e.ctx is not None:
            typer.echo(e.ctx.get_usage())
        return 1
    except click.Abort:
        print_error("Aborted.")
        return 1
    return code if isinstance(code, int) else 0


def entrypoint() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    entrypoint()
