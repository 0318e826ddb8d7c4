"""Command line entry point: copy one file or directory entry."""

import sys
from importlib.metadata import distribution
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from cpx.config import load_settings
from cpx.core.file_operations import copy_file, load_transforms
from cpx.core.logging import setup_logging
from cpx.models import CopyOptions, CopyOutcome, CopyResult

from .error_handling import handle_errors


__version__ = distribution("cpx").version


OUTCOME_MESSAGES = {
    CopyOutcome.COPIED: "Copied {source} → {destination}",
    CopyOutcome.DIRECTORY_CREATED: "Created directory {destination}",
    CopyOutcome.SKIPPED_EXCLUDED: "Excluded {source}",
    CopyOutcome.SKIPPED_NEWER: "Kept newer {destination}",
    CopyOutcome.SKIPPED_UNCHANGED: "Unchanged {destination}",
}


def format_outcome(result: CopyResult) -> str:
    """Render a copy result as a Rich markup line."""
    marker = "[yellow]-[/yellow]" if result.outcome.skipped else "[green]✓[/green]"
    message = OUTCOME_MESSAGES[result.outcome].format(
        source=escape(str(result.source)),
        destination=escape(str(result.destination)),
    )
    return f"{marker} {message}"


def _version_callback(value: bool) -> None:
    if value:
        print(f"cpx v{__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="cpx",
    help="Copy a single file or directory entry, with optional transforms.",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
@handle_errors
def copy(
    source: Annotated[Path, typer.Argument(help="Source file or directory")],
    destination: Annotated[Path, typer.Argument(help="Destination path")],
    preserve: Annotated[
        bool,
        typer.Option(
            "-p", "--preserve", help="Copy ownership and timestamps as well"
        ),
    ] = False,
    update: Annotated[
        bool,
        typer.Option(
            "-u", "--update", help="Do not overwrite a newer destination file"
        ),
    ] = False,
    transform: Annotated[
        list[str] | None,
        typer.Option(
            "-t",
            "--transform",
            help="Content transform as 'module:function', repeatable",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    quiet: Annotated[
        bool, typer.Option("-q", "--quiet", help="Do not print the outcome")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Copy SOURCE to DESTINATION."""
    settings = load_settings()

    log_level = settings.log_level
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    setup_logging(json_logs=settings.json_logs, log_level_name=log_level)

    options = CopyOptions(
        transforms=load_transforms(transform or []),
        preserve=preserve,
        update=update,
    )
    result = copy_file(source, destination, options, settings=settings)

    if not quiet:
        Console(soft_wrap=True, highlight=False).print(format_outcome(result))


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
