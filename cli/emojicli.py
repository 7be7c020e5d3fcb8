"""Typer-based command line interface for emoji-catalog."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if SRC_ROOT.is_dir() and str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from catalog import CatalogError, CatalogService  # type: ignore  # noqa: E402
from picker import CollaboratorError, RofiPicker, SystemClipboard  # type: ignore  # noqa: E402
from utils.config import CatalogConfig, load_config  # type: ignore  # noqa: E402
from utils.logging import configure_logging  # type: ignore  # noqa: E402

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


def _load_config(path: Optional[Path]) -> CatalogConfig:
    if path is not None and not path.exists():
        raise typer.BadParameter(f"Config file {path} does not exist", param_hint="--config")
    try:
        return load_config(path)
    except (ValidationError, ValueError) as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _print_sources(service: CatalogService) -> None:
    table = Table(title=f"Source files in {service.source_dir}")
    table.add_column("File")
    for name in service.list_sources():
        table.add_row(name)
    console.print(table)


@app.command()
def main(
    filter_: Optional[List[str]] = typer.Option(
        None, "--filter", "-f", help="Only offer entries from source files whose name contains KEYWORD."
    ),
    list_: bool = typer.Option(False, "--list", help="List the known source files and exit."),
    rescan: bool = typer.Option(False, "--rescan", help="Merge new entries from the source files."),
    recreate: bool = typer.Option(False, "--recreate", help="Delete the cache and rebuild it from scratch."),
    clean: bool = typer.Option(False, "--clean", help="Drop entries whose source line no longer exists."),
    pick: bool = typer.Option(True, "--pick/--no-pick", help="Launch the picker after maintenance tasks."),
    print_only: bool = typer.Option(False, "--print-only", help="Print the candidates instead of picking."),
    lines: Optional[int] = typer.Option(None, "--lines", min=1, help="Number of lines shown by the picker."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    config = _load_config(config_path)
    configure_logging("DEBUG" if verbose else config.log_level)
    service = CatalogService(config, clipboard=SystemClipboard())

    try:
        if list_:
            service.bootstrap()
            _print_sources(service)
            return

        if recreate:
            report = service.recreate()
            typer.echo(f"Recreated catalog: {report.summary()}", err=True)
        else:
            service.load_or_bootstrap()
            if rescan:
                report = service.rescan()
                typer.echo(f"Rescanned catalog: {report.summary()}", err=True)
        if clean:
            removed = service.clean()
            typer.echo(f"Removed {removed} stale entries", err=True)

        if print_only:
            for candidate in service.candidates(filter_):
                typer.echo(candidate)
            return
        if not pick:
            return

        picker = RofiPicker(lines=lines or config.picker_lines, prompt=config.picker_prompt)
        selection = service.choose(picker, filter_)
    except (CatalogError, CollaboratorError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if selection is not None and verbose:
        typer.echo(f"Choice: {selection.text}", err=True)


if __name__ == "__main__":
    app()
