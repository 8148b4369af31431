"""Main Typer application.

Entry point: ``pomforge`` (configured via pyproject.toml console_scripts).

    pomforge build
    pomforge clean-indices build-indices
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from pomforge.config import ForgeConfig
from pomforge.core.layout_guard import RepositoryLayoutError, enforce_repository_layout
from pomforge.core.registry import TaskNotFoundError
from pomforge.core.tasks import build_registry
from pomforge.models.reports import TaskReport

console = Console()

app = typer.Typer(
    name="pomforge",
    help="Maintain POMs, checksums and index pages of a static maven repository.",
    rich_markup_mode="rich",
    add_completion=False,
)


def configure_logging(level: str) -> None:
    """Route all log records through a Rich handler."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def render_summary(reports: list[TaskReport]) -> Table:
    table = Table(title="Summary")
    table.add_column("Task", style="cyan")
    table.add_column("Written", justify="right", style="green")
    table.add_column("Deleted", justify="right", style="yellow")
    table.add_column("Unchanged", justify="right", style="dim")
    table.add_column("Failed", justify="right")

    for report in reports:
        failed = f"[red]{len(report.failed)}[/red]" if report.failed else "0"
        table.add_row(
            report.task,
            str(len(report.written)),
            str(len(report.deleted)),
            str(report.skipped),
            failed,
        )
    return table


@app.command()
def main(
    tasks: Optional[List[str]] = typer.Argument(
        None,
        help="Tasks to run, in order. Defaults to 'help'.",
        show_default=False,
    ),
    repo_root: Optional[Path] = typer.Option(
        None,
        "--repo-root",
        "-r",
        help="Repository checkout containing the docs/ tree. Defaults to POMFORGE_REPO_ROOT or '.'.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Run repository maintenance tasks in the order given."""
    overrides: dict[str, object] = {}
    if repo_root is not None:
        overrides["repo_root"] = repo_root
    if log_level is not None:
        overrides["log_level"] = log_level
    config = ForgeConfig(**overrides)

    configure_logging(config.log_level)

    try:
        enforce_repository_layout(config)
    except RepositoryLayoutError as exc:
        console.print(Text(str(exc), style="red"))
        console.print("[dim]This tool is likely being run from the wrong directory.[/dim]")
        raise typer.Exit(code=1)

    registry = build_registry()
    try:
        reports = registry.run(tasks or ["help"], config)
    except TaskNotFoundError as exc:
        console.print(Text(str(exc), style="bold red"))
        console.print("[dim]Use the 'help' task for the list of available tasks.[/dim]")
        raise typer.Exit(code=1)

    if reports:
        console.print(render_summary(reports))


def run() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    run()
