"""CLI commands for Flowdesk."""

import time
from pathlib import Path

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table

from cli.config import focus_durations, load_config_model
from cli.logging_config import setup_logging
from cli.utils import get_components
from focus import FocusTimer, format_time
from search import search as run_search
from search.palette import GROUP_ORDER
from shared_types import SearchFilter, SessionType
from workspace import load_search_collections
from workspace.session import DEFAULT_TIP_CONTEXT

console = Console()

GROUP_LABELS = {
    "goal": "Goals",
    "task": "Tasks",
    "journal": "Journal",
    "stash": "Stash",
}


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Flowdesk - goals, tasks, journal and stash in one place."""
    config = load_config_model()
    level = "DEBUG" if verbose else config.logging.level
    setup_logging(json_mode=config.logging.json_mode, level=level)


# === Search ===


@cli.command()
@click.argument("query")
@click.option(
    "-f",
    "--filter",
    "filter_",
    default=None,
    type=click.Choice([f.value for f in SearchFilter]),
    help="Limit search to one collection",
)
@click.option("-n", "--limit", default=None, type=int, help="Max results to show")
def search(query: str, filter_: str | None, limit: int | None):
    """Search goals, tasks, journal and stash."""
    c = get_components(skip_enrichment=True)
    config = c["config"]
    collections = load_search_collections(c["stores"], c["user_id"])
    results = run_search(collections, query, filter_ or config.search.default_filter)
    results = results[: limit or config.search.max_results]

    if not results:
        console.print("[yellow]No results found.[/]")
        return

    for group in GROUP_ORDER:
        rows = [r for r in results if r.type == group]
        if not rows:
            continue
        table = Table(title=GROUP_LABELS[str(group)], title_justify="left")
        table.add_column("Score", justify="right", style="cyan")
        table.add_column("Title", style="bold")
        table.add_column("Preview")
        table.add_column("Open", style="dim")
        for r in rows:
            table.add_row(str(r.match_score), r.title, r.preview, r.path)
        console.print(table)


# === Tip ===


@cli.command()
@click.argument("context", required=False)
def tip(context: str | None):
    """Print a one-sentence productivity tip."""
    c = get_components()
    console.print(f"[bold green]Tip:[/] {c['enrichment'].tip(context or DEFAULT_TIP_CONTEXT)}")


# === Journal ===


@cli.group()
def journal():
    """Journal utilities."""
    pass


@journal.command("export")
@click.option("-o", "--output", required=True, type=click.Path(), help="Output path")
@click.option(
    "-f",
    "--format",
    "fmt",
    default="markdown",
    type=click.Choice(["json", "markdown", "files"]),
    help="Export format (files = one Markdown file per day)",
)
@click.option("--days", type=int, default=None, help="Only entries from the last N days")
def journal_export(output: str, fmt: str, days: int | None):
    """Export journal entries."""
    exporter = get_components(skip_enrichment=True)["exporter"]
    output_path = Path(output).expanduser()

    with console.status("Exporting..."):
        if fmt == "json":
            count = exporter.export_json(output_path, days=days)
        elif fmt == "markdown":
            count = exporter.export_markdown(output_path, days=days)
        else:
            count = len(exporter.export_entry_files(output_path, days=days))

    console.print(f"[green]Exported {count} entries to {output_path}[/]")


# === Focus ===


@cli.command()
@click.option("--task", "task_title", default=None, help="Task you are working on")
@click.option(
    "--session",
    "session_type",
    default=SessionType.WORK.value,
    type=click.Choice([s.value for s in SessionType]),
    help="Session to start with",
)
@click.option("-n", "--count", default=1, type=int, help="Number of sessions to run back to back")
def focus(task_title: str | None, session_type: str, count: int):
    """Run a focus timer countdown in the terminal."""
    c = get_components(skip_enrichment=True)
    store = c["focus_store"]
    timer = FocusTimer(
        durations=focus_durations(c["config"]),
        on_complete=lambda session: store.record(c["user_id"], session),
    )
    timer.select_task(None, task_title)
    timer.set_session_type(SessionType(session_type))

    try:
        for _ in range(count):
            _run_session(timer)
    except KeyboardInterrupt:
        timer.pause()
        console.print(f"\n[yellow]Stopped[/] with {format_time(timer.time_left)} left")

    console.print(
        f"[bold]{timer.completed_sessions}[/] sessions completed, "
        f"{timer.focus_minutes} focus minutes"
    )


def _run_session(timer: FocusTimer) -> None:
    label = str(timer.session_type).replace("-", " ").title()
    with Progress(
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        TextColumn("{task.fields[clock]}"),
        console=console,
    ) as progress:
        bar = progress.add_task(label, total=timer.duration, clock=format_time(timer.time_left))
        timer.start()
        finished = None
        while finished is None:
            time.sleep(1)
            finished = timer.tick()
            elapsed = timer.duration - timer.time_left if finished is None else finished.duration
            progress.update(bar, completed=elapsed, clock=format_time(timer.time_left))
    console.print(f"[green]{label} complete.[/] Next: {timer.session_type}")


# === Server ===


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", default=8000, type=int, help="Port")
def serve(host: str, port: int):
    """Run the HTTP API."""
    import uvicorn

    console.print(f"Serving on http://{host}:{port}")
    uvicorn.run("web.app:app", host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
