"""
TechMatch Command Line Interface

Provides CLI commands for running candidate matching from a terminal,
against the database or against JSON fixture files, and for serving
the HTTP handler.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from techmatch.core.exceptions import TechMatchError

app = typer.Typer(
    name="techmatch",
    help="TechMatch skill-based candidate matching CLI",
    add_completion=False,
)
console = Console()

LEVEL_COLORS = {
    "excellent": "green",
    "good": "yellow",
    "partial": "red",
}


def _candidate_store(candidates_file: Optional[Path]) -> Any:
    """Use the JSON fixture if given, otherwise the profiles collection."""
    if candidates_file is not None:
        from techmatch.data.repositories import InMemoryCandidateStore

        return InMemoryCandidateStore.from_json_file(candidates_file)

    from techmatch.data.repositories import get_profile_repository

    _require_database()
    return get_profile_repository()


def _job_store(jobs_file: Optional[Path]) -> Any:
    """Use the JSON fixture if given, otherwise the job postings collection."""
    if jobs_file is not None:
        from techmatch.data.repositories import InMemoryJobPostingStore

        return InMemoryJobPostingStore.from_json_file(jobs_file)

    from techmatch.data.repositories import get_job_posting_repository

    _require_database()
    return get_job_posting_repository()


def _require_database() -> None:
    from techmatch.data.database import get_database_manager

    if not get_database_manager().check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB. Run 'init-db' first.[/red]")
        raise typer.Exit(1)


def _run(coro: Any) -> Any:
    """Run a matching coroutine, reporting matching errors."""
    try:
        return asyncio.run(coro)
    except TechMatchError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)


def _print_json(items: list[Any]) -> None:
    typer.echo(json.dumps([item.model_dump(mode="json") for item in items], indent=2))


def _print_candidate_matches(matches: list[Any], title: str) -> None:
    if not matches:
        console.print("[yellow]No candidates matched the threshold.[/yellow]")
        return

    table = Table(title=f"Top {len(matches)} Matches for {title}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Candidate", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")
    table.add_column("Matching Skills")
    table.add_column("Location")

    for i, match in enumerate(matches, 1):
        level = match.score_level
        color = LEVEL_COLORS[level.value]
        table.add_row(
            str(i),
            match.full_name,
            f"{match.match_score}%",
            f"[{color}]{level.label}[/{color}]",
            ", ".join(match.matching_skills),
            match.location,
        )

    console.print(table)


@app.command()
def version():
    """Show application version."""
    from techmatch import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from techmatch.utils.config import get_settings

    settings = get_settings()

    table = Table(title="TechMatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("Profiles Collection", settings.database.profiles_collection)
    table.add_row("Minimum Score", f"> {settings.matching.min_score}")
    table.add_row("Maximum Results", str(settings.matching.max_results))
    table.add_row("API Address", f"{settings.api.host}:{settings.api.port}")
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Create the indexes used by the matching queries."""
    from techmatch.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")
    _require_database()
    console.print("  [green]✓[/green] Connected to MongoDB")

    try:
        get_database_manager().ensure_indexes()
    except Exception as e:
        console.print(f"[red]Error initializing database: {e}[/red]")
        raise typer.Exit(1)

    console.print("  [green]✓[/green] Indexes created")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Serve the matching handler over HTTP."""
    import uvicorn

    from techmatch.utils.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "techmatch.api.app:app",
        host=host or settings.api.host,
        port=port or settings.api.port,
        reload=reload,
    )


@app.command()
def match(
    skills: list[str] = typer.Option(..., "--skill", "-s", help="Required skill (repeatable)"),
    title: Optional[str] = typer.Option(None, "--title", help="Job title, for display"),
    job_id: str = typer.Option("cli", "--job-id", help="Job identifier, for the audit log"),
    candidates_file: Optional[Path] = typer.Option(
        None, "--candidates", "-c", exists=True, dir_okay=False, help="JSON file of candidate profiles"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON"),
):
    """Match candidates against a list of required skills."""
    from techmatch.core.matching import match_candidates
    from techmatch.data.models import JobRequirement

    store = _candidate_store(candidates_file)
    requirement = JobRequirement(job_id=job_id, required_skills=skills, job_title=title)
    matches = _run(match_candidates(requirement, store))

    if as_json:
        _print_json(matches)
    else:
        _print_candidate_matches(matches, requirement.display_title)


@app.command()
def match_job(
    job_id: str = typer.Argument(..., help="Job posting ID"),
    candidates_file: Optional[Path] = typer.Option(
        None, "--candidates", "-c", exists=True, dir_okay=False, help="JSON file of candidate profiles"
    ),
    jobs_file: Optional[Path] = typer.Option(
        None, "--jobs", "-j", exists=True, dir_okay=False, help="JSON file of job postings"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON"),
):
    """Match candidates against a stored job posting."""
    from techmatch.core.matching import match_job_posting

    job_store = _job_store(jobs_file)
    store = _candidate_store(candidates_file)
    matches = _run(match_job_posting(job_id, job_store, store))

    if as_json:
        _print_json(matches)
    else:
        _print_candidate_matches(matches, job_id)


@app.command()
def jobs(
    employer_id: Optional[str] = typer.Argument(None, help="Only this employer's postings"),
    jobs_file: Optional[Path] = typer.Option(
        None, "--jobs", "-j", exists=True, dir_okay=False, help="JSON file of job postings"
    ),
):
    """List active job postings, newest first."""
    job_store = _job_store(jobs_file)
    postings = _run(job_store.fetch_active_postings(employer_id))

    if not postings:
        console.print("[yellow]No active job postings.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Active Job Postings ({len(postings)})")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Company")
    table.add_column("Required Skills")

    for posting in postings:
        table.add_row(
            posting.id or "",
            posting.title,
            posting.company_name or "",
            ", ".join(posting.required_skills),
        )

    console.print(table)


@app.command()
def recommend(
    candidate_id: str = typer.Argument(..., help="Candidate profile ID"),
    candidates_file: Optional[Path] = typer.Option(
        None, "--candidates", "-c", exists=True, dir_okay=False, help="JSON file of candidate profiles"
    ),
    jobs_file: Optional[Path] = typer.Option(
        None, "--jobs", "-j", exists=True, dir_okay=False, help="JSON file of job postings"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print recommendations as JSON"),
):
    """Recommend active job postings for a candidate."""
    from techmatch.core.matching import recommend_jobs

    store = _candidate_store(candidates_file)
    job_store = _job_store(jobs_file)
    recommendations = _run(recommend_jobs(candidate_id, store, job_store))

    if as_json:
        _print_json(recommendations)
        return

    if not recommendations:
        console.print("[yellow]No job postings matched the threshold.[/yellow]")
        return

    table = Table(title=f"Recommended Jobs for {candidate_id}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Job", style="cyan")
    table.add_column("Company")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")

    for i, job_match in enumerate(recommendations, 1):
        level = job_match.score_level
        color = LEVEL_COLORS[level.value]
        table.add_row(
            str(i),
            job_match.title,
            job_match.company_name,
            f"{job_match.match_score}%",
            f"[{color}]{level.label}[/{color}]",
        )

    console.print(table)


if __name__ == "__main__":
    app()
