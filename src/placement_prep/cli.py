"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from placement_prep.config import AppConfig, load_config
from placement_prep.errors import PlacementPrepError
from placement_prep.export.report import default_report_name, render_report, save_report
from placement_prep.models.analysis import AnalysisResult
from placement_prep.parsers.jd_parser import load_jd_file
from placement_prep.pipeline.confidence import skill_status, weak_skills
from placement_prep.pipeline.orchestrator import AnalysisOrchestrator
from placement_prep.pipeline.readiness_scorer import score_breakdown
from placement_prep.store.history_store import HistoryStore

app = typer.Typer(
    name="placement-prep",
    help="Job description analyzer and interview preparation planner",
    no_args_is_help=True,
)
console = Console()


def _setup(verbose: bool = False) -> AppConfig:
    config = load_config()
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.logging.numeric_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return config


def _store(config: AppConfig) -> HistoryStore:
    return HistoryStore(
        db_path=config.store.resolved_db_path,
        history_key=config.store.history_key,
    )


def _print_result(result: AnalysisResult, config: AppConfig, *, verbose: bool = False) -> None:
    intel = result.company_intel
    console.print(Panel(
        f"[bold]{result.company or 'Target Company'}[/bold] | {result.role or 'Target Role'}\n"
        f"Readiness: [bold cyan]{result.final_score}/100[/bold cyan] "
        f"(base {result.base_score})\n"
        f"Company: {intel.size} / {intel.industry}\n"
        f"Focus: {intel.focus}",
        title=f"Analysis {result.id}",
        border_style="green",
    ))

    if verbose:
        breakdown = score_breakdown(result.extracted_skills, result.company, result.role, result.jd_text)
        console.print(
            f"[dim]base {breakdown.base} + categories {breakdown.categories} + company {breakdown.company}"
            f" + role {breakdown.role} + length {breakdown.length}[/dim]"
        )

    console.print("\n[bold]Detected skills:[/bold]")
    for category, skills in result.extracted_skills.by_category.items():
        if not skills:
            continue
        tags = ", ".join(
            f"{s} [dim]({skill_status(result.skill_confidence_map, s)})[/dim]" for s in skills
        )
        console.print(f"  [bold]{category.label}[/bold]: {tags}")

    weak = weak_skills(result.flat_skills, result.skill_confidence_map, config.report.top_weak_skills)
    if weak:
        console.print(f"\n[yellow]Action Next:[/yellow] focus on {', '.join(weak)}")

    plan_lines = []
    for entry in result.plan:
        plan_lines.append(f"[bold]{entry.day}[/bold]: {entry.focus}")
        plan_lines.extend(f"  - {task}" for task in entry.tasks)
    console.print(Panel("\n".join(plan_lines), title="7-Day Plan", border_style="blue"))

    rounds = Table(title="Interview Rounds")
    rounds.add_column("#", justify="right")
    rounds.add_column("Round")
    rounds.add_column("Type")
    rounds.add_column("Why")
    for i, entry in enumerate(result.round_mapping, 1):
        rounds.add_row(str(i), entry.round_title, entry.round_type, entry.rationale)
    console.print(rounds)

    console.print("\n[bold]Likely questions:[/bold]")
    for i, question in enumerate(result.questions, 1):
        console.print(f"  {i}. {question}")


@app.command()
def analyze(
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    company: str = typer.Option("", "--company", "-c", help="Company name"),
    role: str = typer.Option("", "--role", "-r", help="Role title"),
    save: bool = typer.Option(True, "--save/--no-save", help="Store the result in history"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Analyze a job description and print the preparation report."""
    if not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(1)

    config = _setup(verbose)
    jd_text = load_jd_file(str(jd))
    orchestrator = AnalysisOrchestrator(short_jd_threshold=config.analysis.short_jd_threshold)

    try:
        result = orchestrator.analyze(jd_text, company, role)
    except PlacementPrepError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if save:
        if _store(config).save(result):
            console.print(f"[dim]Saved as {result.id}[/dim]")
        else:
            console.print("[yellow]Could not save the result to history.[/yellow]")

    if as_json:
        console.print_json(result.model_dump_json())
    else:
        _print_result(result, config, verbose=verbose)


@app.command()
def history() -> None:
    """List saved analyses, most recent first."""
    config = _setup()
    records = _store(config).load_all()
    if not records:
        console.print("[yellow]No saved analyses.[/yellow]")
        return

    table = Table(title="History")
    table.add_column("ID")
    table.add_column("Created")
    table.add_column("Company")
    table.add_column("Role")
    table.add_column("Score", justify="right")
    for record in records:
        table.add_row(
            record.id,
            record.created_at.strftime("%Y-%m-%d %H:%M"),
            record.company or "Unknown Company",
            record.role or "Unknown Role",
            str(record.final_score),
        )
    console.print(table)


@app.command()
def show(
    record_id: str = typer.Argument(help="Analysis id"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Show a saved analysis."""
    config = _setup(verbose)
    record = _store(config).get_by_id(record_id)
    if record is None:
        console.print(f"[red]Analysis not found: {record_id}[/red]")
        raise typer.Exit(1)
    _print_result(record, config, verbose=verbose)


@app.command()
def toggle(
    record_id: str = typer.Argument(help="Analysis id"),
    skill: str = typer.Argument(help="Skill to rate"),
    level: str = typer.Option(None, "--level", "-l", help="know or practice (default: toggle)"),
) -> None:
    """Mark a skill as known or needing practice and update the final score."""
    if level is not None and level not in ("know", "practice"):
        console.print(f"[red]Invalid level: {level} (use know or practice)[/red]")
        raise typer.Exit(1)

    config = _setup()
    store = _store(config)
    try:
        record = store.set_skill_confidence(record_id, skill.strip().lower(), level)
    except PlacementPrepError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    status = record.skill_confidence_map[skill.strip().lower()]
    console.print(
        f"[green]{skill} -> {status}[/green]  score {record.final_score}/100 (base {record.base_score})"
    )


@app.command()
def export(
    record_id: str = typer.Argument(help="Analysis id"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path (.txt)"),
) -> None:
    """Export a saved analysis as a plain-text report."""
    config = _setup()
    record = _store(config).get_by_id(record_id)
    if record is None:
        console.print(f"[red]Analysis not found: {record_id}[/red]")
        raise typer.Exit(1)

    text = render_report(record, top_weak_skills=config.report.top_weak_skills)
    path = save_report(text, output or Path(default_report_name(record)))
    console.print(f"[green]Report saved: {path}[/green]")


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete all saved analyses."""
    if not yes and not typer.confirm("Delete all saved analyses?"):
        raise typer.Exit(0)
    config = _setup()
    if _store(config).clear():
        console.print("[green]History cleared.[/green]")
    else:
        console.print("[red]Failed to clear history.[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
