"""CLI entry point for the Pavlovian conditioning engine."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from pavlovian_agent.core.engine import PavlovianConsciousnessEngine
from pavlovian_agent.metrics.logging import StateLogWriter
from pavlovian_agent.schemas import ConsciousnessState
from pavlovian_agent.utils.logging import LogLevel, StructuredLogger
from pavlovian_agent.utils.profiles import get_profile, list_profiles

app = typer.Typer(
    name="pavlovian-agent",
    help="Pavlovian associative-learning engine",
    add_completion=False,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def format_state_summary(step: int, state: ConsciousnessState) -> str:
    """Format a single-line state summary for console output.

    Args:
        step: Input number, starting at 1.
        state: State produced by the input.

    Returns:
        Formatted summary string.
    """
    return (
        f"[{step:04d}] "
        f"focus={state.current_focus} "
        f"arousal={state.arousal:.2f} valence={state.valence:+.2f} "
        f"emotion={state.dominant_emotion} awareness={state.awareness:.2f}"
    )


def build_engine(profile: str, trace: bool = False) -> PavlovianConsciousnessEngine:
    """Create and initialize an engine for a profile name.

    Raises:
        typer.BadParameter: If the profile is unknown.
    """
    try:
        engine_profile = get_profile(profile)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    structured = StructuredLogger(level=LogLevel.DEBUG) if trace else None
    engine = PavlovianConsciousnessEngine(profile=engine_profile, logger=structured)
    engine.initialize()
    return engine


@app.command()
def process(
    texts: List[str] = typer.Argument(..., help="Inputs to process, in order"),
    profile: str = typer.Option(
        "default",
        "--profile",
        "-p",
        help="Engine profile (default, sensitive, stoic)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log",
        help="Append each state to this JSONL file",
    ),
    reinforce: bool = typer.Option(
        False,
        "--reinforce",
        help="Reinforce every input after processing it",
    ),
    report: bool = typer.Option(
        False,
        "--report",
        help="Print the consciousness report at the end",
    ),
    trace: bool = typer.Option(
        False,
        "--trace",
        help="Print structured conditioning events to stderr",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Feed inputs through a fresh engine and print the state after each."""
    setup_logging(verbose)
    engine = build_engine(profile, trace)

    writer = StateLogWriter(log_file, run_id=str(uuid.uuid4())[:8]) if log_file else None
    try:
        for step, text in enumerate(texts, start=1):
            state = engine.process_input(text)
            typer.echo(format_state_summary(step, state))
            if reinforce:
                engine.reinforce(text)
            if writer:
                dominant = engine.get_dominant_response()
                writer.write(
                    state,
                    text=text,
                    extras={"dominant_response": dominant.name if dominant else None},
                )
    finally:
        if writer:
            writer.close()

    if report:
        typer.echo("")
        typer.echo(engine.get_consciousness_report())


@app.command()
def inspect(
    texts: Optional[List[str]] = typer.Argument(None, help="Optional inputs to process first"),
    profile: str = typer.Option("default", "--profile", "-p", help="Engine profile"),
    limit: int = typer.Option(10, "--limit", "-n", help="Associations to show"),
) -> None:
    """Show drives and the strongest associations as tables."""
    engine = build_engine(profile)
    for text in texts or []:
        engine.process_input(text)

    console = Console()
    console.print(engine.get_current_state().describe())

    drive_table = Table(title="Drives")
    drive_table.add_column("Drive", style="cyan")
    drive_table.add_column("Level", justify="right")
    drive_table.add_column("Baseline", justify="right")
    drive_table.add_column("Categories")
    for drive in sorted(engine.drives.values(), key=lambda d: d.level, reverse=True):
        drive_table.add_row(
            drive.name,
            f"{drive.level:.2f}",
            f"{drive.baseline:.2f}",
            ", ".join(sorted(drive.associated_categories)),
        )
    console.print(drive_table)

    assoc_table = Table(title="Associations")
    assoc_table.add_column("Stimulus", style="cyan")
    assoc_table.add_column("Response", style="magenta")
    assoc_table.add_column("Strength", justify="right")
    assoc_table.add_column("Reinforced", justify="right")
    assoc_table.add_column("Status")
    ranked = sorted(engine.associations, key=lambda a: a.association_strength, reverse=True)
    for association in ranked[:limit]:
        stimulus = engine.get_stimulus(association.stimulus_id)
        response = engine.get_response(association.response_id)
        assoc_table.add_row(
            stimulus.pattern if stimulus else "?",
            response.name if response else "?",
            f"{association.association_strength:.2f}",
            str(association.reinforcement_count),
            "[red]extinct[/]" if association.is_extinct else "[green]active[/]",
        )
    console.print(assoc_table)


@app.command()
def profiles() -> None:
    """List available profiles."""
    typer.echo("Available profiles:\n")
    for name, desc in list_profiles():
        typer.echo(f"  {name:15s} - {desc}")


@app.command()
def version() -> None:
    """Show version information."""
    from pavlovian_agent import __version__
    typer.echo(f"pavlovian-agent v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
