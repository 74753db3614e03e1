"""CLI entry point for the video planner."""

import json
import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import config
from .extractor import extract_ideas
from .models import PlanDocument
from .prompt import build_prompt

app = typer.Typer(
    name="vidplan",
    help="Turn messy creative notes into a structured video generation plan",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"vidplan version {__version__}")
        raise typer.Exit()


def load_plan(plan: Path) -> PlanDocument:
    """Load a plan or exit with an error message."""
    if not plan.exists():
        typer.echo(f"❌ No plan found at {plan}")
        typer.echo("   Run 'vidplan init' to create one")
        raise typer.Exit(1)

    try:
        return PlanDocument.from_yaml(plan)
    except Exception as e:
        typer.echo(f"❌ Error loading plan: {e}")
        raise typer.Exit(1)


def preview(text: str, width: int = 60) -> str:
    """Shorten text to a single preview line."""
    text = " ".join(text.split())
    return text[:width] + "..." if len(text) > width else text


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Video Planner - Structure creative notes into a generation-ready plan."""
    pass


@app.command()
def init(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the plan (defaults to the workspace plan file)"
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing plan"
    ),
) -> None:
    """Write the default seed plan."""
    output = output or config.plan_path

    if output.exists() and not force:
        typer.echo(f"❌ Plan already exists at {output} (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        PlanDocument.default().to_yaml(output)
    except Exception as e:
        typer.echo(f"❌ Error saving plan: {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Plan created: {output}")


@app.command()
def extract(
    notes: str = typer.Argument(
        ...,
        help="Notes file to read, or '-' for stdin"
    ),
    plan: Optional[Path] = typer.Option(
        None,
        "--plan",
        "-p",
        help="Plan to update (the default seed is used if it does not exist)"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to save the updated plan (defaults to --plan)"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would change without saving"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Extract plan fields from freeform notes and merge them into the plan."""
    setup_logging(verbose)
    plan = plan or config.plan_path
    output = output or plan

    try:
        if notes == "-":
            raw = typer.get_text_stream("stdin").read()
        else:
            raw = Path(notes).read_text()
    except Exception as e:
        typer.echo(f"❌ Error reading notes: {e}")
        raise typer.Exit(1)

    document = load_plan(plan) if plan.exists() else PlanDocument.default()
    result = extract_ideas(raw, document)

    if result.is_empty():
        typer.echo("ℹ️  Nothing recognized in the notes, plan unchanged")
        raise typer.Exit(0)

    update = result.to_update()
    typer.echo(f"🔎 Extracted {len(update)} field(s):")
    for key, value in update.items():
        if key == "characters":
            for character in result.characters:
                typer.echo(f"   • character: {character.name}")
        elif key == "sequences":
            for sequence in result.sequences:
                typer.echo(f"   • sequence: {sequence.title}")
        elif isinstance(value, dict):
            typer.echo(f"   • {key}")
        else:
            typer.echo(f"   • {key}: {preview(value)}")

    if dry_run:
        typer.echo("\n🔍 Dry run - plan not saved")
        raise typer.Exit(0)

    updated = document.apply(result)
    updated.messy_ideas = raw

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        updated.to_yaml(output)
    except Exception as e:
        typer.echo(f"❌ Error saving plan: {e}")
        raise typer.Exit(1)

    typer.echo(f"\n✅ Plan saved: {output}")


@app.command()
def prompt(
    plan: Optional[Path] = typer.Option(
        None,
        "--plan",
        "-p",
        help="Plan to serialize"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON payload to a file instead of stdout"
    ),
) -> None:
    """Build the JSON prompt payload for a plan."""
    document = load_plan(plan or config.plan_path)
    payload = json.dumps(build_prompt(document), indent=2, ensure_ascii=False)

    if output is None:
        typer.echo(payload)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload + "\n")
    except Exception as e:
        typer.echo(f"❌ Error saving prompt: {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Prompt saved: {output}")


@app.command()
def status(
    plan: Optional[Path] = typer.Option(
        None,
        "--plan",
        "-p",
        help="Plan to summarize"
    ),
) -> None:
    """Show plan status."""
    document = load_plan(plan or config.plan_path)

    typer.echo(f"📁 Plan: {document.title or '(untitled)'}")
    if document.logline:
        typer.echo(f"   Logline: {preview(document.logline, 70)}")
    if document.delivery.aspect_ratio:
        typer.echo(f"   Aspect ratio: {document.delivery.aspect_ratio}")
    if document.delivery.duration:
        typer.echo(f"   Duration: {document.delivery.duration}")

    typer.echo(f"\n🎭 Characters: {len(document.characters)}")
    for character in document.characters:
        typer.echo(f"   • {character.name}")

    typer.echo(f"\n📽️  Sequences: {len(document.sequences)}")
    for sequence in document.sequences:
        typer.echo(f"   • {sequence.title}")
        if sequence.narrative_beat:
            typer.echo(f"      → {preview(sequence.narrative_beat)}")


if __name__ == "__main__":
    app()
