"""Pytest configuration and fixtures."""

import pytest
from typer.testing import CliRunner

from vidplan.models import PlanDocument

NIGHT_RUN_NOTES = (
    "Title: Night Run\n"
    "Lighting: High contrast neon rim light.\n"
    "\n"
    "Character - Mara: A fierce courier racing against curfew."
)


@pytest.fixture
def document() -> PlanDocument:
    """Fully populated seed plan."""
    return PlanDocument.default()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def notes_file(tmp_path):
    """Notes file holding the Night Run example."""
    path = tmp_path / "notes.txt"
    path.write_text(NIGHT_RUN_NOTES)
    return path
