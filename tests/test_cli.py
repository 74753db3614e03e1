"""Tests for the command line interface."""

import json

from vidplan import __version__
from vidplan.cli import app
from vidplan.models import PlanDocument

from .conftest import NIGHT_RUN_NOTES


class TestInit:
    """Test cases for the init command."""

    def test_creates_seed_plan(self, runner, tmp_path) -> None:
        plan = tmp_path / "plan.yaml"
        result = runner.invoke(app, ["init", "--output", str(plan)])

        assert result.exit_code == 0
        assert PlanDocument.from_yaml(plan).title == "Untitled Veo 3.1 Masterpiece"

    def test_refuses_to_overwrite(self, runner, tmp_path) -> None:
        plan = tmp_path / "plan.yaml"
        plan.write_text("title: Mine\n")

        result = runner.invoke(app, ["init", "--output", str(plan)])
        assert result.exit_code == 1
        assert PlanDocument.from_yaml(plan).title == "Mine"

        result = runner.invoke(app, ["init", "--output", str(plan), "--force"])
        assert result.exit_code == 0
        assert PlanDocument.from_yaml(plan).title == "Untitled Veo 3.1 Masterpiece"


class TestExtract:
    """Test cases for the extract command."""

    def test_updates_plan(self, runner, tmp_path, notes_file) -> None:
        plan = tmp_path / "plan.yaml"
        result = runner.invoke(app, ["extract", str(notes_file), "--plan", str(plan)])

        assert result.exit_code == 0
        assert "Mara" in result.stdout

        saved = PlanDocument.from_yaml(plan)
        assert saved.title == "Night Run"
        assert saved.cinematography.lighting == "High contrast neon rim light."
        assert [c.name for c in saved.characters] == ["Mara"]
        assert saved.messy_ideas == NIGHT_RUN_NOTES
        assert saved.logline == PlanDocument.default().logline

    def test_separate_output(self, runner, tmp_path, notes_file) -> None:
        plan = tmp_path / "plan.yaml"
        PlanDocument(title="Old").to_yaml(plan)
        output = tmp_path / "out" / "updated.yaml"

        result = runner.invoke(
            app, ["extract", str(notes_file), "--plan", str(plan), "--output", str(output)]
        )

        assert result.exit_code == 0
        assert PlanDocument.from_yaml(plan).title == "Old"
        assert PlanDocument.from_yaml(output).title == "Night Run"

    def test_dry_run(self, runner, tmp_path, notes_file) -> None:
        plan = tmp_path / "plan.yaml"
        result = runner.invoke(app, ["extract", str(notes_file), "--plan", str(plan), "-n"])

        assert result.exit_code == 0
        assert "title: Night Run" in result.stdout
        assert not plan.exists()

    def test_nothing_recognized(self, runner, tmp_path) -> None:
        notes = tmp_path / "notes.txt"
        notes.write_text("   \n")
        plan = tmp_path / "plan.yaml"

        result = runner.invoke(app, ["extract", str(notes), "--plan", str(plan)])

        assert result.exit_code == 0
        assert "Nothing recognized" in result.stdout
        assert not plan.exists()

    def test_stdin(self, runner, tmp_path) -> None:
        plan = tmp_path / "plan.yaml"
        result = runner.invoke(
            app, ["extract", "-", "--plan", str(plan)], input="Title: Piped\n"
        )

        assert result.exit_code == 0
        assert PlanDocument.from_yaml(plan).title == "Piped"

    def test_missing_notes(self, runner, tmp_path) -> None:
        result = runner.invoke(
            app, ["extract", str(tmp_path / "nope.txt"), "--plan", str(tmp_path / "plan.yaml")]
        )
        assert result.exit_code == 1
        assert "Error reading notes" in result.stdout


class TestPrompt:
    """Test cases for the prompt command."""

    def test_prints_payload(self, runner, tmp_path) -> None:
        plan = tmp_path / "plan.yaml"
        PlanDocument.default().to_yaml(plan)

        result = runner.invoke(app, ["prompt", "--plan", str(plan)])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["project"]["title"] == "Untitled Veo 3.1 Masterpiece"

    def test_writes_file(self, runner, tmp_path) -> None:
        plan = tmp_path / "plan.yaml"
        PlanDocument(title="Short").to_yaml(plan)
        output = tmp_path / "prompt.json"

        result = runner.invoke(app, ["prompt", "--plan", str(plan), "--output", str(output)])

        assert result.exit_code == 0
        assert json.loads(output.read_text())["project"]["title"] == "Short"

    def test_missing_plan(self, runner, tmp_path) -> None:
        result = runner.invoke(app, ["prompt", "--plan", str(tmp_path / "plan.yaml")])
        assert result.exit_code == 1
        assert "vidplan init" in result.stdout


class TestStatus:
    """Test cases for the status command."""

    def test_summary(self, runner, tmp_path) -> None:
        plan = tmp_path / "plan.yaml"
        PlanDocument.default().to_yaml(plan)

        result = runner.invoke(app, ["status", "--plan", str(plan)])

        assert result.exit_code == 0
        assert "Characters: 1" in result.stdout
        assert "Cold Open" in result.stdout

    def test_invalid_plan(self, runner, tmp_path) -> None:
        plan = tmp_path / "plan.yaml"
        plan.write_text("sequences: 3\n")

        result = runner.invoke(app, ["status", "--plan", str(plan)])

        assert result.exit_code == 1
        assert "Error loading plan" in result.stdout


def test_version(runner) -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_version_short_flag(runner) -> None:
    result = runner.invoke(app, ["-v"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_verbose_short_flag(runner, tmp_path, notes_file) -> None:
    """Test that -v after a subcommand still means verbose."""
    plan = tmp_path / "plan.yaml"
    result = runner.invoke(app, ["extract", str(notes_file), "--plan", str(plan), "-v"])

    assert result.exit_code == 0
    assert PlanDocument.from_yaml(plan).title == "Night Run"
