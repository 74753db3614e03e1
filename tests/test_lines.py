"""Tests for the line pass."""

from vidplan.extractor.lines import LineClassifier, split_line


class TestSplitLine:
    """Test cases for split_line."""

    def test_no_colon(self) -> None:
        assert split_line("just a thought") is None

    def test_value_keeps_later_colons(self) -> None:
        """Test that only the first colon separates key and value."""
        assert split_line("Notes: call at 10:30: sharp") == ("notes", "call at 10:30: sharp")

    def test_empty_value(self) -> None:
        assert split_line("Title:") == ("title", "")


class TestLineClassifier:
    """Test cases for LineClassifier."""

    def test_scalar_and_group_values(self) -> None:
        """Test that scalars and group attributes are both collected."""
        output = LineClassifier().run("Title: Night Run\nAspect ratio: 16:9\nFPS: 24")

        assert output.overrides.scalars() == {"title": "Night Run"}
        assert output.overrides.group("delivery") == {"aspect_ratio": "16:9", "fps": "24"}

    def test_keys_are_case_insensitive(self) -> None:
        output = LineClassifier().run("LIGHTING:   Neon  ")
        assert output.overrides.get("cinematography.lighting") == "Neon"

    def test_later_line_replaces_earlier(self) -> None:
        output = LineClassifier().run("Tone: calm\nTone: frantic")
        assert output.overrides.get("tone") == "frantic"

    def test_empty_value_is_kept(self) -> None:
        """Test that an empty value clears the field instead of being skipped."""
        output = LineClassifier().run("Title: Draft\nTitle:")
        assert "title" in output.overrides
        assert output.overrides.get("title") == ""

    def test_ignored_lines(self) -> None:
        """Test that prose, blank lines and unknown keys produce nothing."""
        output = LineClassifier().run("Some prose here\n\n   \nMisc: whatever")
        assert len(output.overrides) == 0

    def test_no_entities(self) -> None:
        """Test that the line pass never creates characters or sequences."""
        output = LineClassifier().run("Character - Mara: courier\nScene: rooftop")
        assert output.characters == []
        assert output.sequences == []
