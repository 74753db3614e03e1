"""Line pass: route ``key: value`` lines to plan fields."""

from typing import Optional

from .base import BaseClassifier, PassOutput
from .rules import LINE_RULES, LineRule


def split_line(line: str) -> Optional[tuple[str, str]]:
    """Split a line at its first colon.

    Returns:
        ``(lower-cased key, stripped value)``, or None if the line has no colon.
    """
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.lower(), value.strip()


def match_rule(key: str, rules: tuple[LineRule, ...] = LINE_RULES) -> Optional[LineRule]:
    """Return the first rule matching a lower-cased key."""
    for rule in rules:
        if rule.matches(key):
            return rule
    return None


class LineClassifier(BaseClassifier):
    """Classifier for labelled lines such as ``Lighting: neon rim light``."""

    def __init__(self, rules: tuple[LineRule, ...] = LINE_RULES) -> None:
        super().__init__()
        self._rules = rules

    @property
    def name(self) -> str:
        return "LineClassifier"

    def run(self, text: str) -> PassOutput:
        output = PassOutput()
        lines = [line.strip() for line in text.split("\n")]

        for line in filter(None, lines):
            parts = split_line(line)
            if parts is None:
                continue

            key, value = parts
            rule = match_rule(key, self._rules)
            if rule is None:
                self._logger.debug(f"No rule for key: {key!r}")
                continue

            # Later lines replace earlier ones, empty values included
            output.overrides.set(rule.target, value)
            self._logger.debug(f"{key!r} -> {rule.target}")

        return output
