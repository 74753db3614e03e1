"""Paragraph pass: detect cast, sequences and topic paragraphs."""

import re
from typing import Optional

from ..models import Character, Sequence
from .base import BaseClassifier, PassOutput
from .rules import (
    CAST_BLOCKERS,
    CAST_WORDS,
    SEQUENCE_WORDS,
    TOPIC_RULES,
    TopicRule,
    mentions,
)

BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


def split_blocks(text: str) -> list[str]:
    """Split text on blank lines, dropping empty blocks."""
    return [block.strip() for block in BLOCK_SEPARATOR.split(text) if block.strip()]


def block_heading(block: str, labels: tuple[str, ...] = ()) -> Optional[str]:
    """Return the name a block introduces on its first line.

    A leading label such as ``Character -`` is dropped first. The heading is
    then the text before the first colon, or before the first hyphen when
    the line has no colon. After a label with neither, the rest of the line
    is the heading, so ``Character - Mara: ...`` and ``Character - Mara``
    both yield ``Mara``.
    """
    first_line = block.split("\n", 1)[0].strip()

    labelled = None
    if labels:
        labelled = re.match(
            r"^(?:%s)\s*[-–—]\s*" % "|".join(map(re.escape, labels)),
            first_line,
            re.IGNORECASE,
        )
        if labelled:
            first_line = first_line[labelled.end():]

    heading, sep, _ = first_line.partition(":")
    if not sep:
        heading, sep, _ = first_line.partition("-")
    if not sep and not labelled:
        return None

    return heading.strip() or None


class ParagraphClassifier(BaseClassifier):
    """Classifier for blank-line separated paragraphs."""

    def __init__(self, topics: tuple[TopicRule, ...] = TOPIC_RULES) -> None:
        super().__init__()
        self._topics = topics

    @property
    def name(self) -> str:
        return "ParagraphClassifier"

    def run(self, text: str) -> PassOutput:
        output = PassOutput()

        for block in split_blocks(text):
            lowered = block.lower()

            # Scene vocabulary wins over cast vocabulary
            if mentions(lowered, CAST_WORDS) and not mentions(lowered, CAST_BLOCKERS):
                name = block_heading(block, CAST_WORDS)
                character = Character(
                    name=name or f"Character {len(output.characters) + 1}",
                    essence=block,
                )
                output.characters.append(character)
                self._logger.debug(f"Character block: {character.name!r}")
                continue

            if mentions(lowered, SEQUENCE_WORDS):
                title = block_heading(block, SEQUENCE_WORDS)
                sequence = Sequence(
                    title=title or f"Sequence {len(output.sequences) + 1}",
                    narrative_beat=block,
                )
                output.sequences.append(sequence)
                self._logger.debug(f"Sequence block: {sequence.title!r}")
                continue

            for topic in self._topics:
                if not topic.matches(lowered):
                    continue
                if topic.overwrite:
                    output.overrides.set(topic.target, block)
                else:
                    output.overrides.set_default(topic.target, block)

        return output
