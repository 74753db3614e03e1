"""Keyword tables driving the note extractor.

Targets are either a top-level plan field (``"title"``) or a group
attribute written as ``"<group>.<attribute>"`` (``"audio.soundtrack"``).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineRule:
    """Route a ``key: value`` line to a target when the key matches."""

    target: str
    prefixes: tuple[str, ...] = ()
    substrings: tuple[str, ...] = ()

    def matches(self, key: str) -> bool:
        """Test a lower-cased key against this rule."""
        return key.startswith(self.prefixes) or any(s in key for s in self.substrings)


@dataclass(frozen=True)
class TopicRule:
    """Assign a whole paragraph to a target when it mentions a trigger word.

    With ``overwrite`` set, later paragraphs replace earlier ones; otherwise
    the first matching paragraph is kept.
    """

    target: str
    triggers: tuple[str, ...]
    overwrite: bool

    def matches(self, block: str) -> bool:
        """Test a lower-cased paragraph against this rule."""
        return any(word in block for word in self.triggers)


# Evaluated top to bottom, first match wins. Specific keys sit above the
# generic ones that would otherwise shadow them ("brand rule" above
# "brand", "color continuity" above "color").
LINE_RULES: tuple[LineRule, ...] = (
    LineRule("title", prefixes=("title",)),
    LineRule("logline", prefixes=("logline",)),
    LineRule("tone", prefixes=("tone",)),
    LineRule("theme", prefixes=("theme",)),
    LineRule("brand_keywords", substrings=("keyword",)),
    LineRule("continuity.brand_rules", substrings=("brand rule",)),
    LineRule("brand_keywords", prefixes=("brand",)),
    LineRule("reference_films", substrings=("reference", "film")),
    LineRule("directives.must_include", substrings=("must include", "must-have")),
    LineRule("directives.avoid", prefixes=("avoid", "don't", "do not")),
    LineRule("directives.creative_risks", substrings=("risk", "experiment")),
    LineRule("continuity.color_continuity", substrings=("color continuity",)),
    LineRule("continuity.props_continuity", substrings=("props", "set continuity")),
    LineRule("continuity.brand_rules", substrings=("governance",)),
    LineRule("delivery.aspect_ratio", substrings=("aspect",)),
    LineRule("delivery.duration", substrings=("duration", "length")),
    LineRule("delivery.render_format", substrings=("format",)),
    LineRule("delivery.fps", substrings=("frame", "fps")),
    LineRule("delivery.negative_prompts", substrings=("negative prompt",)),
    LineRule("notes", prefixes=("notes", "note")),
    LineRule("audio.soundtrack", substrings=("soundtrack", "music")),
    LineRule("audio.rhythm", substrings=("rhythm", "pace")),
    LineRule("audio.sound_design", substrings=("sound design", "foley")),
    LineRule("audio.dialogue", substrings=("dialogue", "voice")),
    LineRule("audio.mixing_notes", substrings=("mix",)),
    LineRule("cinematography.camera_language", substrings=("camera",)),
    LineRule("cinematography.lensing", substrings=("lens",)),
    LineRule("cinematography.movement", substrings=("movement",)),
    LineRule("cinematography.lighting", substrings=("lighting",)),
    LineRule("cinematography.color_palette", substrings=("color",)),
    LineRule("cinematography.vfx", substrings=("vfx", "effects")),
)

TOPIC_RULES: tuple[TopicRule, ...] = (
    TopicRule("cinematography.lighting", ("lighting", "chiaroscuro", "exposure"), overwrite=True),
    TopicRule(
        "cinematography.camera_language",
        ("camera", "framing", "lense", "lens", "shot style"),
        overwrite=False,
    ),
    TopicRule(
        "cinematography.movement", ("movement", "tracking", "steadicam", "drone"), overwrite=True
    ),
    TopicRule(
        "cinematography.color_palette", ("color", "palette", "grading", "lut"), overwrite=True
    ),
    TopicRule("cinematography.vfx", ("vfx", "effects", "particles", "hologram"), overwrite=True),
    TopicRule("audio.soundtrack", ("music", "score", "soundtrack"), overwrite=False),
    TopicRule("audio.rhythm", ("rhythm", "pace", "tempo"), overwrite=False),
    TopicRule("audio.sound_design", ("sound design", "foley", "audio texture"), overwrite=False),
    TopicRule("audio.dialogue", ("voice", "dialogue", "narration"), overwrite=False),
)

# Paragraph vocabulary
CAST_WORDS: tuple[str, ...] = ("character", "protagonist", "antagonist", "hero", "villain")
# Any of these in a paragraph rules out a cast entry
CAST_BLOCKERS: tuple[str, ...] = ("scene", "sequence", "shot", "beat")
SEQUENCE_WORDS: tuple[str, ...] = ("scene", "sequence", "beat", "montage", "shot")


def mentions(block: str, words: tuple[str, ...]) -> bool:
    """Return True if a lower-cased block contains any of the words."""
    return any(word in block for word in words)
