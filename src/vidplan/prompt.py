"""Serialize a plan document into a video generation prompt payload."""

import re
from typing import Any, Optional

from .config import config
from .models import PlanDocument

KEYWORD_SEPARATOR = re.compile(r"[,|\n]")


def normalize_keyword_list(value: str) -> list[str]:
    """Split a comma, pipe or newline separated list into clean items."""
    return [item.strip() for item in KEYWORD_SEPARATOR.split(value) if item.strip()]


def build_prompt(document: PlanDocument, model: Optional[str] = None) -> dict[str, Any]:
    """Build the JSON-serializable prompt payload for a plan.

    Characters and sequences get positional continuity ids
    (``character_1``, ``sequence_1``...) so prompts can refer back to them.

    Args:
        document: Plan to serialize.
        model: Target model name. Defaults to config.prompt_model.

    Returns:
        Payload dict with camelCase keys.
    """
    cinematography = document.cinematography
    audio = document.audio
    delivery = document.delivery

    return {
        "model": model or config.prompt_model,
        "project": {
            "title": document.title,
            "logline": document.logline,
            "tone": document.tone,
            "theme": document.theme,
            "keywords": normalize_keyword_list(document.brand_keywords),
            "referenceFilms": normalize_keyword_list(document.reference_films),
        },
        "characters": [
            {
                "continuityId": f"character_{i + 1}",
                "name": character.name,
                "essence": character.essence,
                "visualTraits": character.visual_traits,
                "wardrobe": character.wardrobe,
                "motivations": character.motivations,
                "consistencyNotes": character.consistency_notes,
            }
            for i, character in enumerate(document.characters)
        ],
        "sequences": [
            {
                "continuityId": f"sequence_{i + 1}",
                "title": sequence.title,
                "narrativeBeat": sequence.narrative_beat,
                "location": sequence.location,
                "timeOfDay": sequence.time_of_day,
                "mood": sequence.mood,
                "keyShots": sequence.key_shots,
                "transitions": sequence.transitions,
            }
            for i, sequence in enumerate(document.sequences)
        ],
        "cinematography": {
            "cameraLanguage": cinematography.camera_language,
            "lensing": cinematography.lensing,
            "movement": cinematography.movement,
            "lighting": cinematography.lighting,
            "colorPalette": cinematography.color_palette,
            "vfx": cinematography.vfx,
        },
        "audio": {
            "soundtrack": audio.soundtrack,
            "rhythm": audio.rhythm,
            "soundDesign": audio.sound_design,
            "dialogue": audio.dialogue,
            "mixingNotes": audio.mixing_notes,
        },
        "continuity": {
            "color": document.continuity.color_continuity,
            "props": document.continuity.props_continuity,
            "brand": document.continuity.brand_rules,
        },
        "directives": {
            "mustInclude": document.directives.must_include,
            "avoid": document.directives.avoid,
            "creativeRisks": document.directives.creative_risks,
        },
        "delivery": {
            "aspectRatio": delivery.aspect_ratio,
            "duration": delivery.duration,
            "renderFormat": delivery.render_format,
            "fps": delivery.fps,
            "negativePrompts": delivery.negative_prompts,
        },
        "notes": document.notes,
    }
