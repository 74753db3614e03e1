"""Data models for the video planner."""

from .entities import Character, Sequence, new_id
from .groups import Audio, Cinematography, Continuity, Delivery, Directives, GROUP_MODELS
from .extraction import ExtractionResult
from .document import PlanDocument

__all__ = [
    "Character",
    "Sequence",
    "new_id",
    "Audio",
    "Cinematography",
    "Continuity",
    "Delivery",
    "Directives",
    "GROUP_MODELS",
    "ExtractionResult",
    "PlanDocument",
]
