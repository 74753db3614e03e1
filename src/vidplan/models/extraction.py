"""Partial plan update produced by the extractor."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .entities import Character, Sequence
from .groups import Audio, Cinematography, Continuity, Delivery, Directives


class ExtractionResult(BaseModel):
    """Partial plan document.

    A field left as None was not identified in the notes and must not touch
    the plan. Groups, when present, are complete records: the prior group
    with the extracted attributes applied on top.
    """

    title: Optional[str] = Field(None, description="Project title")
    logline: Optional[str] = Field(None, description="One-sentence pitch")
    tone: Optional[str] = Field(None, description="Tone")
    theme: Optional[str] = Field(None, description="Theme")
    brand_keywords: Optional[str] = Field(None, description="Brand keywords")
    reference_films: Optional[str] = Field(None, description="Reference films")
    notes: Optional[str] = Field(None, description="Free-text notes")
    characters: Optional[List[Character]] = Field(None, description="Replacement cast")
    sequences: Optional[List[Sequence]] = Field(None, description="Replacement sequences")
    cinematography: Optional[Cinematography] = Field(None, description="Full cinematography group")
    audio: Optional[Audio] = Field(None, description="Full audio group")
    continuity: Optional[Continuity] = Field(None, description="Full continuity group")
    directives: Optional[Directives] = Field(None, description="Full directives group")
    delivery: Optional[Delivery] = Field(None, description="Full delivery group")

    def is_empty(self) -> bool:
        """Return True when nothing was extracted."""
        return not self.to_update()

    def to_update(self) -> dict[str, Any]:
        """Return only the fields that were extracted."""
        return self.model_dump(exclude_none=True)
