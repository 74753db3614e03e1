"""Cast and sequence data models."""

import uuid

from pydantic import BaseModel, Field


def new_id() -> str:
    """Generate an opaque identifier for a plan entity."""
    return uuid.uuid4().hex


class Character(BaseModel):
    """A cast member in the plan."""

    id: str = Field(default_factory=new_id, description="Opaque character identifier")
    name: str = Field(default="", description="Display name")
    essence: str = Field(default="", description="Who the character is")
    visual_traits: str = Field(default="", description="Face, build, posture")
    wardrobe: str = Field(default="", description="Costume and accessories")
    motivations: str = Field(default="", description="What drives the character")
    consistency_notes: str = Field(default="", description="Details to keep stable across shots")


class Sequence(BaseModel):
    """A narrative sequence in the plan."""

    id: str = Field(default_factory=new_id, description="Opaque sequence identifier")
    title: str = Field(default="", description="Sequence title")
    narrative_beat: str = Field(default="", description="What happens")
    location: str = Field(default="", description="Where it happens")
    time_of_day: str = Field(default="", description="Time of day or light condition")
    mood: str = Field(default="", description="Emotional register")
    key_shots: str = Field(default="", description="Shots that must appear")
    transitions: str = Field(default="", description="How the sequence enters and exits")
