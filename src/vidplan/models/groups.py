"""Fixed-shape field groups of a plan document.

Each group is a flat record of string attributes. Groups are always
replaced wholesale when a plan is updated, so an update for one attribute
carries every other attribute of the group too.
"""

from pydantic import BaseModel, Field


class Cinematography(BaseModel):
    """Camera, lens and light treatment."""

    camera_language: str = Field(default="", description="Overall camera grammar")
    lensing: str = Field(default="", description="Lens choices")
    movement: str = Field(default="", description="Camera movement")
    lighting: str = Field(default="", description="Lighting approach")
    color_palette: str = Field(default="", description="Palette and grade")
    vfx: str = Field(default="", description="Visual effects")


class Audio(BaseModel):
    """Music, pacing and sound."""

    soundtrack: str = Field(default="", description="Score or music direction")
    rhythm: str = Field(default="", description="Pacing and edit rhythm")
    sound_design: str = Field(default="", description="Foley and sound texture")
    dialogue: str = Field(default="", description="Voiceover and dialogue")
    mixing_notes: str = Field(default="", description="Mix guidance")


class Continuity(BaseModel):
    """Rules that must hold across every shot."""

    color_continuity: str = Field(default="", description="Color rules across sequences")
    props_continuity: str = Field(default="", description="Props and set continuity")
    brand_rules: str = Field(default="", description="Brand governance")


class Directives(BaseModel):
    """Creative must-haves and exclusions."""

    must_include: str = Field(default="", description="Required moments")
    avoid: str = Field(default="", description="Things to avoid")
    creative_risks: str = Field(default="", description="Experiments worth trying")


class Delivery(BaseModel):
    """Render and delivery settings."""

    aspect_ratio: str = Field(default="", description="Output aspect ratio")
    duration: str = Field(default="", description="Target runtime")
    render_format: str = Field(default="", description="Render container and codec")
    fps: str = Field(default="", description="Frame rate")
    negative_prompts: str = Field(default="", description="Things the generator must not produce")


# Document attribute name -> group model
GROUP_MODELS: dict[str, type[BaseModel]] = {
    "cinematography": Cinematography,
    "audio": Audio,
    "continuity": Continuity,
    "directives": Directives,
    "delivery": Delivery,
}
