"""Plan document data model."""

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field

from .entities import Character, Sequence
from .extraction import ExtractionResult
from .groups import Audio, Cinematography, Continuity, Delivery, Directives


class PlanDocument(BaseModel):
    """Structured plan for a generated video project."""

    title: str = Field(default="", description="Project title")
    logline: str = Field(default="", description="One-sentence pitch")
    tone: str = Field(default="", description="Tone")
    theme: str = Field(default="", description="Theme")
    brand_keywords: str = Field(default="", description="Comma separated brand keywords")
    reference_films: str = Field(default="", description="Comma separated reference films")
    characters: List[Character] = Field(default_factory=list, description="Cast, in display order")
    sequences: List[Sequence] = Field(default_factory=list, description="Sequences, in display order")
    cinematography: Cinematography = Field(default_factory=Cinematography)
    audio: Audio = Field(default_factory=Audio)
    continuity: Continuity = Field(default_factory=Continuity)
    directives: Directives = Field(default_factory=Directives)
    delivery: Delivery = Field(default_factory=Delivery)
    messy_ideas: str = Field(default="", description="Raw notes last fed to the extractor")
    notes: str = Field(default="", description="Free-text notes")

    @classmethod
    def from_yaml(cls, path: Path) -> "PlanDocument":
        """Load a plan from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: Path) -> None:
        """Save the plan to a YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                self.model_dump(), f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )

    def apply(self, result: ExtractionResult) -> "PlanDocument":
        """Return a new plan with an extraction result merged in.

        Top-level fields present in the result replace the plan's values;
        groups and entity lists are replaced wholesale. Absent fields keep
        their current values. The plan itself is left untouched.
        """
        return PlanDocument.model_validate({**self.model_dump(), **result.to_update()})

    # Cast and sequence editing

    def add_character(self, name: str = "New Character") -> Character:
        """Append a blank character and return it."""
        character = Character(name=name)
        self.characters.append(character)
        return character

    def update_character(self, character_id: str, **fields: str) -> Character:
        """Edit one character's attributes in place.

        Raises:
            KeyError: If no character has the given id.
        """
        character = self._find(self.characters, character_id)
        fields.pop("id", None)
        for key, value in fields.items():
            setattr(character, key, value)
        return character

    def remove_character(self, character_id: str) -> None:
        """Remove a character by id."""
        character = self._find(self.characters, character_id)
        self.characters.remove(character)

    def add_sequence(self, title: str = "New Sequence") -> Sequence:
        """Append a blank sequence and return it."""
        sequence = Sequence(title=title)
        self.sequences.append(sequence)
        return sequence

    def update_sequence(self, sequence_id: str, **fields: str) -> Sequence:
        """Edit one sequence's attributes in place.

        Raises:
            KeyError: If no sequence has the given id.
        """
        sequence = self._find(self.sequences, sequence_id)
        fields.pop("id", None)
        for key, value in fields.items():
            setattr(sequence, key, value)
        return sequence

    def remove_sequence(self, sequence_id: str) -> None:
        """Remove a sequence by id."""
        sequence = self._find(self.sequences, sequence_id)
        self.sequences.remove(sequence)

    @staticmethod
    def _find(items: list, item_id: str):
        for item in items:
            if item.id == item_id:
                return item
        raise KeyError(item_id)

    @classmethod
    def default(cls) -> "PlanDocument":
        """Return the seed plan for a premium launch film."""
        return cls(
            title="Untitled Veo 3.1 Masterpiece",
            logline=(
                "A high-end cinematic journey that follows a central hero through escalating "
                "stakes, showcasing premium visuals and emotive storytelling."
            ),
            tone="Prestige, cinematic, emotionally resonant, confident, high-budget aesthetic.",
            theme="Transformation and aspiration powered by human ingenuity.",
            brand_keywords=(
                "high luxury, precision, premium craftsmanship, timeless confidence, future-forward"
            ),
            reference_films="Blade Runner 2049, Dune, Top Gun Maverick, Dior commercials",
            characters=[
                Character(
                    name="Avery Cole — Visionary Protagonist",
                    essence=(
                        "Brilliant creative director orchestrating a breakthrough launch, "
                        "grounded yet inspiring."
                    ),
                    visual_traits="Sharp jawline, expressive eyes, iconic haircut, confident stance.",
                    wardrobe=(
                        "Tailored monochrome suit with subtle metallic accents, signature smart watch."
                    ),
                    motivations=(
                        "Deliver a flawless reveal that cements their legacy; protect their team "
                        "while chasing innovation."
                    ),
                    consistency_notes=(
                        "Always carries a sleek tablet prop, subtle lens flares highlight their presence."
                    ),
                ),
            ],
            sequences=[
                Sequence(
                    title="Cold Open — The Spark",
                    narrative_beat=(
                        "Establish Avery in a cavernous dark space, single beam of light, hint of "
                        "the product core."
                    ),
                    location="Industrial cathedral, volumetric light shafts, reflective floor.",
                    time_of_day="Blue hour interior",
                    mood="Anticipation, restrained energy, electric calm before ignition.",
                    key_shots=(
                        "Slow reveal push-in, macro inserts of activation gestures, drone orbit "
                        "establishing scale."
                    ),
                    transitions=(
                        "Match-cut from light flare into title graphic, whoosh of air and rising score."
                    ),
                ),
            ],
            cinematography=Cinematography(
                camera_language=(
                    "Hybrid of controlled Steadicam and precision robotic moves; balanced motion "
                    "with moments of stillness."
                ),
                lensing="Anamorphic 40mm and 65mm for hero moments, macro probe for detail.",
                movement=(
                    "Cinematic pushes, orbiting reveals, suspended crane drops synced with musical hits."
                ),
                lighting=(
                    "High-contrast chiaroscuro with motivated practicals, volumetric atmospherics."
                ),
                color_palette=(
                    "Gunmetal, obsidian, aurora highlights with warm skin balance; cinematic LUT."
                ),
                vfx="Subtle particle sims, holographic UI overlays, light bloom enhancements.",
            ),
            audio=Audio(
                soundtrack=(
                    "Hybrid orchestral synth score; pulses build into heroic crescendo with vocal textures."
                ),
                rhythm="Three-act build: hush → acceleration → triumphant release.",
                sound_design=(
                    "Futuristic foley, tactile UI interactions, engineered impacts supporting cuts."
                ),
                dialogue=(
                    "Minimal voiceover; intentional lines that reinforce core theme and call-to-action."
                ),
                mixing_notes=(
                    "Keep low-end tight, ensure clarity around hero product hits, widen mix at finale."
                ),
            ),
            continuity=Continuity(
                color_continuity=(
                    "Maintain consistent cyan accent across sequences; product glow always same hue."
                ),
                props_continuity=(
                    "Tablet prop in left hand, ring bevel detail visible, hero product illuminated "
                    "by rim light."
                ),
                brand_rules=(
                    "Premium minimalism, no slapstick, reinforce innovation, aspirational yet grounded."
                ),
            ),
            directives=Directives(
                must_include=(
                    "Hero product hero shot, team synergy montage, macro detail showcase, "
                    "triumphant skyline reveal."
                ),
                avoid=(
                    "Cartoonish lighting, handheld shake, cluttered frames, overt references to "
                    "competitors."
                ),
                creative_risks=(
                    "Experimental lighting transitions, abstract montage overlays, bold time-ramp cuts."
                ),
            ),
            delivery=Delivery(
                aspect_ratio="2.39:1 anamorphic",
                duration="60 seconds total runtime",
                render_format="ProRes 4444 with alpha-safe HUD layers",
                fps="24fps master, provide 60fps optical flow variant",
                negative_prompts=(
                    "No low-budget cues, no inconsistent character faces, avoid pastel color schemes."
                ),
            ),
            notes=(
                "Ensure Veo prompt mentions continuity of hero and consistent wardrobe across shots."
            ),
        )
