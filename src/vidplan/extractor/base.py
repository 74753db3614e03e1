"""Shared pieces of the two extraction passes."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..models import Character, Sequence

logger = logging.getLogger(__name__)


def normalize_text(raw: str) -> str:
    """Drop carriage returns so both passes see ``\\n`` line endings."""
    return raw.replace("\r", "")


class Overrides:
    """Accumulator of extracted values keyed by target.

    Targets are plan field names or ``"<group>.<attribute>"`` paths.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, target: str, value: str) -> None:
        """Assign a value, replacing anything already extracted."""
        self._values[target] = value

    def set_default(self, target: str, value: str) -> bool:
        """Assign a value only if the target is still unset.

        Returns:
            True if the value was stored.
        """
        if target in self._values:
            return False
        self._values[target] = value
        return True

    def get(self, target: str) -> Optional[str]:
        return self._values.get(target)

    def __contains__(self, target: str) -> bool:
        return target in self._values

    def __len__(self) -> int:
        return len(self._values)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._values.items())

    def copy(self) -> "Overrides":
        clone = Overrides()
        clone._values = dict(self._values)
        return clone

    def scalars(self) -> dict[str, str]:
        """Return the top-level plan fields."""
        return {target: value for target, value in self._values.items() if "." not in target}

    def group(self, name: str) -> dict[str, str]:
        """Return the attributes extracted for one field group."""
        prefix = f"{name}."
        return {
            target[len(prefix):]: value
            for target, value in self._values.items()
            if target.startswith(prefix)
        }


@dataclass
class PassOutput:
    """What a single extraction pass found."""

    overrides: Overrides = field(default_factory=Overrides)
    characters: list[Character] = field(default_factory=list)
    sequences: list[Sequence] = field(default_factory=list)


class BaseClassifier(ABC):
    """Abstract base class for extraction passes.

    A pass reads normalized note text and reports what it recognized. It
    keeps no state between calls.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the pass name."""
        ...

    @abstractmethod
    def run(self, text: str) -> PassOutput:
        """Classify the text.

        Args:
            text: Notes with normalized line endings.

        Returns:
            Values and entities recognized by this pass.
        """
        ...
