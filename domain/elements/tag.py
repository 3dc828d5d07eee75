# domain/elements/tag.py
from __future__ import annotations

from dataclasses import dataclass

from domain.elements.base import ScenarioElement


@dataclass(frozen=True)
class TagElement(ScenarioElement):
    """Free-text marker added by the user while recording."""
    text: str
