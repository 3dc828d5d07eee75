# domain/elements/pause.py
from __future__ import annotations

from dataclasses import dataclass

from domain.elements.base import ScenarioElement


@dataclass(frozen=True)
class PauseElement(ScenarioElement):
    duration_ms: int
