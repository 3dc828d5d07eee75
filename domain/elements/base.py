# domain/elements/base.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScenarioElement:
    """
    One recorded step of a scenario.
    Position in Scenario.elements is the recorded execution order.
    """
