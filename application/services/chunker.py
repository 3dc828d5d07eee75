# application/services/chunker.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from domain.elements import ScenarioElement
from domain.exceptions import ValidationError

EVENTS_GROUPING = 100


@dataclass(frozen=True)
class FlatChain:
    elements: List[ScenarioElement]

    def flatten(self) -> List[ScenarioElement]:
        return list(self.elements)


@dataclass(frozen=True)
class GroupedChains:
    groups: List[List[ScenarioElement]]

    def flatten(self) -> List[ScenarioElement]:
        return [el for group in self.groups for el in group]


Chains = Union[FlatChain, GroupedChains]


def chunk(elements: Sequence[ScenarioElement], grouping: int = EVENTS_GROUPING) -> Chains:
    """
    Split into consecutive groups of `grouping` elements once the sequence
    is longer than `grouping`; the last group may be shorter.
    """
    if grouping < 1:
        raise ValidationError(f"grouping must be positive: {grouping}")
    items = list(elements)
    if len(items) > grouping:
        return GroupedChains([items[i:i + grouping] for i in range(0, len(items), grouping)])
    return FlatChain(items)
