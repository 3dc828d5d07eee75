# application/services/header_deduplicator.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Iterable, List, Mapping, Sequence, Tuple

from domain import header_names
from domain.elements import RequestElement, ScenarioElement
from domain.scenario import HeaderGroups

ALWAYS_FILTERED = frozenset({header_names.COOKIE, header_names.CONTENT_LENGTH, header_names.HOST})


def filtered_header_names(automatic_referer: bool) -> FrozenSet[str]:
    if automatic_referer:
        return ALWAYS_FILTERED | {header_names.REFERER}
    return ALWAYS_FILTERED


@dataclass(frozen=True)
class DeduplicationResult:
    elements: List[ScenarioElement]
    header_groups: HeaderGroups


class HeaderDeduplicator:
    """
    Assigns each request a shared header set.

    - extra headers = headers - filtered names - values equal to the baseline
    - the first request introducing a set owns it (key = its id)
    - later requests with the same set reference the owner's id
    - requests without extra headers reference nothing
    """

    def __init__(self, filtered_headers: Iterable[str] = ALWAYS_FILTERED):
        self._filtered = frozenset(filtered_headers)

    def extra_headers(self, element: RequestElement, base_headers: Mapping[str, str]) -> List[Tuple[str, str]]:
        accepted = [
            (name, value)
            for name, value in element.headers.items()
            if name not in self._filtered and base_headers.get(name) != value
        ]
        return sorted(accepted, key=lambda pair: pair[0])

    def deduplicate(
        self,
        elements: Sequence[ScenarioElement],
        base_headers: Mapping[str, str],
    ) -> DeduplicationResult:
        groups: Dict[int, List[Tuple[str, str]]] = {}
        out: List[ScenarioElement] = []

        for el in elements:
            if not isinstance(el, RequestElement):
                out.append(el)
                continue

            accepted = self.extra_headers(el, base_headers)
            if not accepted:
                out.append(replace(el, filtered_headers_id=None))
                continue

            owner_id = self._find_group(groups, accepted)
            if owner_id is None:
                groups[el.id] = accepted
                owner_id = el.id
            out.append(replace(el, filtered_headers_id=owner_id))

        return DeduplicationResult(
            elements=out,
            header_groups={k: groups[k] for k in sorted(groups)},
        )

    def _find_group(self, groups: Dict[int, List[Tuple[str, str]]], accepted: List[Tuple[str, str]]):
        # both sides are sorted by name and names are unique per element,
        # so list equality is set equality
        for group_id, existing in groups.items():
            if existing == accepted:
                return group_id
        return None
