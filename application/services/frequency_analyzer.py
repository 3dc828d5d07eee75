# application/services/frequency_analyzer.py
from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Optional, Sequence

from domain.elements import RequestElement, ScenarioElement
from domain.exceptions import EmptyScenarioError
from domain.scenario import BASE_HEADERS


def most_frequent(values: Iterable[str]) -> Optional[str]:
    """
    Most common value, or None for an empty input.
    Ties go to the value seen first (Counter keeps insertion order).
    """
    counts = Counter(values)
    if not counts:
        return None
    return counts.most_common(1)[0][0]


def resolve_base_url(elements: Sequence[ScenarioElement]) -> str:
    base_url = most_frequent(el.base_url for el in elements if isinstance(el, RequestElement))
    if base_url is None:
        raise EmptyScenarioError("cannot resolve a base url without request elements")
    return base_url


def resolve_base_headers(elements: Sequence[ScenarioElement]) -> Dict[str, str]:
    requests = [el for el in elements if isinstance(el, RequestElement)]
    base_headers: Dict[str, str] = {}
    for header_name in BASE_HEADERS:
        value = most_frequent(
            req.headers[header_name] for req in requests if header_name in req.headers
        )
        if value is not None:
            base_headers[header_name] = value
    return base_headers
