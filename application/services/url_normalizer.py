# application/services/url_normalizer.py
from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from domain.elements import RequestElement, ScenarioElement


def make_relative(element: RequestElement, base_url: str) -> RequestElement:
    """
    Strip base_url from the element url when the element targets the same base.
    Requests to another host keep their absolute url.
    The scheme compares case-insensitively (split_base_url lowercases it).
    """
    if element.base_url != base_url or not element.url.lower().startswith(base_url.lower()):
        return element
    relative = element.url[len(base_url):] or "/"
    return replace(element, url=relative)


def normalize(elements: Sequence[ScenarioElement], base_url: str) -> List[ScenarioElement]:
    """
    Make every request relative to base_url and number requests 0..n-1
    in order of appearance. Other elements pass through unnumbered.
    """
    out: List[ScenarioElement] = []
    next_id = 0
    for el in elements:
        if isinstance(el, RequestElement):
            out.append(replace(make_relative(el, base_url), id=next_id))
            next_id += 1
        else:
            out.append(el)
    return out
