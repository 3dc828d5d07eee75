"""
Scenario domain model
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from domain import header_names
from domain.elements import ScenarioElement


# header name -> protocol builder method used by the simulation template
BASE_HEADERS: Dict[str, str] = {
    header_names.ACCEPT: "acceptHeader",
    header_names.ACCEPT_CHARSET: "acceptCharsetHeader",
    header_names.ACCEPT_ENCODING: "acceptEncodingHeader",
    header_names.ACCEPT_LANGUAGE: "acceptLanguageHeader",
    header_names.AUTHORIZATION: "authorizationHeader",
    header_names.CONNECTION: "connection",
    header_names.DO_NOT_TRACK: "doNotTrackHeader",
    header_names.USER_AGENT: "userAgentHeader",
}


HeaderGroups = Dict[int, List[Tuple[str, str]]]


@dataclass(frozen=True)
class ProtocolElement:
    """
    Baseline shared by every request: the most common base URL and
    the most common value of each well-known header.
    """
    base_url: str
    headers: Dict[str, str] = field(default_factory=dict)

    def builder_calls(self) -> List[Tuple[str, str]]:
        return [(BASE_HEADERS[name], value) for name, value in self.headers.items() if name in BASE_HEADERS]


@dataclass(frozen=True)
class Scenario:
    """
    Scenario aggregate root
    """
    elements: Tuple[ScenarioElement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def is_empty(self) -> bool:
        return not self.elements
