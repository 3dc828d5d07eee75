# domain/elements/request.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from domain.elements.base import ScenarioElement


@dataclass(frozen=True)
class RequestBody:
    pass


@dataclass(frozen=True)
class RequestBodyBytes(RequestBody):
    """Raw payload, dumped to a side file on export."""
    content: bytes


@dataclass(eq=True, frozen=True)
class RequestBodyParams(RequestBody):
    """Form parameters, rendered inline."""
    params: List[Tuple[str, str]] = field(default_factory=list)

    # holds a list, so instances are unhashable
    __hash__ = None  # type: ignore[assignment]


def split_base_url(url: str) -> str:
    """
    scheme://authority part of an absolute URL.
    Relative URLs have no base and yield "".
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return ""
    return f"{parts.scheme}://{parts.netloc}"


@dataclass(eq=True, frozen=True)
class RequestElement(ScenarioElement):
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[RequestBody] = None
    status_code: Optional[int] = None
    base_url: str = ""
    # annotations filled by the export pipeline
    id: Optional[int] = None
    filtered_headers_id: Optional[int] = None

    # holds a dict, so instances are unhashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not self.base_url:
            object.__setattr__(self, "base_url", split_base_url(self.url))
