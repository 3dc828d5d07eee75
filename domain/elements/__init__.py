from domain.elements.base import ScenarioElement
from domain.elements.request import (
    RequestBody,
    RequestBodyBytes,
    RequestBodyParams,
    RequestElement,
    split_base_url,
)
from domain.elements.pause import PauseElement
from domain.elements.tag import TagElement

__all__ = [
    "ScenarioElement",
    "RequestBody",
    "RequestBodyBytes",
    "RequestBodyParams",
    "RequestElement",
    "split_base_url",
    "PauseElement",
    "TagElement",
]
