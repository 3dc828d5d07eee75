# infrastructure/scenario/base_loader.py
"""
Recording document -> Scenario.

    elements:
      - type: request
        method: GET
        url: http://example.com/path
        headers: {Accept: "*/*"}          # or [[name, value], ...]
        body: {bytes_b64: ...} | {text: ...} | {params: [[k, v], ...]}
        status: 200
      - type: pause
        duration_ms: 500
      - type: tag
        text: login
"""
from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from domain.elements import (
    PauseElement,
    RequestBody,
    RequestBodyBytes,
    RequestBodyParams,
    RequestElement,
    ScenarioElement,
    TagElement,
)
from domain.scenario import Scenario


class ScenarioLoadError(Exception):
    pass


class ScenarioLoaderBase(ABC):
    def load_from_file(self, path: str) -> Scenario:
        p = Path(path)
        if not p.exists():
            raise ScenarioLoadError(f"Recording file not found: {path}")

        data = self._load_file(p)

        if data is None:
            raise ScenarioLoadError(f"Recording file is empty: {path}")
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Recording file is invalid: {path}")

        return self.load_from_dict(data)

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...

    def load_from_dict(self, data: Dict[str, Any]) -> Scenario:
        raw_elements = data.get("elements", [])
        if not isinstance(raw_elements, list):
            raise ScenarioLoadError("elements must be a list")
        return Scenario(elements=tuple(self._load_element(i, e) for i, e in enumerate(raw_elements)))

    def _load_element(self, index: int, data: Any) -> ScenarioElement:
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"element {index} must be a mapping")

        element_type = str(data.get("type", "")).lower()
        if element_type == "request":
            return self._load_request(index, data)
        if element_type == "pause":
            return PauseElement(duration_ms=self._load_int(index, data, "duration_ms", 0))
        if element_type == "tag":
            return TagElement(text=str(data.get("text", "")))

        raise ScenarioLoadError(f"element {index} has unknown type: {element_type!r}")

    def _load_request(self, index: int, data: Dict[str, Any]) -> RequestElement:
        url = data.get("url")
        if not url:
            raise ScenarioLoadError(f"element {index} request has no url")

        return RequestElement(
            method=str(data.get("method", "GET")).upper(),
            url=str(url),
            headers=self._load_headers(index, data.get("headers")),
            body=self._load_body(index, data.get("body")),
            status_code=self._load_int(index, data, "status", None),
        )

    def _load_headers(self, index: int, raw: Any) -> Dict[str, str]:
        if raw is None:
            return {}
        if isinstance(raw, dict):
            return {str(k): str(v) for k, v in raw.items()}
        if isinstance(raw, list):
            headers: Dict[str, str] = {}
            for item in raw:
                if not isinstance(item, (list, tuple)) or len(item) != 2:
                    raise ScenarioLoadError(f"element {index} header must be a [name, value] pair")
                # repeated names: last value wins
                headers[str(item[0])] = str(item[1])
            return headers
        raise ScenarioLoadError(f"element {index} headers must be a mapping or a list of pairs")

    def _load_body(self, index: int, raw: Any) -> Optional[RequestBody]:
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise ScenarioLoadError(f"element {index} body must be a mapping")

        if "bytes_b64" in raw:
            try:
                return RequestBodyBytes(content=base64.b64decode(raw["bytes_b64"], validate=True))
            except (binascii.Error, TypeError) as exc:
                raise ScenarioLoadError(f"element {index} body is not valid base64") from exc
        if "text" in raw:
            encoding = str(raw.get("encoding", "utf-8"))
            try:
                return RequestBodyBytes(content=str(raw["text"]).encode(encoding))
            except (LookupError, UnicodeError) as exc:
                raise ScenarioLoadError(f"element {index} body text cannot be encoded as {encoding}: {exc}") from exc
        if "params" in raw:
            params: List = []
            for item in raw["params"] or []:
                if isinstance(item, (list, tuple)) and len(item) >= 2:
                    params.append((str(item[0]), str(item[1])))
            return RequestBodyParams(params=params)

        raise ScenarioLoadError(f"element {index} body has no bytes_b64, text or params")

    def _load_int(self, index: int, data: Dict[str, Any], key: str, default: Optional[int]) -> Optional[int]:
        value = data.get(key)
        if value is None:
            return default
        # YAML booleans are ints in Python
        if isinstance(value, bool):
            raise ScenarioLoadError(f"element {index} {key} must be an integer: {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ScenarioLoadError(f"element {index} {key} must be an integer: {value!r}") from exc
