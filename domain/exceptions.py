# domain/exceptions.py
from __future__ import annotations

from typing import Optional


class ValidationError(Exception):
    pass


class ScenarioExportError(Exception):
    pass


class EmptyScenarioError(ScenarioExportError, ValidationError):
    """Raised before any I/O when an export is requested for a scenario without elements."""


class BodyDumpError(ScenarioExportError):
    def __init__(self, element_id: Optional[int], path: str, reason: str):
        super().__init__(f"failed to dump request body {element_id} to {path}: {reason}")
        self.element_id = element_id
        self.path = path


class OutputWriteError(ScenarioExportError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to write {path}: {reason}")
        self.path = path
