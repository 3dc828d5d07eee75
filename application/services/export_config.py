# application/services/export_config.py
from __future__ import annotations

import codecs
import re
from dataclasses import dataclass
from pathlib import Path

from application.services.chunker import EVENTS_GROUPING
from domain.exceptions import ValidationError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class ExportConfig:
    output_folder: str
    class_name: str
    request_bodies_folder: str
    package: str = ""
    encoding: str = "utf-8"
    automatic_referer: bool = True
    scenario_name: str = "Scenario Name"
    events_grouping: int = EVENTS_GROUPING

    def __post_init__(self) -> None:
        if not _IDENTIFIER.match(self.class_name or ""):
            raise ValidationError(f"invalid class name: {self.class_name!r}")
        if self.package and not all(_IDENTIFIER.match(seg) for seg in self.package.split(".")):
            raise ValidationError(f"invalid package: {self.package!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValidationError(f"unknown encoding: {self.encoding}") from exc
        if self.events_grouping < 1:
            raise ValidationError(f"events_grouping must be positive: {self.events_grouping}")

    @property
    def simulation_file_name(self) -> str:
        return f"{self.class_name}.scala"

    def output_dir(self) -> Path:
        base = Path(self.output_folder)
        if not self.package:
            return base
        return base.joinpath(*self.package.split("."))

    def simulation_path(self) -> Path:
        return self.output_dir() / self.simulation_file_name

    def request_body_path(self, element_id: int) -> Path:
        return Path(self.request_bodies_folder) / f"{self.class_name}_request_{element_id}.txt"
