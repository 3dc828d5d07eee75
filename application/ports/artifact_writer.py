# application/ports/artifact_writer.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ArtifactWriterPort(ABC):
    """
    Filesystem side of the export. Parent directories are created on demand.
    Implementations raise OSError subclasses on failure; the exporter wraps them.
    """

    @abstractmethod
    def write_text(self, path: Path, text: str, encoding: str) -> None:
        ...

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        ...
