# infrastructure/files/file_artifact_writer.py
from __future__ import annotations

from pathlib import Path

from application.ports.artifact_writer import ArtifactWriterPort


class FileArtifactWriter(ArtifactWriterPort):
    """
    Writes export artifacts to the local filesystem.
    Existing files are overwritten.
    """

    def write_text(self, path: Path, text: str, encoding: str) -> None:
        data = text.encode(encoding)
        self.write_bytes(path, data)

    def write_bytes(self, path: Path, data: bytes) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            f.write(data)
