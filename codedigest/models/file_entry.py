from pathlib import Path

from pydantic import BaseModel

from .enums import FileKind


class FileEntry(BaseModel):
    """A file or directory yielded by the walker, with its depth below the root."""
    path: Path
    kind: FileKind
    depth: int

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_file(self) -> bool:
        return self.kind == FileKind.FILE
