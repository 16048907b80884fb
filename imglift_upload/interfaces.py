from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from imglift_upload.config import IndexedFile, Position


# Interfaces
@runtime_checkable
class DocumentInterface(Protocol):
    # Line-addressable text buffer edited in place

    @property
    def identity(self) -> str:
        # Identifier of the document, passed to the link index as origin
        ...

    def line_count(self) -> int:
        ...

    def get_line(self, line: int) -> str:
        ...

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        ...

    def set_cursor(self, pos: Position) -> None:
        ...


@runtime_checkable
class LinkIndexInterface(Protocol):
    # Registry of files tracked by the host application

    def resolve(self, path_ref: str, origin: str) -> Optional[IndexedFile]:
        # Map a reference written in `origin` to a tracked file, if any
        ...


@runtime_checkable
class FileReaderInterface(Protocol):

    def read_bytes(self, path: Path) -> bytes:
        ...

    def path_exists(self, path: Path) -> bool:
        ...
