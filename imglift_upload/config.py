from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union
from urllib.parse import unquote

from imglift_core.config import UploadConfig as Config


# Models
@dataclass(frozen=True)
class Position:
    line: int
    ch: int


@dataclass(frozen=True)
class LinkReference:
    """One image reference matched on a line."""

    tag: str
    raw_path: str
    is_wiki_style: bool
    source_text: str
    line: int
    start_column: int
    end_column: int

    @property
    def path(self) -> str:
        """Path used for lookups: decoded for standard links, as written for wiki links."""
        if self.is_wiki_style:
            return self.raw_path
        return unquote(self.raw_path)

    def to_markdown(self, url: str) -> str:
        return f"![{self.tag}]({url})"


@dataclass(frozen=True)
class ScanMismatch:
    # Match with an empty path
    source_text: str
    line: int
    start_column: int


ScanItem = Union[LinkReference, ScanMismatch]


@dataclass(frozen=True)
class IndexedFile:
    """File tracked by the link index, path relative to the vault root."""

    path: str
    name: str
    extension: str


# Resolution outcomes
@dataclass(frozen=True)
class RemoteAsset:
    url: str


@dataclass(frozen=True)
class IndexedAsset:
    absolute_path: Path
    name: str
    extension: str


@dataclass(frozen=True)
class FilesystemAsset:
    absolute_path: Path
    name: str
    extension: str


@dataclass(frozen=True)
class UnresolvedAsset:
    raw_path: str


ResolvedAsset = Union[RemoteAsset, IndexedAsset, FilesystemAsset, UnresolvedAsset]
LocalAsset = Union[IndexedAsset, FilesystemAsset]


class SkipReason(str, Enum):
    PARSE_MISMATCH = "parse_mismatch"
    REMOTE = "remote"
    UNRESOLVED_PATH = "unresolved_path"
    UNSUPPORTED_EXTENSION = "unsupported_extension"


@dataclass
class RunResult:
    """Per-run tally; every processed match increments exactly one counter."""

    success: int = 0
    fail: int = 0
    ignore: int = 0

    @property
    def total(self) -> int:
        return self.success + self.fail + self.ignore

    def as_dict(self) -> dict:
        return {"success": self.success, "fail": self.fail, "ignore": self.ignore}

    def __str__(self) -> str:
        return f"success={self.success}, fail={self.fail}, ignore={self.ignore}"


def normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext
