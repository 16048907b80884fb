"""Vault - Filesystem-backed document, link index and file reader."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from imglift_upload.config import IndexedFile, Position
from imglift_upload.exceptions import AssetReadError, InvalidInputError

logger = logging.getLogger(__name__)


# Document
class MarkdownDocument:
    """Markdown file held as a list of lines and edited in place."""

    def __init__(self, path: Path, text: str):
        self._path = Path(path)
        self._lines: List[str] = text.split("\n")
        self._cursor = Position(line=0, ch=0)
        self._modified = False

    @classmethod
    def load(cls, path: Path) -> "MarkdownDocument":
        path = Path(path)
        try:
            text = path.read_bytes().decode("utf-8")
        except FileNotFoundError as e:
            raise InvalidInputError(f"Document not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidInputError(f"Cannot read document {path}: {e}") from e
        return cls(path, text)

    @property
    def identity(self) -> str:
        return str(self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def cursor(self) -> Position:
        return self._cursor

    @property
    def modified(self) -> bool:
        return self._modified

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line: int) -> str:
        return self._lines[line]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        prefix = self._lines[start.line][:start.ch]
        suffix = self._lines[end.line][end.ch:]
        self._lines[start.line:end.line + 1] = (prefix + text + suffix).split("\n")
        self._modified = True

    def set_cursor(self, pos: Position) -> None:
        self._cursor = pos

    def save(self, path: Optional[Path] = None) -> Path:
        """Write the document atomically, defaulting to its source path."""
        target = Path(path) if path else self._path
        output_dir = target.parent
        output_dir.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=output_dir,
            suffix=".tmp",
            delete=False,
        ) as f:
            f.write(self.text)
            temp_path = f.name

        os.replace(temp_path, target)
        self._modified = False
        logger.info(f"Saved {target}")
        return target


# Link Index
class VaultIndex:
    """
    Tracks files under a vault root.

    A reference resolves relative to the folder of the document it was
    written in, then relative to the vault root, and finally, for bare file
    names, to the matching file closest to the root. Only files inside the
    vault are ever returned.
    """

    def __init__(self, vault_root: Path):
        self._root = Path(vault_root).resolve()
        self._by_name: Optional[Dict[str, List[str]]] = None

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, path_ref: str, origin: str) -> Optional[IndexedFile]:
        if not path_ref:
            return None

        candidates = []
        if origin:
            candidates.append(Path(origin).parent / path_ref)
        candidates.append(self._root / path_ref)

        for candidate in candidates:
            relative = self._relative(candidate)
            if relative is not None:
                return self._to_indexed(relative)

        if "/" not in path_ref and "\\" not in path_ref:
            matches = self._files_by_name().get(path_ref, [])
            if matches:
                return self._to_indexed(matches[0])

        return None

    def refresh(self) -> None:
        self._by_name = None

    def _relative(self, candidate: Path) -> Optional[str]:
        try:
            resolved = candidate.resolve()
            if not resolved.is_file():
                return None
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot stat {candidate}: {e}")
            return None
        try:
            return resolved.relative_to(self._root).as_posix()
        except ValueError:
            return None

    def _files_by_name(self) -> Dict[str, List[str]]:
        if self._by_name is None:
            index: Dict[str, List[str]] = {}
            for dirpath, dirnames, filenames in os.walk(self._root):
                dirnames[:] = [d for d in dirnames if not d.startswith(".")]
                for filename in filenames:
                    relative = (Path(dirpath) / filename).relative_to(self._root).as_posix()
                    index.setdefault(filename, []).append(relative)
            for paths in index.values():
                paths.sort(key=lambda p: (p.count("/"), p))
            self._by_name = index
            logger.debug(f"Indexed {sum(len(p) for p in index.values())} files under {self._root}")
        return self._by_name

    def _to_indexed(self, relative: str) -> IndexedFile:
        path = Path(relative)
        return IndexedFile(path=relative, name=path.name, extension=path.suffix)


# File Reader
class LocalFileReader:

    def read_bytes(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise AssetReadError(str(path), str(e)) from e

    def path_exists(self, path: Path) -> bool:
        return Path(path).is_file()
