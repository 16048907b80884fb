"""Path Resolver - Maps a reference path to a local image asset."""

import logging
from pathlib import Path
from typing import Optional

from imglift_core.constants import IMAGE_EXTENSIONS, REMOTE_PREFIX
from imglift_upload.config import (
    FilesystemAsset,
    IndexedAsset,
    RemoteAsset,
    ResolvedAsset,
    UnresolvedAsset,
    normalize_extension,
)
from imglift_upload.interfaces import FileReaderInterface, LinkIndexInterface

logger = logging.getLogger(__name__)


def is_remote(path: str) -> bool:
    return path.lower().startswith(REMOTE_PREFIX)


def is_image_extension(extension: str) -> bool:
    return normalize_extension(extension) in IMAGE_EXTENSIONS


class PathResolver:
    """
    Three-tier resolution of a reference path.

    1. Paths with a URL scheme are remote and never uploaded.
    2. The link index is consulted; hits are joined onto the vault root.
    3. For standard links only, the path is tried as a literal filesystem path.
    Wiki links are always index-relative, so they stop after step 2.
    """

    def __init__(
        self,
        index: LinkIndexInterface,
        reader: FileReaderInterface,
        vault_root: Path,
    ):
        self._index = index
        self._reader = reader
        self._vault_root = Path(vault_root)

    def resolve(self, path: str, wiki_mode: bool, origin: str) -> ResolvedAsset:
        if is_remote(path):
            return RemoteAsset(url=path)

        indexed = self._index.resolve(path, origin)
        if indexed is not None:
            logger.debug(f"Index hit: {path} -> {indexed.path}")
            return IndexedAsset(
                absolute_path=self._vault_root / indexed.path,
                name=indexed.name,
                extension=normalize_extension(indexed.extension),
            )

        if not wiki_mode:
            asset = self._from_filesystem(path)
            if asset is not None:
                return asset

        logger.debug(f"Unresolved path: {path}")
        return UnresolvedAsset(raw_path=path)

    def _from_filesystem(self, path: str) -> Optional[FilesystemAsset]:
        candidate = Path(path)
        try:
            exists = self._reader.path_exists(candidate)
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot stat {path}: {e}")
            return None
        if not exists:
            return None

        logger.debug(f"Filesystem hit: {path}")
        return FilesystemAsset(
            absolute_path=candidate.absolute(),
            name=candidate.name,
            extension=normalize_extension(candidate.suffix),
        )
