"""Upload Pipeline - Rewrites local image references to uploaded URLs."""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from imglift_upload.config import (
    Config,
    LinkReference,
    LocalAsset,
    Position,
    RemoteAsset,
    RunResult,
    ScanMismatch,
    SkipReason,
    UnresolvedAsset,
    normalize_extension,
)
from imglift_upload.clients.upload_client import UploadClient
from imglift_upload.exceptions import AssetReadError, InvalidInputError, UploadError
from imglift_upload.interfaces import (
    DocumentInterface,
    FileReaderInterface,
    LinkIndexInterface,
)
from imglift_upload.services.cache import UploadCache
from imglift_upload.services.resolver import PathResolver, is_image_extension, is_remote
from imglift_upload.services.rewriter import TextRewriter
from imglift_upload.services.scanner import LinkScanner
from imglift_upload.services.vault import LocalFileReader, VaultIndex

logger = logging.getLogger(__name__)


class RunOrchestrator:
    """Scan -> resolve -> upload (once per raw path) -> rewrite, one match at a time."""

    def __init__(
        self,
        uploader: UploadClient,
        index: LinkIndexInterface,
        reader: FileReaderInterface,
        vault_root: Path,
        scanner: Optional[LinkScanner] = None,
        rewriter: Optional[TextRewriter] = None,
    ):
        self._uploader = uploader
        self._reader = reader
        self._resolver = PathResolver(index, reader, vault_root)
        self._scanner = scanner or LinkScanner()
        self._rewriter = rewriter or TextRewriter()
        self._stats = {
            "runs": 0,
            "uploads": 0,
            "cache_hits": 0,
            "skipped": {reason.value: 0 for reason in SkipReason},
        }

    def run(
        self,
        document: DocumentInterface,
        start: int = 0,
        end: Optional[int] = None,
        progress_wrapper: Optional[Callable[[Iterable], Iterable]] = None,
    ) -> RunResult:
        """Process lines `start..end` inclusive, return the run tally."""
        end = self._validate_range(document, start, end)
        result = RunResult()
        cache = UploadCache()

        logger.info(f"Processing {document.identity} lines {start}-{end}")

        lines = range(start, end + 1)
        iterator = progress_wrapper(lines) if progress_wrapper else lines

        for line in iterator:
            # Matches reflect the line before any rewrite on it
            items = list(self._scanner.scan(document.get_line(line), line))
            for item in items:
                self._process_item(document, item, cache, result)

        last = document.get_line(end)
        document.set_cursor(Position(line=end, ch=len(last)))

        self._stats["runs"] += 1
        logger.info(f"Run complete for {document.identity}: {result}")
        return result

    def upload_selection(self, document: DocumentInterface, selection: str) -> Optional[str]:
        """Upload a selected filesystem path and replace the selection with the bare URL."""
        selection = selection.strip()
        path = Path(selection)
        if not path.suffix or not self._reader.path_exists(path):
            logger.warning(f"No image file at selection: {selection}")
            return None

        try:
            content = self._reader.read_bytes(path)
            url = self._uploader.upload(content, f"tmp{normalize_extension(path.suffix)}")
        except (AssetReadError, UploadError) as e:
            logger.warning(f"Upload failed for {selection}: {e}")
            return None

        self._stats["uploads"] += 1
        for line in range(document.line_count()):
            if self._rewriter.replace(document, line, selection, url):
                break
        return url

    def get_stats(self) -> Dict:
        return {**self._stats, "skipped": dict(self._stats["skipped"])}

    def close(self) -> None:
        self._uploader.close()
        logger.debug("Orchestrator resources closed")

    def _validate_range(self, document: DocumentInterface, start: int, end: Optional[int]) -> int:
        count = document.line_count()
        if end is None:
            end = count - 1
        if start < 0 or end >= count or start > end:
            raise InvalidInputError(
                f"Invalid line range {start}-{end} for document with {count} lines"
            )
        return end

    def _process_item(self, document, item, cache: UploadCache, result: RunResult) -> None:
        if isinstance(item, ScanMismatch):
            self._skip(result, SkipReason.PARSE_MISMATCH, item.source_text)
            return

        ref: LinkReference = item

        cached = cache.get(ref.raw_path)
        if cached is not None:
            self._stats["cache_hits"] += 1
            self._rewriter.replace(document, ref.line, ref.source_text, ref.to_markdown(cached))
            result.success += 1
            return

        if is_remote(ref.raw_path):
            self._skip(result, SkipReason.REMOTE, ref.raw_path)
            return

        try:
            asset = self._resolver.resolve(ref.path, ref.is_wiki_style, document.identity)
        except (OSError, ValueError) as e:
            logger.warning(f"Cannot resolve {ref.raw_path}: {e}")
            self._skip(result, SkipReason.UNRESOLVED_PATH, ref.raw_path)
            return

        if isinstance(asset, RemoteAsset):
            self._skip(result, SkipReason.REMOTE, ref.raw_path)
            return
        if isinstance(asset, UnresolvedAsset):
            self._skip(result, SkipReason.UNRESOLVED_PATH, ref.raw_path)
            return
        if not is_image_extension(asset.extension):
            self._skip(result, SkipReason.UNSUPPORTED_EXTENSION, ref.raw_path)
            return

        url = self._upload(asset)
        if url is None:
            result.fail += 1
            return

        cache.put(ref.raw_path, url)
        self._rewriter.replace(document, ref.line, ref.source_text, ref.to_markdown(url))
        result.success += 1

    def _upload(self, asset: LocalAsset) -> Optional[str]:
        try:
            content = self._reader.read_bytes(asset.absolute_path)
        except (AssetReadError, OSError) as e:
            logger.warning(f"Cannot read {asset.absolute_path}: {e}")
            return None

        try:
            url = self._uploader.upload(content, asset.name)
        except UploadError as e:
            logger.warning(f"Upload failed for {asset.name}: {e}")
            return None

        self._stats["uploads"] += 1
        return url

    def _skip(self, result: RunResult, reason: SkipReason, detail: str) -> None:
        logger.debug(f"Ignored ({reason.value}): {detail}")
        self._stats["skipped"][reason.value] += 1
        result.ignore += 1

    def __enter__(self) -> "RunOrchestrator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# Factory
def create_orchestrator(config: Optional[Config] = None) -> RunOrchestrator:
    if config is None:
        config = Config()

    index = VaultIndex(config.vault_root)
    return RunOrchestrator(
        uploader=UploadClient(config),
        index=index,
        reader=LocalFileReader(),
        vault_root=index.root,
    )
