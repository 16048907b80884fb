from imglift_upload.config import (
    Config,
    Position,
    LinkReference,
    ScanMismatch,
    IndexedFile,
    RemoteAsset,
    IndexedAsset,
    FilesystemAsset,
    UnresolvedAsset,
    SkipReason,
    RunResult,
)
from imglift_upload.pipeline import RunOrchestrator, create_orchestrator
from imglift_upload.clients.upload_client import UploadClient
from imglift_upload.services.scanner import LinkScanner
from imglift_upload.services.resolver import PathResolver
from imglift_upload.services.cache import UploadCache
from imglift_upload.services.rewriter import TextRewriter
from imglift_upload.services.vault import MarkdownDocument, VaultIndex, LocalFileReader
from imglift_upload.exceptions import (
    ImgliftError,
    UploadError,
    UploadTimeoutError,
    AssetReadError,
    InvalidInputError,
)


__all__ = [
    # Config
    "Config",
    "Position",
    "LinkReference",
    "ScanMismatch",
    "IndexedFile",
    "RemoteAsset",
    "IndexedAsset",
    "FilesystemAsset",
    "UnresolvedAsset",
    "SkipReason",
    "RunResult",
    # Pipeline
    "RunOrchestrator",
    "create_orchestrator",
    # Clients
    "UploadClient",
    # Services
    "LinkScanner",
    "PathResolver",
    "UploadCache",
    "TextRewriter",
    "MarkdownDocument",
    "VaultIndex",
    "LocalFileReader",
    # Exceptions
    "ImgliftError",
    "UploadError",
    "UploadTimeoutError",
    "AssetReadError",
    "InvalidInputError",
]
