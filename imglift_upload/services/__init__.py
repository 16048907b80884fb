from imglift_upload.services.scanner import LinkScanner
from imglift_upload.services.resolver import PathResolver, is_image_extension, is_remote
from imglift_upload.services.cache import UploadCache
from imglift_upload.services.rewriter import TextRewriter
from imglift_upload.services.field_path import get_field, parse_field_path
from imglift_upload.services.vault import MarkdownDocument, VaultIndex, LocalFileReader

__all__ = [
    "LinkScanner",
    "PathResolver",
    "is_image_extension",
    "is_remote",
    "UploadCache",
    "TextRewriter",
    "get_field",
    "parse_field_path",
    "MarkdownDocument",
    "VaultIndex",
    "LocalFileReader",
]
