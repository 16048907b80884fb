"""
IMGLIFT Core Module
===================
Shared configuration and constants across all IMGLIFT modules.
"""

from imglift_core.config import UploadConfig, get_upload_config
from imglift_core.constants import (
    IMAGE_EXTENSIONS,
    FILE_SENTINEL,
    REMOTE_PREFIX,
    DEFAULT_UPLOAD_BODY,
)

__all__ = [
    "UploadConfig",
    "get_upload_config",
    "IMAGE_EXTENSIONS",
    "FILE_SENTINEL",
    "REMOTE_PREFIX",
    "DEFAULT_UPLOAD_BODY",
]
