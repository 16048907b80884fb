import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

import requests

from imglift_core.constants import FILE_SENTINEL
from imglift_upload.config import Config
from imglift_upload.exceptions import UploadError, UploadTimeoutError
from imglift_upload.services.field_path import get_field

logger = logging.getLogger(__name__)


# Utilities
def sanitize_log(data) -> str:
    """Hide tokens in error text and keep it short."""
    text = str(data)
    for pattern in [r"Bearer\s+[\w.-]+", r"Basic\s+[\w.=+/-]+", r"(token|key)=[\w.-]+"]:
        text = re.sub(pattern, "***", text, flags=re.IGNORECASE)
    return text[:500]


# Client
class UploadClient:
    """Posts image bytes as multipart form data and extracts the result URL."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._headers = config.headers
        self._template = config.body_template

    def upload(self, content: bytes, filename: str) -> str:
        """Upload one file, return the URL found at the configured field path."""
        data, files = self._build_form(content, filename)

        try:
            response = self._session.post(
                self._config.api_endpoint,
                data=data,
                files=files,
                headers=self._headers,
                timeout=self._config.request_timeout,
            )
            response.raise_for_status()
        except requests.Timeout as e:
            raise UploadTimeoutError(f"Timeout uploading {filename}", sanitize_log(e)) from e
        except requests.RequestException as e:
            raise UploadError(f"Upload of {filename} failed", sanitize_log(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UploadError(f"Invalid JSON response for {filename}", sanitize_log(e)) from e

        value = get_field(payload, self._config.image_url_path)
        if value is None:
            logger.warning(f"Field '{self._config.image_url_path}' not found in upload response")
            return ""

        url = value if isinstance(value, str) else json.dumps(value)
        logger.info(f"Uploaded {filename} -> {url}")
        return url

    def _build_form(
        self, content: bytes, filename: str
    ) -> Tuple[Dict[str, str], List[Tuple[str, Tuple[str, bytes]]]]:
        data: Dict[str, str] = {}
        files: List[Tuple[str, Tuple[str, bytes]]] = []

        for key, value in self._template.items():
            if value == FILE_SENTINEL:
                files.append((key, (filename, content)))
            else:
                data[key] = self._literal(value)

        return data, files

    @staticmethod
    def _literal(value: Any) -> str:
        return value if isinstance(value, str) else json.dumps(value)

    def close(self) -> None:
        self._session.close()
        logger.debug("Upload session closed")

    def __enter__(self) -> "UploadClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
