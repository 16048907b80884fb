import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class UploadCache:
    """Run-scoped map from raw reference path to uploaded URL."""

    def __init__(self):
        self._urls: Dict[str, str] = {}

    def get(self, raw_path: str) -> Optional[str]:
        return self._urls.get(raw_path)

    def put(self, raw_path: str, url: str) -> None:
        self._urls[raw_path] = url
        logger.debug(f"Cached {raw_path} -> {url}")

    def __contains__(self, raw_path: str) -> bool:
        return raw_path in self._urls

    def __len__(self) -> int:
        return len(self._urls)
