"""Link Scanner - Image reference extraction from markdown lines."""

import logging
import re
from typing import Iterator, Optional

from imglift_upload.config import LinkReference, ScanItem, ScanMismatch

logger = logging.getLogger(__name__)

# ![tag](path) or ![tag](<path with spaces>) with an optional "title"
STANDARD_LINK_RE = re.compile(r'!\[([^\]]*)\]\((?:<([^<>\n]*)>|([^)\s]*))(?:\s+"[^"]*")?\)')

# ![[path]] or ![[path|tag]]
WIKI_LINK_RE = re.compile(r"!\[\[([^\]|]*)(\|([^\]]*))?\]\]")


class LinkScanner:
    """Finds standard and wiki-style image references on a single line."""

    def scan(self, text: str, line: int) -> Iterator[ScanItem]:
        """
        Yield standard-syntax matches left to right, then wiki-style matches.

        A match with an empty path (`![x]()`, `![x](<>)`, `![[]]`) is yielded
        as a ScanMismatch.
        """
        for match in STANDARD_LINK_RE.finditer(text):
            yield self._standard(match, line) or self._mismatch(match, line)

        for match in WIKI_LINK_RE.finditer(text):
            yield self._wiki(match, line) or self._mismatch(match, line)

    def _standard(self, match: re.Match, line: int) -> Optional[LinkReference]:
        path = match.group(2) if match.group(2) is not None else match.group(3)
        if not path:
            return None
        return LinkReference(
            tag=match.group(1) or "",
            raw_path=path,
            is_wiki_style=False,
            source_text=match.group(0),
            line=line,
            start_column=match.start(),
            end_column=match.end(),
        )

    def _wiki(self, match: re.Match, line: int) -> Optional[LinkReference]:
        if not match.group(1).strip():
            return None
        return LinkReference(
            tag=match.group(3) if match.group(2) else "",
            raw_path=match.group(1),
            is_wiki_style=True,
            source_text=match.group(0),
            line=line,
            start_column=match.start(),
            end_column=match.end(),
        )

    def _mismatch(self, match: re.Match, line: int) -> ScanMismatch:
        logger.debug(f"Unexpected link shape on line {line}: {match.group(0)}")
        return ScanMismatch(
            source_text=match.group(0),
            line=line,
            start_column=match.start(),
        )
