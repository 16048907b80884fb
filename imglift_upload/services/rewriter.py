import logging

from imglift_upload.config import Position
from imglift_upload.interfaces import DocumentInterface

logger = logging.getLogger(__name__)


class TextRewriter:
    """Replaces the first occurrence of a literal anchor on one line."""

    def replace(
        self,
        document: DocumentInterface,
        line: int,
        target: str,
        replacement: str,
    ) -> bool:
        """Rewrite `target` on the current content of `line`, return False if absent."""
        text = document.get_line(line)
        ch = text.find(target)
        if ch == -1:
            logger.warning(f"Anchor not found on line {line}: {target[:50]}")
            return False

        start = Position(line=line, ch=ch)
        end = Position(line=line, ch=ch + len(target))
        document.set_cursor(start)
        document.replace_range(replacement, start, end)
        return True
