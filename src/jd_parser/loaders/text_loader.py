import asyncio
import logging

from jd_parser.loaders.base import BaseLoader
from jd_parser.models import RawDocument

logger = logging.getLogger(__name__)


class TextLoader(BaseLoader):
    """Loads plain text job descriptions."""

    CONTENT_TYPE = "text/plain"

    def accepts(self, content_type: str) -> bool:
        return content_type == self.CONTENT_TYPE

    async def load(self, document: RawDocument) -> str:
        return await asyncio.to_thread(document.read_text)


class DocumentLoader(TextLoader):
    """
    Loads word-processor documents (.doc, .docx, .odt, ...).

    The bytes are read as plain text; no document structure is parsed, so
    binary formats come through with their markup noise intact.
    """

    MARKERS = ("document", "word")

    def accepts(self, content_type: str) -> bool:
        return any(marker in content_type for marker in self.MARKERS)

    async def load(self, document: RawDocument) -> str:
        logger.debug(f"Reading word-processor file '{document.filename}' as plain text")
        return await super().load(document)
