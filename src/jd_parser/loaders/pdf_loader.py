import asyncio
import io
import logging
from collections.abc import Iterator

from pdfminer.high_level import extract_pages
from pdfminer.layout import LTPage, LTTextContainer, LTTextLine

from jd_parser.errors import DecodeError
from jd_parser.loaders.base import BaseLoader
from jd_parser.models import RawDocument

logger = logging.getLogger(__name__)


class PdfLoader(BaseLoader):
    """
    Extracts the embedded text layer of a PDF, page by page.

    Only text that is already in the file is returned; scanned pages without
    a text layer contribute an empty string. There is no OCR fallback.
    """

    CONTENT_TYPE = "application/pdf"

    def accepts(self, content_type: str) -> bool:
        return content_type == self.CONTENT_TYPE

    @staticmethod
    def page_text(page: LTPage) -> str:
        """
        Join the text runs of one page with single spaces, in layout order.
        """
        runs: list[str] = []
        for element in page:
            if isinstance(element, LTTextLine):
                lines = [element]
            elif isinstance(element, LTTextContainer):
                lines = [line for line in element if isinstance(line, LTTextLine)]
            else:
                continue
            for line in lines:
                run = line.get_text().strip()
                if run:
                    runs.append(run)
        return " ".join(runs)

    async def load(self, document: RawDocument) -> str:
        page_texts: list[str] = []

        try:
            pages: Iterator[LTPage] = extract_pages(io.BytesIO(document.content))
            # Pages are decoded one at a time, in order, off the event loop.
            while True:
                page = await asyncio.to_thread(next, pages, None)
                if page is None:
                    break
                page_texts.append(self.page_text(page))
        except Exception as e:
            raise DecodeError(str(e) or type(e).__name__) from e

        logger.debug(f"Extracted text from {len(page_texts)} PDF page(s) of '{document.filename}'")
        if not any(page_texts):
            return ""
        return "\n".join(page_texts)
