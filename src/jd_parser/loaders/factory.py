import logging

from jd_parser.errors import UnsupportedFormatError
from jd_parser.loaders.base import BaseLoader
from jd_parser.loaders.pdf_loader import PdfLoader
from jd_parser.loaders.text_loader import DocumentLoader, TextLoader

logger = logging.getLogger(__name__)


class LoaderFactory:
    """Picks the loader for a declared content type."""

    @staticmethod
    def create_loaders() -> list[BaseLoader]:
        """
        Return all loaders in the order they are tried.
        """
        return [PdfLoader(), TextLoader(), DocumentLoader()]

    @classmethod
    def get_loader(cls, content_type: str) -> BaseLoader:
        """
        Return the first loader accepting content_type.

        Raises:
            UnsupportedFormatError: if no loader accepts it
        """
        for loader in cls.create_loaders():
            if loader.accepts(content_type):
                logger.debug(f"Using {type(loader).__name__} for '{content_type}'")
                return loader
        raise UnsupportedFormatError(content_type)
