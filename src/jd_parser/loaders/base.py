from abc import ABC, abstractmethod

from jd_parser.models import RawDocument


class BaseLoader(ABC):
    """
    Abstract base class for all job description loaders.
    """

    @abstractmethod
    def accepts(self, content_type: str) -> bool:
        """
        Return True if this loader handles the given MIME type.
        """
        pass

    @abstractmethod
    async def load(self, document: RawDocument) -> str:
        """
        Read the document and return its text content.
        """
        pass
