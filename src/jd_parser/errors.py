class JDParserError(Exception):
    """Base class for errors that abort a job description parse."""


class UnsupportedFormatError(JDParserError):
    """Raised when no loader recognizes the declared content type."""

    def __init__(self, content_type: str) -> None:
        self.content_type = content_type
        super().__init__("Unsupported file format. Please use PDF, DOC, or TXT files.")


class DecodeError(JDParserError):
    """Raised when the file bytes cannot be turned into text."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to read job description: {reason}")
