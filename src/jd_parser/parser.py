import asyncio
import logging
from pathlib import Path

from jd_parser.errors import DecodeError, JDParserError
from jd_parser.extractor import extract_job_data
from jd_parser.loaders.factory import LoaderFactory
from jd_parser.models import ParseResult, RawDocument

logger = logging.getLogger(__name__)


async def parse_job_description(document: RawDocument) -> ParseResult:
    """
    Parse an uploaded job description into a structured record.

    Never raises: an unsupported content type or a file that cannot be
    decoded is reported as a failed ParseResult carrying the error message.
    Validation is not part of parsing, so a successful result may still fail
    validate_job_data.
    """
    logger.info(f"Parsing job description file: {document.filename or '<unnamed>'}")

    try:
        loader = LoaderFactory.get_loader(document.content_type)
        text = await loader.load(document)
        data = extract_job_data(text)
    except JDParserError as e:
        logger.error(f"Error parsing job description: {e}")
        return ParseResult(success=False, error=str(e), data=None)
    except Exception as e:
        logger.exception("Unexpected error parsing job description")
        return ParseResult(success=False, error=str(e) or type(e).__name__, data=None)

    logger.info("Job description parsed successfully")
    return ParseResult(success=True, data=data, original_text=text)


async def parse_file(path: str | Path, content_type: str | None = None) -> ParseResult:
    """
    Read a job description from disk and parse it.
    The content type is guessed from the extension when not given.
    """
    try:
        document = await asyncio.to_thread(RawDocument.from_path, path, content_type)
    except OSError as e:
        error = DecodeError(str(e))
        logger.error(f"Error parsing job description: {error}")
        return ParseResult(success=False, error=str(error), data=None)

    return await parse_job_description(document)
