import argparse
import asyncio
import json
import logging
import sys

from jd_parser import config
from jd_parser.db import DocumentStore
from jd_parser.formatter import JobPostingFormatter
from jd_parser.jobs import create_job
from jd_parser.parser import parse_file
from jd_parser.validator import validate_job_data

logger = logging.getLogger(__name__)

EXIT_PARSE_FAILED = 1
EXIT_INVALID = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="jd-parser",
        description="Extract a structured job posting from a PDF, DOC, or TXT job description.",
    )
    parser.add_argument("file", help="Path to the job description file.")
    parser.add_argument(
        "--content-type",
        default=None,
        metavar="MIME",
        help="Declared MIME type (guessed from the file extension by default).",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Also print the validation result of the parsed record.",
    )
    parser.add_argument(
        "--post",
        action="store_true",
        help="Validate, format, and store the posting in the document store.",
    )
    parser.add_argument(
        "--recruiter-id",
        default=None,
        help="Recruiter that owns the posting (required with --post).",
    )
    parser.add_argument(
        "--db",
        default=None,
        metavar="PATH",
        help="Document store path (overrides DB_PATH env var).",
    )

    args = parser.parse_args(argv)
    if args.post and not args.recruiter_id:
        parser.error("--recruiter-id is required with --post")
    return args


async def run(args: argparse.Namespace) -> int:
    """Parse the file and act on the result. Returns the process exit code."""
    result = await parse_file(args.file, args.content_type)
    output: dict = {"result": result.to_dict()}

    if not result.success or result.data is None:
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return EXIT_PARSE_FAILED

    exit_code = 0
    if args.validate or args.post:
        validation = validate_job_data(result.data)
        output["validation"] = validation.model_dump(by_alias=True)
        if args.post and not validation.is_valid:
            logger.error(f"Not posting invalid job: {'; '.join(validation.errors)}")
            exit_code = EXIT_INVALID
        elif args.post:
            payload = JobPostingFormatter.format_for_job_posting(result.data)
            with DocumentStore(db_path=args.db or config.DB_PATH) as store:
                output["jobId"] = create_job(store, args.recruiter_id, payload)

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return exit_code


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point for the package."""
    # Set up logging once, in the application entry point only
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.LOG_LEVEL,
        stream=sys.stderr,
    )
    args = parse_args(argv)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    cli()
