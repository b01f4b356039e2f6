from jd_parser.models import JobRecord, ValidationResult

MIN_TITLE_LENGTH = 3
MIN_COMPANY_LENGTH = 2
MIN_DESCRIPTION_LENGTH = 50


def validate_job_data(record: JobRecord) -> ValidationResult:
    """
    Check that a parsed record has enough content to be posted.
    Every check runs; all failures are reported, not just the first.
    """
    errors: list[str] = []

    if len(record.title.strip()) < MIN_TITLE_LENGTH:
        errors.append(
            f"Job title is required and must be at least {MIN_TITLE_LENGTH} characters"
        )

    if len(record.company) < MIN_COMPANY_LENGTH:
        errors.append(
            f"Company name is required and must be at least {MIN_COMPANY_LENGTH} characters"
        )

    if len(record.description) < MIN_DESCRIPTION_LENGTH:
        errors.append(f"Job description must be at least {MIN_DESCRIPTION_LENGTH} characters")

    return ValidationResult(is_valid=not errors, errors=errors)
