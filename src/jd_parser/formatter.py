from datetime import UTC, datetime, timedelta

from jd_parser.models import JobPostingPayload, JobRecord


class JobPostingFormatter:
    """
    Maps a parsed JobRecord onto the job posting payload.
    """

    DEFAULT_JOB_TYPE = "Full-time"
    DEFAULT_WORK_MODE = "Hybrid"
    DEADLINE_DAYS = 30

    @classmethod
    def application_deadline(cls, now: datetime | None = None) -> str:
        """
        Return the calendar date DEADLINE_DAYS after now (UTC), as YYYY-MM-DD.
        """
        if now is None:
            now = datetime.now(tz=UTC)
        return (now + timedelta(days=cls.DEADLINE_DAYS)).date().isoformat()

    @classmethod
    def format_for_job_posting(
        cls, record: JobRecord, now: datetime | None = None
    ) -> JobPostingPayload:
        """
        Rename the record fields for posting and fill in the defaults.
        """
        return JobPostingPayload(
            title=record.title,
            company_name=record.company,
            location=record.location,
            salary_range=record.salary,
            experience_required=record.experience,
            skills_required=list(record.skills),
            description=record.description,
            requirements=list(record.requirements),
            benefits=list(record.benefits),
            job_type=cls.DEFAULT_JOB_TYPE,
            work_mode=cls.DEFAULT_WORK_MODE,
            application_deadline=cls.application_deadline(now),
        )


def format_for_job_posting(record: JobRecord, now: datetime | None = None) -> JobPostingPayload:
    return JobPostingFormatter.format_for_job_posting(record, now)
