from datetime import UTC, date, datetime

from jd_parser.formatter import JobPostingFormatter, format_for_job_posting
from jd_parser.models import JobRecord

NOW = datetime(2026, 1, 15, 18, 30, tzinfo=UTC)


def test_format_renames_fields(sample_record):
    payload = JobPostingFormatter.format_for_job_posting(sample_record, now=NOW)

    assert payload.title == "Backend Engineer"
    assert payload.company_name == "Acme"
    assert payload.location == "Pune"
    assert payload.salary_range == "₹10,00,000"
    assert payload.experience_required == "2+ years"
    assert payload.skills_required == ["Python", "SQL"]
    assert payload.description == sample_record.description
    assert payload.requirements == ["Python", "SQL"]
    assert payload.benefits == ["Health insurance"]


def test_format_defaults():
    payload = format_for_job_posting(JobRecord(title="Intern"), now=NOW)

    assert payload.experience_required == ""
    assert payload.company_name == ""
    assert payload.skills_required == []
    assert payload.job_type == "Full-time"
    assert payload.work_mode == "Hybrid"


def test_job_type_ignores_input():
    record = JobRecord(title="Part-time Tutor", description="Part-time, remote role")
    payload = format_for_job_posting(record, now=NOW)
    assert payload.job_type == JobPostingFormatter.DEFAULT_JOB_TYPE
    assert payload.work_mode == JobPostingFormatter.DEFAULT_WORK_MODE


def test_application_deadline_is_thirty_days_later():
    payload = format_for_job_posting(JobRecord(), now=NOW)
    assert payload.application_deadline == date(2026, 2, 14)


def test_application_deadline_defaults_to_now():
    deadline = date.fromisoformat(JobPostingFormatter.application_deadline())
    today = datetime.now(tz=UTC).date()
    assert (deadline - today).days == 30


def test_payload_does_not_share_lists(sample_record):
    payload = format_for_job_posting(sample_record, now=NOW)
    payload.skills_required.append("Go")
    assert sample_record.skills == ["Python", "SQL"]


def test_payload_serializes_with_camel_case(sample_record):
    dumped = format_for_job_posting(sample_record, now=NOW).model_dump(mode="json", by_alias=True)

    assert dumped["companyName"] == "Acme"
    assert dumped["salaryRange"] == "₹10,00,000"
    assert dumped["experienceRequired"] == "2+ years"
    assert dumped["skillsRequired"] == ["Python", "SQL"]
    assert dumped["jobType"] == "Full-time"
    assert dumped["workMode"] == "Hybrid"
    assert dumped["applicationDeadline"] == "2026-02-14"
