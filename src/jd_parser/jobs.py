import logging
from datetime import UTC, datetime
from typing import Any

from jd_parser import config
from jd_parser.db import DocumentStore
from jd_parser.models import JobPostingPayload

logger = logging.getLogger(__name__)

JOBS_COLLECTION = "jobs"
APPLICATIONS_COLLECTION = "applications"
DEFAULT_STATUS = "open"
DEFAULT_APPLICATION_STATUS = "applied"


def _timestamp() -> str:
    return datetime.now(tz=UTC).isoformat()


def create_job(
    store: DocumentStore, recruiter_id: str, payload: JobPostingPayload | dict[str, Any]
) -> str:
    """
    Store a job posting for a recruiter and return the new job id.
    The posting is stored with camelCase keys, status "open" unless the
    payload sets one, and creation/update timestamps.
    """
    if isinstance(payload, JobPostingPayload):
        data = payload.model_dump(mode="json", by_alias=True)
    else:
        data = dict(payload)

    now = _timestamp()
    data.update(
        {
            "recruiterId": recruiter_id,
            "status": data.get("status") or DEFAULT_STATUS,
            "createdAt": now,
            "updatedAt": now,
        }
    )
    job_id = store.add(JOBS_COLLECTION, data)
    logger.info(f"Created job {job_id} for recruiter {recruiter_id}: {data.get('title', '')}")
    return job_id


def get_job(store: DocumentStore, job_id: str) -> dict[str, Any] | None:
    """Return the job with its id, or None if it doesn't exist."""
    data = store.get(JOBS_COLLECTION, job_id)
    if data is None:
        return None
    return {"id": job_id, **data}


def update_job(store: DocumentStore, job_id: str, fields: dict[str, Any]) -> None:
    """Merge fields into a job and refresh its update timestamp."""
    store.update(JOBS_COLLECTION, job_id, {**fields, "updatedAt": _timestamp()})


def delete_job(store: DocumentStore, job_id: str) -> bool:
    return store.delete(JOBS_COLLECTION, job_id)


def list_jobs(
    store: DocumentStore,
    limit: int | None = None,
    recruiter_id: str | None = None,
    status: str | None = None,
) -> list[dict[str, Any]]:
    """
    Return jobs newest first, optionally filtered by recruiter and status.
    The limit defaults to JOB_LIST_LIMIT.
    """
    filters: dict[str, Any] = {}
    if recruiter_id:
        filters["recruiterId"] = recruiter_id
    if status:
        filters["status"] = status

    return store.query(
        JOBS_COLLECTION,
        limit=limit if limit is not None else config.JOB_LIST_LIMIT,
        order_by="createdAt",
        descending=True,
        **filters,
    )


def apply_to_job(
    store: DocumentStore, job_id: str, student_id: str, data: dict[str, Any] | None = None
) -> str:
    """
    Record a student's application to a job and return the application id.
    Fields in data are stored as given and may override the default
    "applied" status.
    """
    now = _timestamp()
    record = {
        "jobId": job_id,
        "studentId": student_id,
        "status": DEFAULT_APPLICATION_STATUS,
        **(data or {}),
        "createdAt": now,
        "updatedAt": now,
    }
    app_id = store.add(APPLICATIONS_COLLECTION, record)
    logger.info(f"Student {student_id} applied to job {job_id} (application {app_id})")
    return app_id


def update_application(store: DocumentStore, app_id: str, fields: dict[str, Any]) -> None:
    """Merge fields into an application and refresh its update timestamp."""
    store.update(APPLICATIONS_COLLECTION, app_id, {**fields, "updatedAt": _timestamp()})


def delete_application(store: DocumentStore, app_id: str) -> bool:
    return store.delete(APPLICATIONS_COLLECTION, app_id)


def list_applications_for_job(store: DocumentStore, job_id: str) -> list[dict[str, Any]]:
    """Return the applications to a job, newest first."""
    return store.query(
        APPLICATIONS_COLLECTION, order_by="createdAt", descending=True, jobId=job_id
    )


def list_applications_for_student(store: DocumentStore, student_id: str) -> list[dict[str, Any]]:
    """Return a student's applications, newest first."""
    return store.query(
        APPLICATIONS_COLLECTION, order_by="createdAt", descending=True, studentId=student_id
    )
