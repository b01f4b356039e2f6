import mimetypes
from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class RawDocument(BaseModel):
    """
    An uploaded job description file: its bytes plus the declared MIME type.
    Lives only for the duration of one parse call.
    """

    filename: str = ""
    content_type: str
    content: bytes

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> "RawDocument":
        """
        Read a file from disk. When no content type is given it is guessed
        from the file extension.
        """
        path = Path(path)
        if content_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            content_type = guessed or DEFAULT_CONTENT_TYPE
        return cls(filename=path.name, content_type=content_type, content=path.read_bytes())

    def read_text(self) -> str:
        """
        Decode the content as UTF-8, dropping a leading byte-order mark and
        replacing undecodable bytes.
        """
        return self.content.decode("utf-8-sig", errors="replace")


class JobRecord(BaseModel):
    """
    Structured fields extracted from a job description.
    Any field that could not be extracted is left empty; description always
    holds the complete source text.
    """

    title: str = ""
    company: str = ""
    location: str = ""
    salary: str = ""
    experience: str = ""
    skills: list[str] = Field(default_factory=list)
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class JobPostingPayload(BaseModel):
    """The job posting as handed over to the posting store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    company_name: str = ""
    location: str = ""
    salary_range: str = ""
    experience_required: str = ""
    skills_required: list[str] = Field(default_factory=list)
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    job_type: str
    work_mode: str
    application_deadline: date


class ParseResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    data: JobRecord | None = None
    original_text: str | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        """Return the JSON-ready shape handed back to upload handlers."""
        if self.success and self.data is not None:
            return {
                "success": True,
                "data": self.data.model_dump(),
                "originalText": self.original_text,
            }
        return {"success": False, "error": self.error, "data": None}
