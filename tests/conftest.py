import os

import pytest

# Set environment variables for tests before any imports happen
os.environ["DB_PATH"] = ":memory:"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["JOB_LIST_LIMIT"] = "50"

from jd_parser.models import JobRecord, RawDocument  # noqa: E402

SAMPLE_JD = """Senior Backend Engineer
Company: Acme Technologies
Location: Bengaluru, India
Salary: ₹10,00,000 - ₹15,00,000 per annum
Experience: 3+ years required

We are hiring a backend engineer to build REST API services in Python and Django on AWS.

Requirements:
- Strong Python skills
• Experience with PostgreSQL
* Familiarity with Docker

Benefits:
- Health insurance
- Flexible hours
"""


def build_pdf(pages: list[list[str]]) -> bytes:
    """
    Build a minimal PDF with one Helvetica text line per entry, one list per page.
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    for page_id, lines in zip(page_ids, pages):
        ops = []
        y = 720
        for line in lines:
            escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
            ops.append(f"BT /F1 12 Tf 72 {y} Td ({escaped}) Tj ET")
            y -= 40
        stream = "\n".join(ops).encode("latin-1")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


@pytest.fixture
def sample_text():
    """A complete plain-text job description."""
    return SAMPLE_JD


@pytest.fixture
def sample_document():
    """The sample job description as an uploaded text file."""
    return RawDocument(
        filename="backend.txt", content_type="text/plain", content=SAMPLE_JD.encode("utf-8")
    )


@pytest.fixture
def sample_record():
    """A reusable JobRecord that passes validation."""
    return JobRecord(
        title="Backend Engineer",
        company="Acme",
        location="Pune",
        salary="₹10,00,000",
        experience="2+ years",
        skills=["Python", "SQL"],
        description="We are hiring a backend engineer to build and run our placement APIs.",
        requirements=["Python", "SQL"],
        benefits=["Health insurance"],
    )


@pytest.fixture
def pdf_builder():
    """Return the helper that builds small text-layer PDFs."""
    return build_pdf
