import logging
import re
from dataclasses import dataclass

from jd_parser.models import JobRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """A single extraction pattern; the value is its first capture group."""

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, pattern: str) -> "FieldRule":
        return cls(re.compile(pattern, re.IGNORECASE))

    def apply(self, text: str) -> str | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        return match.group(1).strip()


def first_match(rules: list[FieldRule], text: str) -> str:
    """
    Evaluate rules in order and return the value of the first one that
    matches. Later rules are never consulted once a rule has matched.
    """
    for rule in rules:
        value = rule.apply(text)
        if value is not None:
            return value
    return ""


TITLE_RULES = [
    FieldRule.compile(r"job title[:\s]+([^\n]+)"),
    FieldRule.compile(r"position[:\s]+([^\n]+)"),
    FieldRule.compile(r"role[:\s]+([^\n]+)"),
    # First line of the text ending in a job role
    FieldRule.compile(r"^([^\n]+(?:developer|engineer|manager|analyst|specialist|coordinator))"),
]

COMPANY_RULES = [
    FieldRule.compile(r"company[:\s]+([^\n]+)"),
    FieldRule.compile(r"organization[:\s]+([^\n]+)"),
    FieldRule.compile(r"employer[:\s]+([^\n]+)"),
]

LOCATION_RULES = [
    FieldRule.compile(r"location[:\s]+([^\n]+)"),
    FieldRule.compile(r"based in[:\s]+([^\n]+)"),
    FieldRule.compile(r"office[:\s]+([^\n]+)"),
]

SALARY_RULES = [
    FieldRule.compile(r"salary[:\s]+([^\n]+)"),
    FieldRule.compile(r"compensation[:\s]+([^\n]+)"),
    FieldRule.compile(r"pay[:\s]+([^\n]+)"),
    FieldRule.compile(r"(\$[\d,]+(?:\s*-\s*\$[\d,]+)?)"),
    FieldRule.compile(r"(₹[\d,]+(?:\s*-\s*₹[\d,]+)?)"),
]

EXPERIENCE_RULES = [
    FieldRule.compile(r"experience[:\s]+([^\n]+)"),
    FieldRule.compile(r"(\d+\+?\s*years?\s*(?:of\s*)?experience)"),
    FieldRule.compile(r"minimum\s+(\d+\s*years?)"),
]

SKILL_KEYWORDS = [
    "JavaScript",
    "Python",
    "Java",
    "React",
    "Node.js",
    "Angular",
    "Vue.js",
    "HTML",
    "CSS",
    "SQL",
    "MongoDB",
    "PostgreSQL",
    "AWS",
    "Docker",
    "Kubernetes",
    "Git",
    "REST API",
    "GraphQL",
    "TypeScript",
    "PHP",
    "C++",
    "C#",
    ".NET",
    "Spring Boot",
    "Django",
    "Flask",
    "Express.js",
    "Firebase",
    "Azure",
]

# A heading word, optional colon/whitespace up to a line break, then a run of
# bullet lines.
REQUIREMENTS_SECTION = re.compile(
    r"(?:requirements?|qualifications?)[:\s]*\n((?:[-•*]\s*[^\n]+\n?)+)", re.IGNORECASE
)
BENEFITS_SECTION = re.compile(r"(?:benefits?|perks?)[:\s]*\n((?:[-•*]\s*[^\n]+\n?)+)", re.IGNORECASE)
BULLET_MARKER = re.compile(r"^[-•*]\s*")


def extract_skills(text: str) -> list[str]:
    """
    Return every known skill mentioned in the text, in vocabulary order.
    Matching is a case-insensitive substring test.
    """
    lowered = text.lower()
    return [skill for skill in SKILL_KEYWORDS if skill.lower() in lowered]


def extract_bullets(section: re.Pattern[str], text: str) -> list[str]:
    """
    Return the bullet lines following the first heading matched by section,
    with the bullet markers stripped.
    """
    match = section.search(text)
    if match is None:
        return []
    return [
        BULLET_MARKER.sub("", line.strip()).strip()
        for line in match.group(1).split("\n")
        if line.strip()
    ]


def extract_job_data(text: str) -> JobRecord:
    """
    Extract structured job fields from raw job description text.

    Each field is extracted independently; a field with no match is left
    empty. The full text is always kept as the description.
    """
    record = JobRecord(
        title=first_match(TITLE_RULES, text),
        company=first_match(COMPANY_RULES, text),
        location=first_match(LOCATION_RULES, text),
        salary=first_match(SALARY_RULES, text),
        experience=first_match(EXPERIENCE_RULES, text),
        skills=extract_skills(text),
        description=text,
        requirements=extract_bullets(REQUIREMENTS_SECTION, text),
        benefits=extract_bullets(BENEFITS_SECTION, text),
    )
    logger.debug(
        f"Extracted title='{record.title}', company='{record.company}', "
        f"{len(record.skills)} skills, {len(record.requirements)} requirements, "
        f"{len(record.benefits)} benefits"
    )
    return record
