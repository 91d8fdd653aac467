"""Pattern-based skill extraction from resumes and job descriptions.

Two entry points:
1. ``extract_skills``: items a resume lists under a skills-style heading
   or after phrases like "proficient in".
2. ``find_known_skills``: vocabulary scan used when Gemini cannot extract
   requirements from a job description.
"""

import logging
import re

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Resume skill listings
# Matches: "Skills: Python, SQL" / "TECHNICAL SKILLS\n- Python\n- SQL"
# ---------------------------------------------------------------------------
_SKILL_SECTION_RE = re.compile(
    r"^[ \t]*(?:technical[ \t]+)?(?:skills?|technologies|tools|languages|frameworks)"
    r"[ \t]*(?::[ \t]*\n?|\n)"
    r"(.+?)(?=\n[ \t]*\n|\Z)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)
_SKILL_PHRASE_RE = re.compile(
    r"(?:proficient in|experienced with|knowledge of)[\s:]+([^\n]+)",
    re.IGNORECASE,
)
_ITEM_SPLIT_RE = re.compile(r"[,;|\n•·]|\s+and\s+", re.IGNORECASE)
_ITEM_STRIP = " \t-*•·▪►.:"
MAX_SKILL_LENGTH = 50

# Languages, frameworks and practices: treated as required skills
CORE_SKILLS: tuple[str, ...] = (
    # Programming languages
    "python", "javascript", "typescript", "java", "c++", "c#",
    "golang", "rust", "ruby", "php", "swift", "kotlin", "scala",
    "sql", "bash", "powershell",
    # Frontend
    "react", "angular", "vue", "svelte", "next.js", "html", "css",
    # Backend
    "node.js", "express", "fastapi", "django", "flask",
    "spring boot", "spring", "rails", ".net", "graphql", "grpc",
    # Data & ML
    "pandas", "numpy", "scikit-learn", "tensorflow", "pytorch", "spark",
    "machine learning", "deep learning", "natural language processing",
    # Methodologies
    "agile", "scrum", "microservices", "tdd",
)

# Platforms and tooling: treated as tools/technologies
TOOL_SKILLS: tuple[str, ...] = (
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible",
    "jenkins", "github actions", "gitlab ci", "ci/cd", "linux", "nginx",
    "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "kafka",
    "rabbitmq", "snowflake", "bigquery", "airflow",
    "git", "jira", "confluence", "postman", "figma", "tableau", "power bi",
)


def _split_items(block: str) -> list[str]:
    items = []
    for raw in _ITEM_SPLIT_RE.split(block):
        item = raw.strip(_ITEM_STRIP)
        if item and len(item) <= MAX_SKILL_LENGTH:
            items.append(item)
    return items


def extract_skills(resume_text: str) -> list[str]:
    """List the skills a resume states explicitly, in order of appearance.

    Deduplicated case-insensitively; the first spelling wins.
    """
    if not resume_text:
        return []

    blocks = [m.group(1) for m in _SKILL_SECTION_RE.finditer(resume_text)]
    blocks += [m.group(1) for m in _SKILL_PHRASE_RE.finditer(resume_text)]

    skills: list[str] = []
    seen: set[str] = set()
    for block in blocks:
        for item in _split_items(block):
            key = item.lower()
            if key not in seen:
                seen.add(key)
                skills.append(item)

    logger.debug("Extracted %d listed skills from resume", len(skills))
    return skills


def _find(skill: str, text_lower: str) -> re.Match | None:
    escaped = re.escape(skill)
    # Word boundaries keep "java" out of "javascript" and "scala" out of "scalable"
    match = re.search(rf"(?<![a-z0-9.#+]){escaped}(?![a-z0-9+#])", text_lower)
    return match


def find_known_skills(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    """Return vocabulary terms present in ``text``, ordered by first mention."""
    text_lower = (text or "").lower()
    spans = []
    for skill in vocabulary:
        match = _find(skill, text_lower)
        if match:
            spans.append((match.start(), -len(skill), match.end(), skill))
    spans.sort()

    found: list[str] = []
    covered_until = -1
    for start, _, end, skill in spans:
        # "spring" inside an already matched "spring boot"
        if start < covered_until:
            continue
        found.append(skill)
        covered_until = end
    return found
