"""Missing-keyword detection and prioritization."""

from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import GapCategory, GapItem, SuggestedSection
from services.scoring.keyword_matcher import contains_keyword
from services.scoring.normalizer import normalize

# Only the leading general keywords are worth reporting as gaps
KEYWORD_GAP_LIMIT = 10

# (terms accessor, category, importance, section), in emission order
_GAP_RULES = (
    (lambda r: r.required, GapCategory.TECHNICAL_SKILLS, 10, SuggestedSection.SKILLS),
    (lambda r: r.preferred, GapCategory.TECHNICAL_SKILLS, 7, SuggestedSection.SKILLS),
    (lambda r: r.tools, GapCategory.TOOLS_TECHNOLOGIES, 8, SuggestedSection.SKILLS),
    (
        lambda r: r.keywords[:KEYWORD_GAP_LIMIT],
        GapCategory.EXPERIENCE_KEYWORDS,
        5,
        SuggestedSection.EXPERIENCE,
    ),
)


def find_gaps(candidate_text: str, requirements: RequirementSet) -> list[GapItem]:
    """List unmatched requirement terms, most important first.

    Ties keep emission order: required, preferred, tools, keywords.
    """
    normalized = normalize(candidate_text)
    gaps = [
        GapItem(keyword=term, category=category, importance=importance, suggested_section=section)
        for terms_of, category, importance, section in _GAP_RULES
        for term in terms_of(requirements)
        if not contains_keyword(term, normalized)
    ]
    # list.sort is stable
    gaps.sort(key=lambda gap: gap.importance, reverse=True)
    return gaps
