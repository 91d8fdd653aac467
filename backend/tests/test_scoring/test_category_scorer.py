from models.schemas.requirement_set import RequirementSet
from services.scoring.category_scorer import score


def test_sample_scenario(sample_text, sample_requirements):
    result = score(sample_text, sample_requirements)

    assert result.ats_score == 75
    breakdown = result.breakdown
    assert (breakdown.required_skills.matched, breakdown.required_skills.total) == (2, 2)
    assert breakdown.required_skills.percentage == 100
    assert breakdown.required_skills.weight == 0.40
    assert (breakdown.preferred_skills.matched, breakdown.preferred_skills.total) == (0, 1)
    assert breakdown.preferred_skills.percentage == 0
    assert breakdown.tools.total == 0
    assert breakdown.tools.percentage == 100
    assert breakdown.keywords.percentage == 100
    assert breakdown.experience_level.matched is True
    assert breakdown.experience_level.weight == 0.05


def test_empty_requirement_set_scores_full_marks():
    result = score("anything at all", RequirementSet())
    assert result.ats_score == 100
    assert result.match_details.required_skills.percentage == 100


def test_partial_required_match_uses_exact_ratio():
    requirements = RequirementSet(required=["Python", "Rust", "Haskell"])
    result = score("Python developer", requirements)
    # 1/3 * 40 + 25 + 20 + 10 + 5
    assert result.ats_score == 73
    assert result.breakdown.required_skills.percentage == 33


def test_percentage_rounds_half_up():
    terms = ["Python", "aaa", "bbb", "ccc", "ddd", "eee", "fff", "ggg"]
    result = score("python", RequirementSet(required=terms))
    assert result.breakdown.required_skills.percentage == 13


def test_unsatisfied_experience_costs_its_weight():
    requirements = RequirementSet(experience_level="Senior")
    result = score("Junior Python developer", requirements)
    assert result.breakdown.experience_level.matched is False
    assert result.breakdown.experience_level.detected.value == "Entry"
    assert result.ats_score == 95


def test_match_details_mirror_breakdown(sample_text, sample_requirements):
    result = score(sample_text, sample_requirements)
    details = result.match_details
    assert details.required_skills.matched == result.breakdown.required_skills.matched
    assert details.preferred_skills.total == result.breakdown.preferred_skills.total
    assert "weight" not in details.model_dump()["tools"]


def test_adding_a_required_match_never_lowers_score():
    requirements = RequirementSet(
        required=["Python", "Rust", "Go"],
        preferred=["Docker"],
        tools=["Terraform"],
    )
    text = "Python and Docker"
    before = score(text, requirements).ats_score
    after = score(text + " and Rust", requirements).ats_score
    assert after >= before
