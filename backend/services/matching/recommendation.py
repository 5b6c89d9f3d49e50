"""Templated hiring recommendation for detailed scans.

Buckets the overall match into recommend / maybe / reject and fills in
reasoning and key points from the scan. No model call is involved.
"""

from pydantic import BaseModel

from models.schemas.candidate import CandidateFeatures
from models.schemas.job_requirements import JobRequirements
from models.schemas.match_result import MatchResult, Recommendation

RECOMMEND_THRESHOLD = 80
MAYBE_THRESHOLD = 60


class RecommendationResult(BaseModel):
    label: Recommendation
    reasoning: str
    key_points: list[str] = []


def _years(value: float | None) -> str:
    return f"{value or 0:g}"


def build_recommendation(
    result: MatchResult,
    candidate: CandidateFeatures,
    job: JobRequirements,
) -> RecommendationResult:
    score = result.overall_match

    if score >= RECOMMEND_THRESHOLD:
        return RecommendationResult(
            label=Recommendation.RECOMMEND,
            reasoning="Strong match across multiple criteria with minimal gaps.",
            key_points=[
                f"{len(result.matched_skills)} relevant skills matched",
                f"Experience level: {candidate.experience_level or 'unspecified'}",
                "High compatibility score",
            ],
        )

    if score >= MAYBE_THRESHOLD:
        return RecommendationResult(
            label=Recommendation.MAYBE,
            reasoning="Good potential but may need additional evaluation.",
            key_points=[
                f"{len(result.missing_skills)} skills gap identified",
                f"Experience: {_years(candidate.experience_years)}/"
                f"{_years(job.min_experience_years)} years",
                "Consider for interview",
            ],
        )

    return RecommendationResult(
        label=Recommendation.REJECT,
        reasoning="Significant gaps in required qualifications.",
        key_points=[
            "Major skills mismatch",
            "Experience requirements not met",
            "Low overall compatibility",
        ],
    )
