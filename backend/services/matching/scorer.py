"""Resume-to-job match scorer.

Single entry point for both the ATS applications list and the resume scan:

    score(candidate, job)                      -> quick-list preset
    score(candidate, job, criteria)            -> detailed-scan preset
    score(candidate, job, preset="quick-list") -> explicit preset

All sub-scores are always computed and reported; the preset decides which
of them contribute to ``overall_match`` and with what weight. The function
is pure apart from reading the clock when ``as_of`` is omitted and a
recency score is needed.
"""

import logging
from datetime import datetime

from models.schemas.candidate import CandidateFeatures
from models.schemas.job_requirements import JobRequirements
from models.schemas.match_result import MatchResult
from models.schemas.scan_criteria import ScanCriteria
from services.matching import features
from services.matching.presets import DETAILED_SCAN, QUICK_LIST, get_preset
from services.matching.recommendation import build_recommendation

logger = logging.getLogger(__name__)


def apply_criteria(job: JobRequirements, criteria: ScanCriteria) -> JobRequirements:
    """Overlay the requirement fields set on ``criteria`` onto ``job``."""
    overrides = {
        "required_skills": criteria.must_have_skills,
        "preferred_skills": criteria.nice_to_have_skills,
        "min_experience_years": criteria.min_experience_years,
        "required_education": criteria.required_education,
        "keyword_phrases": criteria.keyword_phrases,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    return job.model_copy(update=update) if update else job


def score(
    candidate: CandidateFeatures,
    job: JobRequirements,
    criteria: ScanCriteria | None = None,
    preset: str | None = None,
    as_of: datetime | None = None,
) -> MatchResult:
    """Score a candidate against a job. Never raises for missing fields."""
    weighting = get_preset(preset or (DETAILED_SCAN if criteria is not None else QUICK_LIST))
    criteria = criteria or ScanCriteria()
    job = apply_criteria(job, criteria)

    skills_score, matched, missing = features.skills_match(
        candidate.skills,
        job.required_skills,
        job.preferred_skills,
        empty_score=weighting.empty_skills_score,
    )
    experience_score, gap = features.experience_match(
        candidate.experience_years,
        job.min_experience_years,
        strategy=weighting.experience_strategy,
    )
    education_score = features.education_match(candidate.education, job.required_education)
    keyword_score = features.keyword_match(
        job.keyword_phrases, candidate.summary, candidate.experience, candidate.skills
    )
    location_ratio, location_fit = features.location_match(
        candidate.location, job.location, job.remote_type
    )
    recency_ratio = features.recency_match(candidate.applied_at, as_of)

    sub_scores = {
        "skills": skills_score,
        "required_skills": features.skill_coverage(candidate.skills, job.required_skills),
        "preferred_skills": features.skill_coverage(candidate.skills, job.preferred_skills),
        "experience": experience_score,
        "education": education_score,
        "keyword": keyword_score,
        "location": location_ratio * 100,
        "recency": recency_ratio * 100,
    }
    weights = weighting.weights_for(criteria)
    overall = features.clamp_score(
        sum(sub_scores[name] * weight for name, weight in weights.items())
    )

    result = MatchResult(
        overall_match=overall,
        skills_match=skills_score,
        experience_match=experience_score,
        education_match=education_score,
        keyword_match=keyword_score,
        location_fit=location_fit,
        location_score=features.clamp_score(location_ratio * 100),
        recency_score=features.clamp_score(recency_ratio * 100),
        matched_skills=matched,
        missing_skills=missing,
        experience_gap=gap,
        preset=weighting.name,
    )

    if weighting.allows_recommendation and criteria.enable_ai_scanning:
        rec = build_recommendation(result, candidate, job)
        result.ai_recommendation = rec.label
        result.ai_reasoning = rec.reasoning
        result.ai_key_points = rec.key_points

    logger.debug(
        "Scored candidate with preset %s: overall=%d skills=%d experience=%d",
        weighting.name, overall, skills_score, experience_score,
    )
    return result
