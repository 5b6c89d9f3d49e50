"""Named weighting presets for the match scorer.

quick-list:
    ATS applications list. Fixed weights over required/preferred skill
    coverage, experience, location and recency.
detailed-scan:
    Resume scan. Weights come from the job's scan criteria (percentages,
    divided by 100) over skills, experience, education, keywords and
    location. Only this preset produces an AI recommendation.
"""

import logging

from pydantic import BaseModel

from models.schemas.scan_criteria import ScanCriteria
from services.matching.features import ExperienceStrategy

logger = logging.getLogger(__name__)

QUICK_LIST = "quick-list"
DETAILED_SCAN = "detailed-scan"

QUICK_LIST_WEIGHTS = {
    "required_skills": 0.5,
    "preferred_skills": 0.15,
    "experience": 0.2,
    "location": 0.1,
    "recency": 0.05,
}


class WeightingPreset(BaseModel):
    name: str
    empty_skills_score: int  # skills_match when the job lists no skills
    experience_strategy: ExperienceStrategy
    fixed_weights: dict[str, float] = {}  # empty -> taken from scan criteria
    allows_recommendation: bool = False

    def weights_for(self, criteria: ScanCriteria) -> dict[str, float]:
        """Fractional weights keyed by sub-score name."""
        if self.fixed_weights:
            return dict(self.fixed_weights)

        percentages = criteria.weights()
        total = sum(percentages.values())
        if total != 100:
            logger.warning(
                "Scan weights sum to %s, not 100; overall score is not normalized",
                total,
            )
        return {name: pct / 100 for name, pct in percentages.items()}


PRESETS: dict[str, WeightingPreset] = {
    QUICK_LIST: WeightingPreset(
        name=QUICK_LIST,
        empty_skills_score=100,
        experience_strategy=ExperienceStrategy.RATIO,
        fixed_weights=QUICK_LIST_WEIGHTS,
    ),
    DETAILED_SCAN: WeightingPreset(
        name=DETAILED_SCAN,
        empty_skills_score=50,
        experience_strategy=ExperienceStrategy.FLAT,
        allows_recommendation=True,
    ),
}


def get_preset(name: str) -> WeightingPreset:
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown weighting preset: {name}") from None
