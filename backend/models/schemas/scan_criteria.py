"""Per-job weighting and thresholds for the detailed scan."""

from pydantic import Field

from models.schemas.base import CamelModel

DEFAULT_SKILLS_WEIGHT = 30
DEFAULT_EXPERIENCE_WEIGHT = 25
DEFAULT_EDUCATION_WEIGHT = 20
DEFAULT_KEYWORD_WEIGHT = 15
DEFAULT_LOCATION_WEIGHT = 10


class ScanCriteria(CamelModel):
    """Scan criteria attached to a job.

    Weights are percentages (0-100) and are divided by 100 when scoring.
    They are not normalized, so a set that does not sum to 100 shifts the
    overall score up or down.

    The optional requirement fields override the job's own values when set.
    """
    skills_weight: float = Field(default=DEFAULT_SKILLS_WEIGHT, ge=0, le=100)
    experience_weight: float = Field(default=DEFAULT_EXPERIENCE_WEIGHT, ge=0, le=100)
    education_weight: float = Field(default=DEFAULT_EDUCATION_WEIGHT, ge=0, le=100)
    keyword_weight: float = Field(default=DEFAULT_KEYWORD_WEIGHT, ge=0, le=100)
    location_weight: float = Field(default=DEFAULT_LOCATION_WEIGHT, ge=0, le=100)
    enable_ai_scanning: bool = False

    must_have_skills: list[str] | None = None
    nice_to_have_skills: list[str] | None = None
    min_experience_years: float | None = None
    required_education: str | None = None
    keyword_phrases: list[str] | None = None

    def weights(self) -> dict[str, float]:
        """Weights keyed by sub-score name, as percentages."""
        return {
            "skills": self.skills_weight,
            "experience": self.experience_weight,
            "education": self.education_weight,
            "keyword": self.keyword_weight,
            "location": self.location_weight,
        }
