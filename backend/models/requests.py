from typing import Literal

from pydantic import Field

from models.schemas.base import CamelModel


class CustomCriteria(CamelModel):
    """Weights supplied with a scan request; unset or zero means default."""
    skills_weight: float | None = Field(default=None, ge=0, le=100)
    experience_weight: float | None = Field(default=None, ge=0, le=100)
    education_weight: float | None = Field(default=None, ge=0, le=100)
    keyword_weight: float | None = Field(default=None, ge=0, le=100)
    location_weight: float | None = Field(default=None, ge=0, le=100)


class ScanRequest(CamelModel):
    resume_id: str = Field(..., min_length=1, description="Stored resume to scan")
    job_id: str = Field(..., min_length=1, description="Job to scan the resume against")
    scan_type: Literal["manual", "ai"] = "manual"
    custom_criteria: CustomCriteria = CustomCriteria()
