"""Sub-score calculators for resume-to-job matching.

Every function here is pure and total: missing inputs map to a neutral
default instead of raising. Integer scores are on a 0-100 scale; location
and recency return a 0.0-1.0 ratio like the rest of the ATS list signals.
"""

import math
from datetime import datetime, timezone
from enum import Enum

REMOTE_TYPES = frozenset({"full", "remote", "fully_remote"})

EMPTY_KEYWORDS_SCORE = 50

# Location ratios
LOCATION_EXACT = 1.0
LOCATION_PARTIAL = 0.8
LOCATION_MISMATCH = 0.4
LOCATION_UNKNOWN = 0.6

# Recency ratios keyed by max days since the application
RECENCY_BANDS = ((7, 1.0), (30, 0.85), (90, 0.6))
RECENCY_STALE = 0.4
RECENCY_UNKNOWN = 0.75


class ExperienceStrategy(str, Enum):
    """How to score experience when the job states no minimum."""
    RATIO = "ratio"  # min(years / 5, 1) * 100
    FLAT = "flat"  # 75 regardless of years


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round to the nearest integer and clamp to 0-100."""
    return min(100, max(0, round_half_up(value)))


def normalize_terms(terms: list[str] | None) -> list[str]:
    """Lowercase, strip, drop blanks and duplicates, keep first-seen order."""
    seen: set[str] = set()
    out: list[str] = []
    for term in terms or []:
        key = (term or "").strip().lower()
        if key and key not in seen:
            seen.add(key)
            out.append(key)
    return out


def _terms_overlap(a: str, b: str) -> bool:
    return a == b or a in b or b in a


def _has_match(job_skill: str, candidate_skills: list[str]) -> bool:
    return any(_terms_overlap(job_skill, s) for s in candidate_skills)


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

def skills_match(
    candidate_skills: list[str] | None,
    required_skills: list[str] | None,
    preferred_skills: list[str] | None,
    empty_score: int = 100,
) -> tuple[int, list[str], list[str]]:
    """Match candidate skills against required + preferred job skills.

    Returns (score, matched, missing). ``matched`` holds the job skills that
    some candidate skill equals or contains (or is contained by);
    ``missing`` holds the unmatched required skills. When the job lists no
    skills the score is ``empty_score``.
    """
    candidate = normalize_terms(candidate_skills)
    required = normalize_terms(required_skills)
    preferred = [s for s in normalize_terms(preferred_skills) if s not in required]
    job_skills = required + preferred

    if not job_skills:
        return empty_score, [], []

    matched = [s for s in job_skills if _has_match(s, candidate)]
    missing = [s for s in required if s not in matched]
    return clamp_score(len(matched) / len(job_skills) * 100), matched, missing


def skill_coverage(candidate_skills: list[str] | None, job_skills: list[str] | None) -> int:
    """Share of ``job_skills`` covered by the candidate. Empty list -> 100."""
    candidate = normalize_terms(candidate_skills)
    wanted = normalize_terms(job_skills)
    if not wanted:
        return 100
    hits = sum(1 for s in wanted if _has_match(s, candidate))
    return clamp_score(hits / len(wanted) * 100)


# ---------------------------------------------------------------------------
# Experience / education
# ---------------------------------------------------------------------------

def experience_match(
    candidate_years: float | None,
    min_years: float | None,
    strategy: ExperienceStrategy = ExperienceStrategy.RATIO,
) -> tuple[int, float | None]:
    """Score experience against the job minimum.

    Returns (score, gap) where gap is the number of years short of the
    minimum, or None when the candidate meets it or no minimum is set.
    """
    if min_years is None:
        if strategy == ExperienceStrategy.FLAT:
            return 75, None
        if candidate_years is None:
            return 50, None
        return clamp_score(min(max(candidate_years, 0.0) / 5, 1.0) * 100), None

    years = max(candidate_years or 0.0, 0.0)
    if years >= min_years:
        return clamp_score(min(100.0, 80 + (years - min_years) * 5)), None

    gap = min_years - years
    return clamp_score(max(0.0, 80 - gap * 20)), gap


def education_match(education: list[str] | None, required_education: str | None) -> int:
    """Score education entries against a free-text requirement."""
    entries = normalize_terms(education)
    required = (required_education or "").strip().lower()

    if entries:
        if required:
            return 100 if any(required in e for e in entries) else 60
        return 80
    return 20 if required else 60


# ---------------------------------------------------------------------------
# Location / recency / keywords
# ---------------------------------------------------------------------------

def is_remote(remote_type: str | None) -> bool:
    return (remote_type or "").strip().lower() in REMOTE_TYPES


def location_match(
    candidate_location: str | None,
    job_location: str | None,
    remote_type: str | None = None,
) -> tuple[float, bool | None]:
    """Returns (ratio, fit). Fully remote jobs are always a perfect fit."""
    if is_remote(remote_type):
        return LOCATION_EXACT, True

    candidate = (candidate_location or "").strip().lower()
    job = (job_location or "").strip().lower()
    if not candidate or not job:
        return LOCATION_UNKNOWN, None
    if candidate == job:
        return LOCATION_EXACT, True
    if candidate in job or job in candidate:
        return LOCATION_PARTIAL, True
    return LOCATION_MISMATCH, False


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def recency_match(applied_at: datetime | None, as_of: datetime | None = None) -> float:
    """Ratio based on days since the application was submitted."""
    if applied_at is None:
        return RECENCY_UNKNOWN

    now = as_utc(as_of) if as_of is not None else datetime.now(timezone.utc)
    days = (now - as_utc(applied_at)).total_seconds() / 86400
    for max_days, ratio in RECENCY_BANDS:
        if days <= max_days:
            return ratio
    return RECENCY_STALE


def keyword_match(
    keyword_phrases: list[str] | None,
    summary: str | None,
    experience: list[str] | None,
    skills: list[str] | None,
) -> int:
    """Share of keyword phrases found anywhere in the candidate's text."""
    phrases = normalize_terms(keyword_phrases)
    if not phrases:
        return EMPTY_KEYWORDS_SCORE

    text = " ".join([
        summary or "",
        " ".join(experience or []),
        " ".join(skills or []),
    ]).lower()
    found = sum(1 for p in phrases if p in text)
    return clamp_score(found / len(phrases) * 100)
