"""Tests for the matching sub-score calculators."""

from datetime import datetime, timezone

import pytest

from services.matching.features import (
    ExperienceStrategy,
    clamp_score,
    education_match,
    experience_match,
    keyword_match,
    location_match,
    normalize_terms,
    recency_match,
    skill_coverage,
    skills_match,
)

AS_OF = datetime(2024, 6, 30, tzinfo=timezone.utc)


class TestSkillsMatch:
    def test_partial_overlap(self):
        score, matched, missing = skills_match(
            ["javascript", "react"], ["javascript", "node"], ["react"]
        )
        assert score == 67
        assert matched == ["javascript", "react"]
        assert missing == ["node"]

    def test_case_insensitive(self):
        score, matched, missing = skills_match(["React"], ["react"], [])
        assert score == 100
        assert matched == ["react"]
        assert missing == []

    def test_substring_either_way(self):
        score, matched, _ = skills_match(["react native", "sql"], ["react", "postgresql"], [])
        assert score == 100
        assert matched == ["react", "postgresql"]

    def test_blank_candidate_skill_matches_nothing(self):
        score, matched, missing = skills_match(["", "  "], ["python"], [])
        assert score == 0
        assert matched == []
        assert missing == ["python"]

    def test_preferred_missing_not_reported(self):
        _, _, missing = skills_match([], ["python"], ["docker"])
        assert missing == ["python"]

    def test_skill_in_both_lists_counted_once(self):
        score, matched, _ = skills_match(["python"], ["python"], ["Python", "go"])
        assert matched == ["python"]
        assert score == 50

    def test_no_job_skills_uses_empty_score(self):
        assert skills_match(["python"], [], [], empty_score=100)[0] == 100
        assert skills_match(["python"], None, None, empty_score=50)[0] == 50


class TestSkillCoverage:
    def test_ratio(self):
        assert skill_coverage(["javascript"], ["javascript", "node"]) == 50

    def test_empty_job_list_is_full_coverage(self):
        assert skill_coverage(["python"], []) == 100


class TestExperienceMatch:
    def test_meets_minimum(self):
        assert experience_match(4, 3) == (85, None)

    def test_exceeds_minimum_capped(self):
        assert experience_match(20, 3) == (100, None)

    def test_exact_minimum_is_80(self):
        assert experience_match(3, 3)[0] == 80

    def test_below_minimum(self):
        score, gap = experience_match(1, 3)
        assert gap == 2
        assert score == 40

    def test_gap_strictly_decreases_then_floors(self):
        scores = [experience_match(years, 5)[0] for years in (4, 3, 2, 1, 0)]
        assert scores == [60, 40, 20, 0, 0]

    def test_unknown_years_with_minimum_treated_as_zero(self):
        assert experience_match(None, 2) == (40, 2)

    def test_no_minimum_ratio_strategy(self):
        assert experience_match(2.5, None, ExperienceStrategy.RATIO) == (50, None)
        assert experience_match(10, None, ExperienceStrategy.RATIO) == (100, None)
        assert experience_match(None, None, ExperienceStrategy.RATIO) == (50, None)

    def test_no_minimum_flat_strategy(self):
        assert experience_match(0, None, ExperienceStrategy.FLAT) == (75, None)
        assert experience_match(12, None, ExperienceStrategy.FLAT) == (75, None)


class TestEducationMatch:
    @pytest.mark.parametrize("education,required,expected", [
        (["BS Computer Science"], "computer science", 100),
        (["BS Biology"], "Computer Science", 60),
        (["BS Biology"], None, 80),
        ([], "bachelor", 20),
        ([], None, 60),
        (None, "  ", 60),
    ])
    def test_cases(self, education, required, expected):
        assert education_match(education, required) == expected


class TestLocationMatch:
    def test_exact(self):
        assert location_match("Manila", "manila") == (1.0, True)

    def test_substring(self):
        assert location_match("Makati, Metro Manila", "Metro Manila") == (0.8, True)

    def test_mismatch(self):
        assert location_match("Cebu", "Manila") == (0.4, False)

    def test_unknown(self):
        assert location_match(None, "Manila") == (0.6, None)
        assert location_match("Manila", "") == (0.6, None)

    @pytest.mark.parametrize("remote_type", ["full", "Remote", " FULL "])
    def test_remote_always_fits(self, remote_type):
        assert location_match("Cebu", "Berlin", remote_type) == (1.0, True)
        assert location_match(None, None, remote_type) == (1.0, True)

    def test_hybrid_is_not_remote(self):
        assert location_match("Cebu", "Berlin", "hybrid") == (0.4, False)


class TestRecencyMatch:
    @pytest.mark.parametrize("applied_at,expected", [
        (datetime(2024, 6, 25, tzinfo=timezone.utc), 1.0),
        (datetime(2024, 6, 10, tzinfo=timezone.utc), 0.85),
        (datetime(2024, 4, 15, tzinfo=timezone.utc), 0.6),
        (datetime(2024, 1, 1, tzinfo=timezone.utc), 0.4),
        (None, 0.75),
    ])
    def test_bands(self, applied_at, expected):
        assert recency_match(applied_at, AS_OF) == expected

    def test_naive_datetimes_treated_as_utc(self):
        assert recency_match(datetime(2024, 6, 28), AS_OF) == 1.0

    def test_future_application_counts_as_recent(self):
        assert recency_match(datetime(2024, 7, 5, tzinfo=timezone.utc), AS_OF) == 1.0


class TestKeywordMatch:
    def test_fraction_found(self):
        score = keyword_match(["REST APIs", "graphql"], "Built REST APIs", [], [])
        assert score == 50

    def test_searches_experience_and_skills(self):
        score = keyword_match(
            ["kubernetes", "team lead"],
            "",
            ["Team lead for platform squad"],
            ["Kubernetes"],
        )
        assert score == 100

    def test_no_keywords_is_neutral(self):
        assert keyword_match([], "anything", None, None) == 50


class TestHelpers:
    def test_clamp_score_rounds_half_up(self):
        assert clamp_score(66.5) == 67
        assert clamp_score(-3) == 0
        assert clamp_score(140) == 100

    def test_normalize_terms(self):
        assert normalize_terms([" Python", "python", "", None, "Go"]) == ["python", "go"]
