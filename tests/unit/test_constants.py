"""
Tests for techmatch.utils.constants and the settings built on them.
"""

import pytest

from techmatch.utils.config import APISettings, MatchingSettings
from techmatch.utils.constants import (
    COMPLETENESS_BONUS,
    CORS_ALLOW_HEADERS,
    EXPERIENCE_LEVEL_BONUS,
    MAX_MATCH_RESULTS,
    MIN_MATCH_SCORE,
    SCORE_THRESHOLDS,
    AuditAction,
    ExperienceLevel,
    JobStatus,
    MatchScoreLevel,
)


# ── MatchScoreLevel.from_score() ────────────────────────────────────────────


class TestMatchScoreLevelFromScore:
    def test_excellent_at_threshold(self):
        assert MatchScoreLevel.from_score(80) == MatchScoreLevel.EXCELLENT

    def test_excellent_at_max(self):
        assert MatchScoreLevel.from_score(100) == MatchScoreLevel.EXCELLENT

    def test_good_at_threshold(self):
        assert MatchScoreLevel.from_score(60) == MatchScoreLevel.GOOD

    def test_good_just_below_excellent(self):
        assert MatchScoreLevel.from_score(79) == MatchScoreLevel.GOOD

    def test_partial_below_good(self):
        assert MatchScoreLevel.from_score(59) == MatchScoreLevel.PARTIAL

    def test_partial_at_zero(self):
        assert MatchScoreLevel.from_score(0) == MatchScoreLevel.PARTIAL


class TestMatchScoreLevelLabel:
    @pytest.mark.parametrize(
        "level,label",
        [
            (MatchScoreLevel.EXCELLENT, "Excellent Match"),
            (MatchScoreLevel.GOOD, "Good Match"),
            (MatchScoreLevel.PARTIAL, "Partial Match"),
        ],
    )
    def test_labels(self, level, label):
        assert level.label == label


# ── Scoring tables ──────────────────────────────────────────────────────────


class TestScoringTables:
    def test_experience_bonus_covers_every_level(self):
        assert set(EXPERIENCE_LEVEL_BONUS) == {level.value for level in ExperienceLevel}

    def test_senior_is_the_largest_bonus(self):
        assert max(EXPERIENCE_LEVEL_BONUS.values()) == EXPERIENCE_LEVEL_BONUS["senior"] == 15

    def test_completeness_bonus_total(self):
        assert sum(COMPLETENESS_BONUS.values()) == 15

    def test_thresholds_ordered(self):
        assert SCORE_THRESHOLDS["excellent"] > SCORE_THRESHOLDS["good"] > MIN_MATCH_SCORE


# ── Enum value correctness ──────────────────────────────────────────────────


class TestEnums:
    def test_job_status_values(self):
        assert {s.value for s in JobStatus} == {"active", "paused", "closed"}

    def test_audit_actions(self):
        assert AuditAction.CANDIDATES_MATCHED.value == "candidates_matched"
        assert AuditAction.JOBS_RECOMMENDED.value == "jobs_recommended"


# ── Settings defaults ───────────────────────────────────────────────────────


class TestSettings:
    def test_matching_defaults(self):
        settings = MatchingSettings()
        assert settings.min_score == MIN_MATCH_SCORE == 20
        assert settings.max_results == MAX_MATCH_RESULTS == 10

    def test_matching_from_environment(self, monkeypatch):
        monkeypatch.setenv("MATCH_MIN_SCORE", "50")
        monkeypatch.setenv("MATCH_MAX_RESULTS", "3")
        settings = MatchingSettings()
        assert settings.min_score == 50
        assert settings.max_results == 3

    def test_cors_headers(self):
        headers = APISettings().cors_headers
        assert headers == {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
        }

    def test_cors_header_names_lowercased(self):
        settings = APISettings(allow_headers=["Authorization", "Content-Type"])
        assert settings.cors_headers["Access-Control-Allow-Headers"] == "authorization, content-type"
