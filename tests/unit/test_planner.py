"""Tests for the level distribution planner."""

import pytest
from pydantic import ValidationError

from lyly_assistant.errors import InvalidPlanError
from lyly_assistant.levels import CognitiveLevel, QuestionType
from lyly_assistant.quiz.planner import build_plan, normalize_count, normalize_level_counts


class TestNormalizeCount:
    """Raw counts are coerced to non-negative integers."""

    @pytest.mark.parametrize(
        "raw, expected",
        [(3, 3), ("4", 4), (" 2 ", 2), (2.9, 2), (0, 0), (-5, 0), ("abc", 0), (None, 0),
         ("", 0), (True, 0), (float("nan"), 0), (float("inf"), 0), ("1e400", 0), ([1], 0)],
    )
    def test_values(self, raw, expected):
        assert normalize_count(raw) == expected

    def test_missing_levels_default_to_zero(self):
        counts = normalize_level_counts({"applying": 2})
        assert counts[CognitiveLevel.APPLYING] == 2
        assert counts[CognitiveLevel.REMEMBERING] == 0
        assert set(counts) == set(CognitiveLevel)


class TestBuildPlan:
    def test_total_is_sum_of_normalized_counts(self):
        plan = build_plan("a.txt", "text", {"remembering": "2", "applying": -1, "creating": 3}, "essay")
        assert plan.total_requested == 5
        assert plan.question_type is QuestionType.ESSAY
        assert plan.requested_levels() == [CognitiveLevel.REMEMBERING, CognitiveLevel.CREATING]

    def test_stable_under_reordering(self):
        forward = {"remembering": 1, "understanding": 2, "evaluating": 3}
        backward = dict(reversed(list(forward.items())))
        a = build_plan("a.txt", "text", forward, "multiple-choice")
        b = build_plan("a.txt", "text", backward, "multiple-choice")
        assert a.total_requested == b.total_requested == 6
        assert a.level_counts == b.level_counts

    @pytest.mark.parametrize("counts", [{}, None, {"remembering": 0}, {"applying": "x", "analyzing": -3}])
    def test_zero_total_rejected(self, counts):
        with pytest.raises(InvalidPlanError, match="At least one question"):
            build_plan("a.txt", "text", counts, "multiple-choice")

    def test_unknown_level_rejected(self):
        with pytest.raises(InvalidPlanError, match="Unknown cognitive level"):
            build_plan("a.txt", "text", {"memorizing": 2}, "multiple-choice")

    def test_unknown_question_type_rejected(self):
        with pytest.raises(InvalidPlanError, match="Invalid question type"):
            build_plan("a.txt", "text", {"remembering": 1}, "true-false")

    def test_ceiling_enforced(self):
        with pytest.raises(InvalidPlanError, match="maximum"):
            build_plan("a.txt", "text", {"remembering": 11}, "essay", max_questions=10)

    def test_plan_is_immutable(self):
        plan = build_plan("a.txt", "text", {"remembering": 1}, "essay")
        with pytest.raises(ValidationError):
            plan.question_type = QuestionType.MULTIPLE_CHOICE

    def test_level_counts_are_read_only(self):
        plan = build_plan("a.txt", "text", {"remembering": 1}, "essay")
        with pytest.raises(TypeError):
            plan.level_counts[CognitiveLevel.CREATING] = 7
        assert plan.total_requested == 1

    def test_huge_integer_count_hits_ceiling(self):
        assert normalize_count(10**400) == 10**400
        with pytest.raises(InvalidPlanError, match="maximum"):
            build_plan("a.txt", "text", {"remembering": 10**400}, "essay")

    def test_error_carries_stage(self):
        with pytest.raises(InvalidPlanError) as info:
            build_plan("a.txt", "text", {}, "essay")
        assert info.value.stage == "planning"
