"""Grading of learner answers against expected positions."""

from .grading import (
    Medal,
    ScoreThresholds,
    ErrorReport,
    Grade,
    TimeBonus,
    compute_error,
    score_tier,
    grade_answer,
    grade_batch,
    within_tolerance,
    time_trial_medal,
)

__all__ = [
    "Medal",
    "ScoreThresholds",
    "ErrorReport",
    "Grade",
    "TimeBonus",
    "compute_error",
    "score_tier",
    "grade_answer",
    "grade_batch",
    "within_tolerance",
    "time_trial_medal",
]
