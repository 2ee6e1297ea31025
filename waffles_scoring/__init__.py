"""Waffles - motor de pontuação das rodadas de trivia."""

from .calculator import (
    apply_bonuses,
    calculate_combo_bonus,
    calculate_time_bonus,
    create_breakdown,
    current_streak,
    get_base_points,
    get_score_range,
    score_delta,
)
from .models import (
    BASE_POINTS,
    MAX_COMBO_BONUS,
    MAX_TIME_BONUS,
    Difficulty,
    SanitizedScoreParams,
    ScoreBreakdown,
    ScoreInput,
    ScoreResult,
    ValidationResult,
)
from .scoring import (
    ScoreCalculationError,
    calculate_score,
    calculate_score_fast,
    calculate_score_legacy,
    get_score,
    is_match,
)
from .validators import is_valid_score_input, sanitize_time, validate_score_input

__all__ = [
    "BASE_POINTS",
    "MAX_COMBO_BONUS",
    "MAX_TIME_BONUS",
    "Difficulty",
    "SanitizedScoreParams",
    "ScoreBreakdown",
    "ScoreCalculationError",
    "ScoreInput",
    "ScoreResult",
    "ValidationResult",
    "apply_bonuses",
    "calculate_combo_bonus",
    "calculate_score",
    "calculate_score_fast",
    "calculate_score_legacy",
    "calculate_time_bonus",
    "create_breakdown",
    "current_streak",
    "get_base_points",
    "get_score",
    "get_score_range",
    "is_match",
    "is_valid_score_input",
    "sanitize_time",
    "score_delta",
    "validate_score_input",
]
