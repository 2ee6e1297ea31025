"""Testes dos schemas de mensagens"""

import math

import pytest
from pydantic import ValidationError

from waffles_scoring import ScoreCalculationError, calculate_score, get_score_range
from waffles_scoring.schemas import ScoreRangeResponse, ScoreRequest, ScoreResponse


def test_request_from_camel_case_message():
    request = ScoreRequest.model_validate({
        "timeTakenMs": 3000,
        "maxTimeSec": 10,
        "isCorrect": True,
        "difficulty": "MEDIUM",
        "consecutiveCorrect": 2,
    })

    result = calculate_score(request.to_score_input())

    assert result.score == 2110


def test_request_accepts_snake_case():
    request = ScoreRequest(time_taken_ms=0, max_time_sec=10, is_correct=True)
    score_input = request.to_score_input()

    assert score_input.difficulty is None
    assert score_input.consecutive_correct is None
    assert calculate_score(score_input).score == 2000


def test_request_keeps_semantic_validation_for_validator():
    request = ScoreRequest.model_validate({
        "timeTakenMs": float("nan"),
        "maxTimeSec": 10,
        "isCorrect": True,
    })
    assert math.isnan(request.time_taken_ms)

    with pytest.raises(ScoreCalculationError, match="time_taken_ms"):
        calculate_score(request.to_score_input())


def test_request_rejects_missing_fields():
    with pytest.raises(ValidationError):
        ScoreRequest.model_validate({"timeTakenMs": 100})


def test_response_uses_client_keys():
    result = calculate_score(ScoreRequest(
        time_taken_ms=5000, max_time_sec=10, is_correct=True, difficulty="HARD",
    ).to_score_input())

    payload = ScoreResponse.from_result(result).model_dump(by_alias=True)

    assert payload == result.to_dict()
    assert set(payload["breakdown"]) == {
        "basePoints", "timeBonus", "comboBonus", "totalMultiplier",
        "finalScore", "timeTakenSec", "wasCorrect",
    }


def test_range_response():
    assert ScoreRangeResponse(**get_score_range("HARD")).model_dump() == {"min": 1500, "max": 3750}


def test_range_response_round_trips_keys():
    assert ScoreRangeResponse.model_validate({"min": 500, "max": 1250}).model_dump(by_alias=True) == {
        "min": 500,
        "max": 1250,
    }
