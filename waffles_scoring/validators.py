"""Waffles - Validação de Entradas

Sanitização e validação das entradas antes de qualquer cálculo.
O validador nunca lança exceções: devolve um ValidationResult.
"""

import math
from numbers import Real
from typing import Any, Optional

from .models import (
    DEFAULT_DIFFICULTY,
    MAX_CONSECUTIVE_CORRECT,
    Difficulty,
    SanitizedScoreParams,
    ScoreInput,
    ValidationResult,
)


def is_finite_number(value: Any) -> bool:
    """Número real finito (bool não conta como número)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int grande demais para float
        return False


def is_number(value: Any) -> bool:
    """Real que não seja NaN (infinitos são aceitos e depois limitados)"""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return not math.isnan(value)
    except OverflowError:
        # int grande demais para float equivale a +/-inf
        return True


def coerce_difficulty(value: Any) -> Optional[Difficulty]:
    """Converte "EASY"/"MEDIUM"/"HARD" (ou o próprio membro) em Difficulty."""
    if value is None:
        return DEFAULT_DIFFICULTY
    try:
        return Difficulty(value)
    except (ValueError, TypeError):
        return None


def validate_score_input(score_input: ScoreInput) -> ValidationResult:
    """
    Valida e sanitiza os parâmetros de cálculo.

    Ordem das verificações (para na primeira falha):
    1. max_time_sec finito e > 0
    2. time_taken_ms finito e >= 0
    3. difficulty, se informada, deve ser EASY, MEDIUM ou HARD
    4. consecutive_correct, se informado, inteiro finito e não-negativo

    Returns:
        ValidationResult com os parâmetros sanitizados, ou com a mensagem
        de erro nomeando o campo e o valor recebido.
    """
    max_time_sec = score_input.max_time_sec
    if not is_finite_number(max_time_sec) or max_time_sec <= 0:
        return ValidationResult.fail(
            f"max_time_sec inválido: {max_time_sec!r}. Deve ser um número positivo."
        )

    time_taken_ms = score_input.time_taken_ms
    if not is_finite_number(time_taken_ms) or time_taken_ms < 0:
        return ValidationResult.fail(
            f"time_taken_ms inválido: {time_taken_ms!r}. Deve ser não-negativo."
        )

    difficulty = coerce_difficulty(score_input.difficulty)
    if difficulty is None:
        return ValidationResult.fail(
            f"difficulty inválida: {score_input.difficulty!r}. "
            f"Deve ser EASY, MEDIUM ou HARD."
        )

    consecutive = score_input.consecutive_correct
    if consecutive is None:
        consecutive = 0
    if not is_finite_number(consecutive) or consecutive < 0 or consecutive != int(consecutive):
        return ValidationResult.fail(
            f"consecutive_correct inválido: {score_input.consecutive_correct!r}. "
            f"Deve ser um inteiro não-negativo."
        )

    return ValidationResult.ok(SanitizedScoreParams(
        time_taken_sec=sanitize_time(time_taken_ms, max_time_sec),
        max_time_sec=max_time_sec,
        difficulty=difficulty,
        # Teto contra contadores de sequência corrompidos
        consecutive_correct=min(int(consecutive), MAX_CONSECUTIVE_CORRECT),
    ))


def is_valid_score_input(time_taken_ms: Any, max_time_sec: Any) -> bool:
    """Validação rápida para o caminho quente (sem mensagem de erro)."""
    return (
        is_finite_number(time_taken_ms)
        and is_finite_number(max_time_sec)
        and time_taken_ms >= 0
        and max_time_sec > 0
    )


def sanitize_time(time_taken_ms: float, max_time_sec: float) -> float:
    """
    Converte ms -> s e limita ao intervalo [0, max_time_sec].
    Assume entradas já validadas por is_valid_score_input.
    """
    time_sec = time_taken_ms / 1000
    return min(max(0.0, time_sec), max_time_sec)
