"""
Waffles - Sistema de Pontuação
===============================

Ponto de entrada do motor de pontuação. Orquestra validador -> calculadora
e expõe três caminhos:

- calculate_score: validado, devolve pontuação + detalhamento e lança
  ScoreCalculationError para entradas inválidas de respostas corretas
- calculate_score_fast: sem validação detalhada, nunca lança, devolve só o
  inteiro (0 para qualquer entrada inválida)
- calculate_score_legacy: fórmula linear antiga, mantida por compatibilidade

CONCEITO: Dois Contratos de Erro
---------------------------------
O caminho validado falha rápido, porque quem o chama já fez a checagem
básica e trata falha como exceção. Os caminhos rápido e legado degradam para
0 porque rodam em laços apertados ou em chamadores antigos que não tratam
exceções.
"""

import logging
import warnings
from typing import Any, Optional

from .calculator import (
    apply_bonuses,
    calculate_combo_bonus,
    calculate_time_bonus,
    create_breakdown,
    get_base_points,
    round_half_up,
)
from .models import (
    LEGACY_BASE_POINTS,
    LEGACY_SPEED_BONUS,
    DifficultyLike,
    ScoreInput,
    ScoreResult,
)
from .validators import (
    coerce_difficulty,
    is_finite_number,
    is_number,
    is_valid_score_input,
    sanitize_time,
    validate_score_input,
)

logger = logging.getLogger(__name__)


class ScoreCalculationError(ValueError):
    """Entrada inválida no caminho validado. `reason` traz a mensagem do validador."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Falha no cálculo da pontuação: {reason}")


def calculate_score(score_input: ScoreInput) -> ScoreResult:
    """
    Calcula a pontuação de uma resposta com validação e detalhamento.

    1. Resposta errada: 0 pontos, sem validar tempo/dificuldade
    2. Valida e sanitiza as entradas
    3. Aplica bônus de tempo (decaimento quadrático)
    4. Aplica bônus de combo (acertos consecutivos)

    Exemplo:
        >>> result = calculate_score(ScoreInput(
        ...     time_taken_ms=3000, max_time_sec=10, is_correct=True,
        ...     difficulty="MEDIUM", consecutive_correct=2))
        >>> result.score
        2110

    Raises:
        ScoreCalculationError: entrada inválida para uma resposta correta
    """
    if not score_input.is_correct:
        time_taken_ms = score_input.time_taken_ms
        time_taken_sec = time_taken_ms / 1000 if is_finite_number(time_taken_ms) else 0.0
        return ScoreResult(
            score=0,
            breakdown=create_breakdown(0, 0.0, 0.0, time_taken_sec, False),
        )

    validation = validate_score_input(score_input)
    if not validation.is_valid:
        logger.warning(f"Pontuação rejeitada: {validation.error}")
        raise ScoreCalculationError(validation.error)

    params = validation.sanitized
    base_points = get_base_points(params.difficulty)
    time_bonus = calculate_time_bonus(params.time_taken_sec, params.max_time_sec)
    combo_bonus = calculate_combo_bonus(params.consecutive_correct)

    final_score = apply_bonuses(base_points, time_bonus, combo_bonus)
    breakdown = create_breakdown(
        base_points,
        time_bonus,
        combo_bonus,
        params.time_taken_sec,
        True
    )

    logger.debug(
        f"Pontuação {final_score} ({params.difficulty.value}, "
        f"tempo={params.time_taken_sec:.2f}s, sequência={params.consecutive_correct})"
    )
    return ScoreResult(score=final_score, breakdown=breakdown)


def calculate_score_fast(
    time_taken_ms: float,
    max_time_sec: float,
    is_correct: bool,
    difficulty: Optional[DifficultyLike] = None,
    consecutive_correct: Optional[float] = 0
) -> int:
    """
    Cálculo rápido, sem detalhamento, para caminhos de alto desempenho.

    Nunca lança: qualquer entrada inválida resulta em 0.
    """
    if not is_correct:
        return 0
    if not is_valid_score_input(time_taken_ms, max_time_sec):
        logger.debug(f"Entrada descartada: tempo={time_taken_ms!r}, max={max_time_sec!r}")
        return 0

    resolved = coerce_difficulty(difficulty)
    if resolved is None:
        logger.debug(f"Dificuldade desconhecida descartada: {difficulty!r}")
        return 0

    if consecutive_correct is None:
        consecutive_correct = 0
    if not is_finite_number(consecutive_correct):
        logger.debug(f"Sequência inválida descartada: {consecutive_correct!r}")
        return 0

    time_taken_sec = sanitize_time(time_taken_ms, max_time_sec)
    base_points = get_base_points(resolved)
    time_bonus = calculate_time_bonus(time_taken_sec, max_time_sec)
    combo_bonus = calculate_combo_bonus(consecutive_correct)

    return apply_bonuses(base_points, time_bonus, combo_bonus)


def get_score(time_taken_ms: float, max_time_sec: float, is_correct: bool) -> int:
    """Atalho usado no envio de respostas: dificuldade MEDIUM, sem sequência."""
    return calculate_score_fast(time_taken_ms, max_time_sec, is_correct)


def calculate_score_legacy(time_taken_sec: float, max_time_sec: float) -> int:
    """
    Fórmula antiga: 300 + fator_velocidade * 2700 (300 a 3000 pontos).

    Decaimento LINEAR, sem dificuldade e sem combo. Nunca lança: tempo
    máximo inválido gera um aviso no log e 0 pontos.

    Obsoleta: use calculate_score.
    """
    warnings.warn(
        "calculate_score_legacy está obsoleta; use calculate_score",
        DeprecationWarning,
        stacklevel=2,
    )

    if not is_finite_number(max_time_sec) or max_time_sec <= 0:
        logger.warning(f"calculate_score_legacy: tempo máximo inválido ({max_time_sec!r}). Retornando 0.")
        return 0

    if not is_number(time_taken_sec):
        logger.warning(f"calculate_score_legacy: tempo inválido ({time_taken_sec!r}). Retornando 0.")
        return 0

    clamped_time = min(max(0.0, time_taken_sec), max_time_sec)
    speed_ratio = (max_time_sec - clamped_time) / max_time_sec

    score = LEGACY_BASE_POINTS + speed_ratio * LEGACY_SPEED_BONUS
    return max(0, round_half_up(score))


def is_match(choice_id: Any, target_id: Any) -> bool:
    """
    Rodada final: a escolha corresponde ao alvo?

    Comparação simples por identificador (como texto).
    """
    if choice_id is None or target_id is None:
        return False
    return str(choice_id) == str(target_id)

