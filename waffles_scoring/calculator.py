"""
Waffles - Calculadora de Pontuação
===================================

Funções puras de aritmética: pontos base, bônus de tempo, bônus de combo,
composição dos bônus e montagem do detalhamento.

Nenhuma função aqui sabe de onde vieram as entradas: o validador já
garantiu que elas são bem formadas.

Fórmula:
    pontuação = arredondar(pontos_base * (1 + bônus_tempo + bônus_combo))

CONCEITO: Funções Puras
------------------------
Sem estado global mutável e sem I/O. Várias partidas podem calcular
pontuações ao mesmo tempo sem coordenação: nenhuma chamada observa o
resultado de outra.
"""

import math
from typing import Dict, Iterable

from .models import (
    BASE_POINTS,
    COMBO_STEP,
    MAX_COMBO_BONUS,
    MAX_TIME_BONUS,
    DifficultyLike,
    Difficulty,
    ScoreBreakdown,
)


def round_half_up(value: float) -> int:
    """Arredonda x.5 para cima (valores aqui nunca são negativos)."""
    return int(math.floor(value + 0.5))


def get_base_points(difficulty: DifficultyLike) -> int:
    """Pontos base da pergunta: EASY=500, MEDIUM=1000, HARD=1500."""
    return BASE_POINTS[Difficulty(difficulty)]


def calculate_time_bonus(time_taken_sec: float, max_time_sec: float) -> float:
    """
    Bônus por velocidade com decaimento quadrático.

    bônus = MAX_TIME_BONUS * (1 - (tempo / tempo_max)^2)

    - Resposta instantânea: 100% do bônus
    - Na metade do tempo: 75% do bônus
    - No último instante: 0%

    Args:
        time_taken_sec: Tempo gasto em segundos (já sanitizado)
        max_time_sec: Tempo máximo em segundos

    Returns:
        Multiplicador entre 0.0 e MAX_TIME_BONUS
    """
    if max_time_sec <= 0:
        return 0.0

    ratio = time_taken_sec / max_time_sec
    bonus = MAX_TIME_BONUS * (1 - ratio ** 2)

    return max(0.0, min(MAX_TIME_BONUS, bonus))


def calculate_combo_bonus(consecutive_correct: float) -> float:
    """
    Bônus por acertos consecutivos: +10% por acerto, teto de 50% (sequência 5).
    """
    if consecutive_correct <= 0:
        return 0.0

    return min(consecutive_correct * COMBO_STEP, MAX_COMBO_BONUS)


def apply_bonuses(base_points: int, time_bonus: float, combo_bonus: float) -> int:
    """Aplica os bônus aos pontos base e arredonda para o inteiro mais próximo."""
    total_multiplier = 1 + time_bonus + combo_bonus
    return round_half_up(base_points * total_multiplier)


def create_breakdown(
    base_points: int,
    time_bonus: float,
    combo_bonus: float,
    time_taken_sec: float,
    was_correct: bool
) -> ScoreBreakdown:
    """
    Monta o detalhamento a partir de valores já calculados.

    A pontuação final é recalculada com apply_bonuses para que o
    detalhamento e a pontuação devolvida nunca divirjam.
    """
    return ScoreBreakdown(
        base_points=base_points,
        time_bonus=time_bonus,
        combo_bonus=combo_bonus,
        total_multiplier=1 + time_bonus + combo_bonus,
        final_score=apply_bonuses(base_points, time_bonus, combo_bonus),
        time_taken_sec=time_taken_sec,
        was_correct=was_correct,
    )


def get_score_range(difficulty: DifficultyLike) -> Dict[str, int]:
    """Pontuação mínima (sem bônus) e máxima (bônus máximos) da dificuldade."""
    base = get_base_points(difficulty)
    return {
        "min": base,
        "max": apply_bonuses(base, MAX_TIME_BONUS, MAX_COMBO_BONUS),
    }


def current_streak(history: Iterable[bool]) -> int:
    """
    Acertos consecutivos no fim do histórico (ordem cronológica).
    É o valor de consecutive_correct para a próxima resposta.
    """
    streak = 0
    for correct in history:
        streak = streak + 1 if correct else 0
    return streak


def score_delta(new_points: int, previous_points: int) -> int:
    """
    Diferença a aplicar no total do jogador quando uma resposta é reenviada.
    """
    return max(0, int(new_points)) - max(0, int(previous_points))
