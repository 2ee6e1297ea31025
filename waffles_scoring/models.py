"""
Waffles - Modelos de Pontuação
===============================

Estruturas de dados do motor de pontuação: dificuldade, entrada bruta,
parâmetros sanitizados, detalhamento (breakdown) e resultado.

CONCEITO: Objetos de Valor
---------------------------
Nenhuma destas classes tem identidade ou estado mutável. Cada cálculo cria
instâncias novas que são descartadas depois que o chamador consome o
resultado. Por isso todas são dataclasses congeladas (frozen) e podem ser
compartilhadas entre várias respostas simultâneas sem qualquer lock.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Union


class Difficulty(str, Enum):
    """
    Nível de dificuldade de uma pergunta.

    Herda de `str` para que o valor vindo de uma mensagem ("MEDIUM")
    e o membro do enum (Difficulty.MEDIUM) sejam intercambiáveis.
    """
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


# =============================================================================
# CONSTANTES (contrato público)
# =============================================================================

BASE_POINTS = MappingProxyType({
    Difficulty.EASY: 500,
    Difficulty.MEDIUM: 1000,
    Difficulty.HARD: 1500,
})

MAX_TIME_BONUS = 1.0        # Bônus máximo por velocidade (100%)
MAX_COMBO_BONUS = 0.5       # Bônus máximo por sequência (50%)
COMBO_STEP = 0.1            # Cada acerto consecutivo soma 10%
MAX_CONSECUTIVE_CORRECT = 100
DEFAULT_DIFFICULTY = Difficulty.MEDIUM

# Fórmula antiga (linear, sem dificuldade nem combo)
LEGACY_BASE_POINTS = 300
LEGACY_SPEED_BONUS = 2700


DifficultyLike = Union[Difficulty, str]


@dataclass(frozen=True)
class ScoreInput:
    """
    Pedido bruto de cálculo, exatamente como chega do chamador.

    Nada aqui é confiável: os valores só são usados depois de passar
    pelo validador.
    """
    time_taken_ms: float                        # Tempo de resposta (ms)
    max_time_sec: float                         # Tempo limite da pergunta (s)
    is_correct: bool
    difficulty: Optional[DifficultyLike] = None  # None -> MEDIUM
    consecutive_correct: Optional[int] = None    # None -> 0


@dataclass(frozen=True)
class SanitizedScoreParams:
    """Parâmetros já validados e limitados (clamp)."""
    time_taken_sec: float
    max_time_sec: float
    difficulty: Difficulty
    consecutive_correct: int


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado do validador: ou parâmetros sanitizados, ou uma mensagem de erro.
    Nunca os dois.
    """
    is_valid: bool
    sanitized: Optional[SanitizedScoreParams] = None
    error: Optional[str] = None

    @staticmethod
    def ok(sanitized: SanitizedScoreParams) -> 'ValidationResult':
        return ValidationResult(is_valid=True, sanitized=sanitized)

    @staticmethod
    def fail(error: str) -> 'ValidationResult':
        return ValidationResult(is_valid=False, error=error)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Detalhamento de como a pontuação final foi composta."""
    base_points: int
    time_bonus: float
    combo_bonus: float
    total_multiplier: float
    final_score: int
    time_taken_sec: float
    was_correct: bool

    def to_dict(self) -> dict:
        """Serializa com as chaves usadas pelos clientes"""
        return {
            "basePoints": self.base_points,
            "timeBonus": self.time_bonus,
            "comboBonus": self.combo_bonus,
            "totalMultiplier": self.total_multiplier,
            "finalScore": self.final_score,
            "timeTakenSec": self.time_taken_sec,
            "wasCorrect": self.was_correct,
        }


@dataclass(frozen=True)
class ScoreResult:
    """Valor de retorno do caminho validado: pontuação + detalhamento."""
    score: int
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "breakdown": self.breakdown.to_dict(),
        }
