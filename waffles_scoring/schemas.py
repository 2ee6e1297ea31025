"""
Waffles - Schemas de Mensagens
===============================

Modelos Pydantic para o formato das mensagens de pontuação trocadas com
o transporte em tempo real (a sala de jogo decodifica a resposta do
jogador e devolve o detalhamento).

Os tipos de entrada são propositalmente permissivos (float aceita inf/NaN,
dificuldade é texto livre): a validação semântica continua sendo
responsabilidade do validador, que produz mensagens de erro específicas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .models import ScoreInput, ScoreResult


class _CamelModel(BaseModel):
    """Aceita e emite chaves camelCase (timeTakenMs) e também snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreRequest(_CamelModel):
    """Resposta de um jogador, como chega na mensagem."""
    time_taken_ms: float
    max_time_sec: float
    is_correct: bool
    difficulty: Optional[str] = None
    consecutive_correct: Optional[float] = None

    def to_score_input(self) -> ScoreInput:
        return ScoreInput(
            time_taken_ms=self.time_taken_ms,
            max_time_sec=self.max_time_sec,
            is_correct=self.is_correct,
            difficulty=self.difficulty,
            consecutive_correct=self.consecutive_correct,
        )


class ScoreBreakdownResponse(_CamelModel):
    base_points: int
    time_bonus: float
    combo_bonus: float
    total_multiplier: float
    final_score: int
    time_taken_sec: float
    was_correct: bool


class ScoreResponse(_CamelModel):
    """Resultado enviado de volta ao cliente."""
    score: int
    breakdown: ScoreBreakdownResponse

    @classmethod
    def from_result(cls, result: ScoreResult) -> 'ScoreResponse':
        return cls.model_validate(result.to_dict())


class ScoreRangeResponse(_CamelModel):
    min: int
    max: int
