"""
Configuração do pytest e fixtures compartilhadas
"""
import pytest

from waffles_scoring import ScoreInput


@pytest.fixture
def make_input():
    """Fábrica de ScoreInput com valores padrão de uma resposta correta"""
    def _make(**overrides):
        values = {
            "time_taken_ms": 3000,
            "max_time_sec": 10,
            "is_correct": True,
        }
        values.update(overrides)
        return ScoreInput(**values)
    return _make
