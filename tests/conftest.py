from typing import Iterable, List
import pytest

class ScriptedRng:
    """Hands out a fixed sequence of draws instead of random ones."""

    def __init__(self, draws: Iterable[int]):
        self.draws: List[int] = list(draws)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self.draws.pop(0)
        assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
        return value

@pytest.fixture
def scripted():
    return ScriptedRng
