from __future__ import annotations
import random
from typing import Optional, Protocol

class IntSource(Protocol):
    """Anything that hands out uniform integers in an inclusive range."""
    def randint(self, a: int, b: int) -> int: ...

def make_rng(seed: Optional[int] = None) -> random.Random:
    # seed=None pulls from OS entropy
    return random.Random(seed)
