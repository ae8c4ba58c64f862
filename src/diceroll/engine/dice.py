from __future__ import annotations
from typing import Iterator, List, Optional, Sequence
from .models import RollResult, RollSpec
from .rng import IntSource
from ..util.log import get_logger

log = get_logger(__name__)

def draw(rng: IntSource, sides: int, advantage: bool = False) -> int:
    first = rng.randint(1, sides)
    if not advantage:
        return first
    return max(first, rng.randint(1, sides))

def generate(spec: RollSpec, rng: IntSource) -> List[int]:
    """Roll every die in the spec and return the values in ascending order.

    Sorting up front lets "keep the highest N" be a plain suffix slice.
    """
    values = [draw(rng, spec.sides, spec.advantage) for _ in range(spec.count)]
    values.sort()
    return values

def select_kept(values: Sequence[int], keep: Optional[int]) -> List[int]:
    if keep is None:
        return list(values)
    # values[-0:] would be the whole list
    return list(values[len(values) - keep:]) if keep > 0 else []

def total_of(kept: Sequence[int], modifier: int, floor_at_zero: bool = False) -> int:
    total = sum(kept) + modifier
    if floor_at_zero:
        return max(total, 0)
    return total

def aggregate(values: Sequence[int], keep: Optional[int], modifier: int,
              floor_at_zero: bool = False) -> int:
    return total_of(select_kept(values, keep), modifier, floor_at_zero)

def roll(spec: RollSpec, rng: IntSource, floor_at_zero: bool = False) -> RollResult:
    values = generate(spec, rng)
    kept = select_kept(values, spec.kept_count)
    total = total_of(kept, spec.modifier, floor_at_zero)
    log.debug("rolled %s values=%s kept=%s total=%d", spec.label, values, kept, total)
    return RollResult(values=tuple(values), kept=tuple(kept), total=total)

def roll_many(spec: RollSpec, rng: IntSource, times: int,
              floor_at_zero: bool = False) -> Iterator[RollResult]:
    for _ in range(max(0, times)):
        yield roll(spec, rng, floor_at_zero)
