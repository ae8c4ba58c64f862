from __future__ import annotations
from typing import List
from .models import RollResult, RollSpec

def describe_spec(spec: RollSpec) -> str:
    return (f"Rolled: {spec.label}, Keeping: {spec.kept_count}, "
            f"Advantage: {str(spec.advantage).lower()}")

def render_result(spec: RollSpec, result: RollResult, verbose: bool = False) -> List[str]:
    lines: List[str] = []
    if verbose:
        lines.append(describe_spec(spec))
        lines.append("Individual rolls: " + ", ".join(str(v) for v in result.values))
    lines.append(f"You rolled a {result.total}")
    return lines
