from __future__ import annotations
import re
from typing import Optional
from pydantic import BaseModel, Field, ValidationError
from .models import KEEP_EXCEEDS_MESSAGE, RollSpec

FIELD_MESSAGES = {
    "sides": "Sides must be a positive integer",
    "number": "Number must be a non-negative integer",
    "modifier": "Modifier must be an integer",
    "keep": "Keep must be a positive integer",
    "times": "Times must be a positive integer",
    "seed": "Seed must be an integer",
}

# RollSpec field -> user-facing option name
_SPEC_FIELDS = {"sides": "sides", "count": "number", "modifier": "modifier", "keep": "keep"}

# ASCII digits with an optional sign; no underscores
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)

class RollInputError(Exception):
    """Invalid user input; carries the name of the offending field."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message or FIELD_MESSAGES.get(field, f"Invalid value for {field}")
        super().__init__(self.message)

class RollRequest(BaseModel):
    spec: RollSpec
    times: int = Field(default=1, ge=1)
    verbose: bool = False
    floor_at_zero: bool = False
    seed: Optional[int] = None

def parse_int(field: str, raw: Optional[str], minimum: Optional[int] = None,
              default: Optional[int] = None) -> Optional[int]:
    if raw is None:
        return default
    text = str(raw).strip()
    if not _INT_RE.fullmatch(text):
        raise RollInputError(field)
    value = int(text)
    if minimum is not None and value < minimum:
        raise RollInputError(field)
    return value

def build_spec(sides: int, count: int = 1, advantage: bool = False,
               modifier: int = 0, keep: Optional[int] = None) -> RollSpec:
    if keep is not None and keep > count:
        raise RollInputError("keep", KEEP_EXCEEDS_MESSAGE)
    try:
        return RollSpec(sides=sides, count=count, advantage=advantage, modifier=modifier, keep=keep)
    except ValidationError as e:
        err = e.errors()[0]
        loc = err.get("loc") or ()
        if loc and loc[0] in _SPEC_FIELDS:
            raise RollInputError(_SPEC_FIELDS[loc[0]]) from e
        raise RollInputError("keep", KEEP_EXCEEDS_MESSAGE) from e

def build_request(sides: Optional[str], number: str = "1", advantage: bool = False,
                  modifier: str = "0", keep: Optional[str] = None, times: str = "1",
                  verbose: bool = False, floor_at_zero: bool = False,
                  seed: Optional[str] = None) -> RollRequest:
    """Validate raw command-line text into a RollRequest.

    Fields are checked in a fixed order and the first failure is raised as a
    RollInputError; nothing is rolled here.
    """
    if sides is None:
        raise RollInputError("sides", "Sides is required")
    spec_sides = parse_int("sides", sides, minimum=1)
    count = parse_int("number", number, minimum=0, default=1)
    mod = parse_int("modifier", modifier, default=0)
    kept = parse_int("keep", keep, minimum=1)
    reps = parse_int("times", times, minimum=1, default=1)
    seed_value = parse_int("seed", seed)
    spec = build_spec(spec_sides, count, advantage, mod, kept)
    return RollRequest(spec=spec, times=reps, verbose=verbose,
                       floor_at_zero=floor_at_zero, seed=seed_value)
