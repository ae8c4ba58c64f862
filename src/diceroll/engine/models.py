from __future__ import annotations
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

KEEP_EXCEEDS_MESSAGE = "You can't keep more dice than you rolled"

class RollSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    sides: int = Field(ge=1)
    count: int = Field(default=1, ge=0)
    advantage: bool = False
    modifier: int = 0
    keep: Optional[int] = Field(default=None, ge=1)  # None -> keep every die

    @model_validator(mode="after")
    def _keep_within_count(self):
        if self.keep is not None and self.keep > self.count:
            raise ValueError(KEEP_EXCEEDS_MESSAGE)
        return self

    @property
    def kept_count(self) -> int:
        return self.count if self.keep is None else self.keep

    @property
    def label(self) -> str:
        return f"{self.count}D{self.sides}{self.modifier:+d}"

class RollResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: Tuple[int, ...] = ()  # ascending
    kept: Tuple[int, ...] = ()    # highest kept_count entries of values
    total: int = 0
