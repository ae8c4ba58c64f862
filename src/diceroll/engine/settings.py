from __future__ import annotations
from typing import Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DICEROLL_")

    seed: Optional[int] = None      # unset -> OS entropy
    floor_at_zero: bool = False     # clamp totals at 0
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

def load_settings() -> Settings:
    # environment only; there is no settings file
    return Settings()
