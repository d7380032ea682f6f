from __future__ import annotations
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_CORE_SUBJECTS = ["math", "physics", "chemistry", "history", "literature", "english"]


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


class Settings(BaseModel):
    core_subjects: List[str] = Field(default_factory=lambda: list(DEFAULT_CORE_SUBJECTS))
    core_sessions_per_week: int = Field(3, ge=1)
    default_sessions_per_week: int = Field(2, ge=1)
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        core_subjects=_env_list("SCHEDGEN_CORE_SUBJECTS", DEFAULT_CORE_SUBJECTS),
        core_sessions_per_week=int(os.getenv("SCHEDGEN_CORE_SESSIONS_PER_WEEK", "3")),
        default_sessions_per_week=int(os.getenv("SCHEDGEN_DEFAULT_SESSIONS_PER_WEEK", "2")),
        log_level=os.getenv("SCHEDGEN_LOG_LEVEL", "INFO"),
    )
