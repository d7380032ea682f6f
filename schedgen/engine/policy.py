from __future__ import annotations
from typing import List, Optional, Protocol

from pydantic import BaseModel, Field

from schedgen.config import DEFAULT_CORE_SUBJECTS, Settings, get_settings


class SessionCountPolicy(Protocol):
    def sessions_per_week(self, subject_id: str) -> int: ...


class SessionPolicy(BaseModel):
    """Weekly session count per subject.

    Core subjects get ``core_sessions`` per week, everything else gets
    ``default_sessions``. Pass a different instance (or any object with a
    ``sessions_per_week`` method) to the generator to change the mapping.
    """

    core_subjects: List[str] = Field(default_factory=lambda: list(DEFAULT_CORE_SUBJECTS))
    core_sessions: int = Field(3, ge=1)
    default_sessions: int = Field(2, ge=1)

    def sessions_per_week(self, subject_id: str) -> int:
        if subject_id in self.core_subjects:
            return self.core_sessions
        return self.default_sessions


def default_policy(settings: Optional[Settings] = None) -> SessionPolicy:
    settings = settings or get_settings()
    return SessionPolicy(
        core_subjects=settings.core_subjects,
        core_sessions=settings.core_sessions_per_week,
        default_sessions=settings.default_sessions_per_week,
    )
