from __future__ import annotations
from typing import Dict, List, Optional

from schedgen.schemas import Teacher


def qualified_teachers(subject_id: str, teachers: List[Teacher]) -> List[Teacher]:
    return [t for t in teachers if subject_id in t.subjects]


def select_teacher(subject_id: str, teachers: List[Teacher], loads: Dict[str, int]) -> Optional[Teacher]:
    # Least loaded at selection time; min() keeps the first listed teacher on ties
    candidates = qualified_teachers(subject_id, teachers)
    if not candidates:
        return None
    return min(candidates, key=lambda t: loads.get(t.id, 0))
