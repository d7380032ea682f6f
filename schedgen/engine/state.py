from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from schedgen.schemas import SessionAssignment

Cell = Tuple[int, int]  # (day, time_slot)

SIXTH_DAY = 5


@dataclass(frozen=True)
class GridShape:
    slot_count: int
    max_days_per_week: int
    prefer_five_days: bool

    @property
    def effective_days(self) -> int:
        return 5 if self.prefer_five_days else self.max_days_per_week

    @property
    def sixth_day_fallback(self) -> bool:
        return self.prefer_five_days and self.max_days_per_week == 6


@dataclass
class GenerationState:
    """Working state of one generation run. Never shared between runs."""

    items: List[SessionAssignment] = field(default_factory=list)
    # (day, slot) -> [(teacher_id, group_id), ...]
    cells: Dict[Cell, List[Tuple[str, str]]] = field(default_factory=dict)
    loads: Dict[str, int] = field(default_factory=dict)

    def is_free(self, cell: Cell, group_id: str, teacher_id: str) -> bool:
        for tid, gid in self.cells.get(cell, []):
            if tid == teacher_id or gid == group_id:
                return False
        return True

    def place(self, item: SessionAssignment) -> None:
        self.items.append(item)
        self.cells.setdefault((item.day, item.time_slot), []).append((item.teacher_id, item.group_id))
        self.loads[item.teacher_id] = self.loads.get(item.teacher_id, 0) + 1
