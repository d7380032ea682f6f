from __future__ import annotations
from typing import Dict, List, Optional

from schedgen.data.defaults import WEEKDAYS
from schedgen.engine.generator import ScheduleGenerator
from schedgen.engine.parity import week_label
from schedgen.engine.policy import SessionCountPolicy
from schedgen.schemas import GenerateRequest, GenerationReport, GridResponse


class ScheduleService:
    def __init__(self, policy: Optional[SessionCountPolicy] = None) -> None:
        self.policy = policy

    def generate(self, req: GenerateRequest) -> GenerationReport:
        # New generator per call, nothing is kept between requests
        return ScheduleGenerator(self.policy).run(req)

    def group_grid(self, req: GenerateRequest, report: GenerationReport, group_id: str) -> GridResponse:
        if not any(g.id == group_id for g in req.groups):
            raise ValueError(f"Unknown group {group_id}")

        days = req.max_days_per_week
        slots = len(req.time_slots)
        subject_labels = {s.id: s.short_name or s.name for s in req.subjects}
        teacher_names = {t.id: t.name for t in req.teachers}

        # [days][slots] -> list of cells; upper and lower week sessions can share one
        grid: List[List[List[Dict]]] = [[[] for _ in range(slots)] for _ in range(days)]
        for item in report.items:
            if item.group_id != group_id:
                continue
            if not (0 <= item.day < days and 0 <= item.time_slot < slots):
                continue
            grid[item.day][item.time_slot].append({
                "subject_id": item.subject_id,
                "subject": subject_labels.get(item.subject_id, item.subject_id),
                "teacher_id": item.teacher_id,
                "teacher": teacher_names.get(item.teacher_id, item.teacher_id),
                "week_type": item.week_type,
                "week_label": week_label(item.week_type),
            })
        return GridResponse(group_id=group_id, days=WEEKDAYS[:days], grid=grid)
