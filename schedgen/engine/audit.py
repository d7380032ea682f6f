from __future__ import annotations
from typing import Dict, List, Tuple

from schedgen.schemas import Group, SessionAssignment, Teacher


def balance_load(items: List[SessionAssignment], teachers: List[Teacher]) -> List[str]:
    counts: Dict[str, int] = {}
    for item in items:
        counts[item.teacher_id] = counts.get(item.teacher_id, 0) + 1

    warnings: List[str] = []
    for teacher in teachers:
        count = counts.get(teacher.id, 0)
        if count > teacher.weekly_hours:
            warnings.append(f"Teacher {teacher.name} exceeds weekly load: {count}/{teacher.weekly_hours}")
    return warnings


def audit_conflicts(items: List[SessionAssignment], teachers: List[Teacher], groups: List[Group]) -> List[str]:
    """Report any teacher booked for two different groups in the same cell.

    Placement already refuses such cells, so on a normal run this returns an
    empty list.
    """
    teacher_names = {t.id: t.name for t in teachers}
    group_names = {g.id: g.name for g in groups}

    by_cell: Dict[Tuple[int, int], Dict[str, List[str]]] = {}
    for item in items:
        teacher_groups = by_cell.setdefault((item.day, item.time_slot), {})
        group_ids = teacher_groups.setdefault(item.teacher_id, [])
        if item.group_id not in group_ids:
            group_ids.append(item.group_id)

    conflicts: List[str] = []
    for (day, slot), teacher_groups in by_cell.items():
        for teacher_id, group_ids in teacher_groups.items():
            if len(group_ids) > 1:
                names = ", ".join(group_names.get(gid, gid) for gid in group_ids)
                conflicts.append(
                    f"Teacher {teacher_names.get(teacher_id, teacher_id)} is double-booked "
                    f"on day {day}, slot {slot}: groups {names}"
                )
    return conflicts
