from __future__ import annotations
import logging
from typing import Dict, List, Set

from schedgen.engine.parity import parity_for
from schedgen.engine.policy import SessionCountPolicy
from schedgen.engine.selector import select_teacher
from schedgen.engine.slots import find_slot
from schedgen.engine.state import Cell, GenerationState, GridShape
from schedgen.schemas import Group, SessionAssignment, Teacher

logger = logging.getLogger(__name__)


def required_sessions(group: Group, policy: SessionCountPolicy) -> Dict[str, int]:
    # dict keeps the group's listed order and drops repeated subject ids
    return {subject_id: policy.sessions_per_week(subject_id) for subject_id in group.subjects}


def plan_group(
    group: Group,
    teachers: List[Teacher],
    policy: SessionCountPolicy,
    shape: GridShape,
    state: GenerationState,
    warnings: List[str],
) -> GenerationState:
    for subject_id, total in required_sessions(group, policy).items():
        teacher = select_teacher(subject_id, teachers, state.loads)
        if teacher is None:
            warnings.append(f"No teacher available for subject {subject_id} in group {group.name}")
            continue

        used: Set[Cell] = set()
        placed = 0
        for _ in range(total):
            cell = find_slot(group.id, teacher.id, state, shape, used)
            if cell is None:
                warnings.append(f"Could not find a free slot for subject {subject_id} in group {group.name}")
                continue
            day, slot = cell
            state.place(SessionAssignment(
                teacher_id=teacher.id,
                subject_id=subject_id,
                group_id=group.id,
                day=day,
                time_slot=slot,
                week_type=parity_for(total, placed),
            ))
            used.add(cell)
            placed += 1
            logger.debug("Placed %s/%s with %s at day %d slot %d", group.id, subject_id, teacher.id, day, slot)
    return state
