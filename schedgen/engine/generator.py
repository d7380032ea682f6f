from __future__ import annotations
import logging
from typing import List, Optional

from schedgen.engine.audit import audit_conflicts, balance_load
from schedgen.engine.planner import plan_group
from schedgen.engine.policy import SessionCountPolicy, default_policy
from schedgen.engine.state import GenerationState, GridShape
from schedgen.schemas import GenerateRequest, GenerationReport, Group, Subject, Teacher, TimeSlot

logger = logging.getLogger(__name__)

ALLOWED_DAYS_PER_WEEK = (5, 6)


class ScheduleValidationError(ValueError):
    pass


def validate_input(
    groups: List[Group],
    teachers: List[Teacher],
    subjects: List[Subject],
    time_slots: List[TimeSlot],
    max_days_per_week: int,
) -> None:
    if not teachers:
        raise ScheduleValidationError("no teachers")
    if not groups:
        raise ScheduleValidationError("no groups")
    if not subjects:
        raise ScheduleValidationError("no subjects")
    if not time_slots:
        raise ScheduleValidationError("no time slots")
    for teacher in teachers:
        if teacher.weekly_hours <= 0:
            raise ScheduleValidationError(f"invalid weekly load for teacher {teacher.name}")
    if max_days_per_week not in ALLOWED_DAYS_PER_WEEK:
        raise ScheduleValidationError(f"max days per week must be 5 or 6, got {max_days_per_week}")


class ScheduleGenerator:
    """Greedy, single-pass session placement.

    Groups are planned in the order given and each one sees the cells taken by
    the groups before it, so reordering ``groups`` can change who gets scarce
    slots. Every call to :meth:`run` starts from a fresh state.
    """

    def __init__(self, policy: Optional[SessionCountPolicy] = None) -> None:
        self.policy = policy if policy is not None else default_policy()

    def run(self, req: GenerateRequest) -> GenerationReport:
        try:
            validate_input(req.groups, req.teachers, req.subjects, req.time_slots, req.max_days_per_week)
        except ScheduleValidationError as e:
            logger.warning("Schedule input rejected: %s", e)
            return GenerationReport(conflicts=[f"Generation failed: {e}"])

        shape = GridShape(
            slot_count=len(req.time_slots),
            max_days_per_week=req.max_days_per_week,
            prefer_five_days=req.prefer_five_days,
        )
        logger.info(
            "Generating schedule for %d groups, %d teachers, %d slots x %d days",
            len(req.groups), len(req.teachers), shape.slot_count, shape.effective_days,
        )

        state = GenerationState()
        warnings: List[str] = []
        for group in req.groups:
            state = plan_group(group, req.teachers, self.policy, shape, state, warnings)

        if req.balance_load:
            warnings.extend(balance_load(state.items, req.teachers))
        conflicts = audit_conflicts(state.items, req.teachers, req.groups)

        logger.info(
            "Placed %d sessions with %d warnings and %d conflicts",
            len(state.items), len(warnings), len(conflicts),
        )
        return GenerationReport(items=list(state.items), conflicts=conflicts, warnings=warnings)


def generate(
    groups: List[Group],
    teachers: List[Teacher],
    subjects: List[Subject],
    time_slots: List[TimeSlot],
    max_days_per_week: int,
    balance_load: bool,
    prefer_five_days: bool,
    policy: Optional[SessionCountPolicy] = None,
) -> GenerationReport:
    req = GenerateRequest(
        groups=groups,
        teachers=teachers,
        subjects=subjects,
        time_slots=time_slots,
        max_days_per_week=max_days_per_week,
        balance_load=balance_load,
        prefer_five_days=prefer_five_days,
    )
    return ScheduleGenerator(policy).run(req)
