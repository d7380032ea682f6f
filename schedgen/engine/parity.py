from __future__ import annotations

from schedgen.schemas import WeekType

WEEK_LABELS = {"upper": "U", "lower": "L", "both": "U/L"}


def parity_for(total_sessions: int, session_index: int) -> WeekType:
    # Subjects with 3+ sessions recur every week and are never split across
    # upper/lower weeks. Known limitation: "3 upper, 2 lower" is not expressible.
    if total_sessions >= 3:
        return "both"
    if session_index % 2 == 0:
        return "upper"
    return "lower"


def week_label(week_type: WeekType) -> str:
    return WEEK_LABELS[week_type]
