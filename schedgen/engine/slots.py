from __future__ import annotations
import logging
from typing import Iterable, Optional, Set

from schedgen.engine.state import SIXTH_DAY, Cell, GenerationState, GridShape

logger = logging.getLogger(__name__)


def _first_free(
    cells: Iterable[Cell],
    group_id: str,
    teacher_id: str,
    state: GenerationState,
    used: Set[Cell],
) -> Optional[Cell]:
    for cell in cells:
        if cell in used:
            continue
        if state.is_free(cell, group_id, teacher_id):
            return cell
    return None


def find_slot(
    group_id: str,
    teacher_id: str,
    state: GenerationState,
    shape: GridShape,
    used: Set[Cell],
) -> Optional[Cell]:
    """Return the first free (day, slot) cell for this group and teacher.

    Cells are scanned slot by slot and, within a slot, day by day so that a
    subject's sessions spread across the week before stacking up in the same
    day. ``used`` holds the cells already taken by the subject being placed.
    When the five-day search fails and a sixth day is allowed, that day is
    tried on its own.
    """
    main_pass = (
        (day, slot)
        for slot in range(shape.slot_count)
        for day in range(shape.effective_days)
    )
    cell = _first_free(main_pass, group_id, teacher_id, state, used)
    if cell is not None:
        return cell

    if shape.sixth_day_fallback:
        logger.debug("No cell in %d days for group %s, trying the sixth day", shape.effective_days, group_id)
        fallback = ((SIXTH_DAY, slot) for slot in range(shape.slot_count))
        return _first_free(fallback, group_id, teacher_id, state, used)
    return None
