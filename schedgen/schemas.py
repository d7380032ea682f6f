from __future__ import annotations
from typing import List, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

WeekType = Literal["upper", "lower", "both"]


class TimeSlot(BaseModel):
    id: int
    start_time: str
    end_time: str
    duration: int = Field(90, description="Minutes")


class Subject(BaseModel):
    id: str
    name: str
    short_name: str = ""


class Teacher(BaseModel):
    id: str
    name: str
    subjects: List[str] = Field(default_factory=list, description="Ids of subjects the teacher can teach")
    # Checked by the generator, not here, so a bad cap ends up in the report
    weekly_hours: int


class Group(BaseModel):
    id: str
    name: str
    subjects: List[str] = Field(default_factory=list, description="Ids of subjects the group must take")


class SessionAssignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    teacher_id: str
    subject_id: str
    group_id: str
    day: int
    time_slot: int
    week_type: WeekType


class GenerationReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[SessionAssignment] = Field(default_factory=list)
    conflicts: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class GenerateRequest(BaseModel):
    groups: List[Group]
    teachers: List[Teacher]
    subjects: List[Subject]
    time_slots: List[TimeSlot]
    max_days_per_week: int
    balance_load: bool
    prefer_five_days: bool


class GridResponse(BaseModel):
    group_id: str
    days: List[str]
    grid: List[List[List[Dict]]]
