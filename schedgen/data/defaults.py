from __future__ import annotations

from schedgen.schemas import GenerateRequest, Group, Subject, Teacher, TimeSlot

# Six 90-minute sessions per day
TIME_SLOTS = [
    TimeSlot(id=1, start_time="08:30", end_time="10:00", duration=90),
    TimeSlot(id=2, start_time="10:15", end_time="11:45", duration=90),
    TimeSlot(id=3, start_time="12:00", end_time="13:30", duration=90),
    TimeSlot(id=4, start_time="14:15", end_time="15:45", duration=90),
    TimeSlot(id=5, start_time="16:00", end_time="17:30", duration=90),
    TimeSlot(id=6, start_time="17:45", end_time="19:15", duration=90),
]

SUBJECTS = [
    Subject(id="math", name="Mathematics", short_name="Math"),
    Subject(id="physics", name="Physics", short_name="Phys"),
    Subject(id="chemistry", name="Chemistry", short_name="Chem"),
    Subject(id="biology", name="Biology", short_name="Bio"),
    Subject(id="history", name="History", short_name="Hist"),
    Subject(id="literature", name="Literature", short_name="Lit"),
    Subject(id="english", name="English", short_name="Engl"),
    Subject(id="geometry", name="Geometry", short_name="Geom"),
    Subject(id="informatics", name="Informatics", short_name="Inf"),
    Subject(id="pe", name="Physical Education", short_name="PE"),
]

TEACHERS = [
    Teacher(id="ivanov", name="Ivanov I.I.", subjects=["math", "geometry", "physics"], weekly_hours=18),
    Teacher(id="petrov", name="Petrov P.P.", subjects=["chemistry", "biology"], weekly_hours=16),
    Teacher(id="sidorov", name="Sidorov S.S.", subjects=["history", "literature"], weekly_hours=20),
    Teacher(id="kozlov", name="Kozlov K.K.", subjects=["english"], weekly_hours=24),
    Teacher(id="smirnov", name="Smirnov A.A.", subjects=["informatics"], weekly_hours=14),
    Teacher(id="volkov", name="Volkov V.V.", subjects=["pe"], weekly_hours=22),
]

GROUPS = [
    Group(id="10a", name="10-A", subjects=[
        "math", "physics", "chemistry", "biology", "history",
        "literature", "english", "geometry", "informatics", "pe",
    ]),
    Group(id="10b", name="10-B", subjects=[
        "math", "physics", "chemistry", "history", "literature",
        "english", "geometry", "informatics", "pe",
    ]),
    Group(id="11a", name="11-A", subjects=[
        "math", "physics", "chemistry", "biology", "history",
        "english", "geometry", "informatics",
    ]),
    Group(id="11b", name="11-B", subjects=[
        "math", "chemistry", "biology", "history", "literature",
        "english", "geometry", "pe",
    ]),
]

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

DEFAULT_SETTINGS = {
    "max_days_per_week": 6,
    "balance_load": True,
    "prefer_five_days": True,
}


def default_request() -> GenerateRequest:
    return GenerateRequest(
        groups=GROUPS,
        teachers=TEACHERS,
        subjects=SUBJECTS,
        time_slots=TIME_SLOTS,
        max_days_per_week=DEFAULT_SETTINGS["max_days_per_week"],
        balance_load=DEFAULT_SETTINGS["balance_load"],
        prefer_five_days=DEFAULT_SETTINGS["prefer_five_days"],
    )
