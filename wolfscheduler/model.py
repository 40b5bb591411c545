"""
Central data model: the Course entity.

A Course is one course offering as listed in the catalog, e.g.

    CSC 216,Software Development Fundamentals,001,3,sesmith5,MW,1330,1445

Design rationale:
- Course objects are created once (when the catalog is loaded) and never change
- every field is validated on construction, in a fixed order, and the first
  invalid field aborts construction (no half-built Course ever exists)
- equality covers all fields, but the scheduler identifies an offering by
  name + section only
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from wolfscheduler.errors import CourseValidationError


# ---------------------------------------------------------------------------
# Validation bounds
# ---------------------------------------------------------------------------

MIN_NAME_LENGTH = 5
MAX_NAME_LENGTH = 8
MIN_LETTER_COUNT = 1
MAX_LETTER_COUNT = 4
DIGIT_COUNT = 3
SECTION_LENGTH = 3
MIN_CREDITS = 1
MAX_CREDITS = 5
UPPER_HOUR = 24
UPPER_MINUTE = 60

# "A" is the short form used in course record files
ARRANGED = "Arranged"
ARRANGED_CODES = (ARRANGED, "A")

MEETING_DAY_LETTERS = "MTWHF"


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------


def _is_int(value: object) -> bool:
    # bool is a subclass of int, but True is not a credit count
    return isinstance(value, int) and not isinstance(value, bool)


def _non_empty_str(value: object) -> bool:
    return isinstance(value, str) and len(value) > 0


def valid_name(name: object) -> bool:
    """
    Check the course name pattern: 1-4 letters, one space, exactly 3 digits.

    Examples: "E 115", "CSC 216", "HESF 101"
    """
    if not _non_empty_str(name):
        return False

    if not (MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH):
        return False

    letters = 0
    digits = 0
    seen_space = False
    for ch in name:
        if not seen_space:
            if ch.isalpha():
                letters += 1
            elif ch == " ":
                seen_space = True
            else:
                return False
        elif ch.isdecimal():
            digits += 1
        else:
            return False

    return MIN_LETTER_COUNT <= letters <= MAX_LETTER_COUNT and digits == DIGIT_COUNT


def valid_section(section: object) -> bool:
    if not isinstance(section, str) or len(section) != SECTION_LENGTH:
        return False
    return all(ch.isdecimal() for ch in section)


def valid_credits(credits: object) -> bool:
    return _is_int(credits) and MIN_CREDITS <= credits <= MAX_CREDITS


def _valid_clock_time(time: int) -> bool:
    hour = time // 100
    minute = time % 100
    return 0 <= hour < UPPER_HOUR and 0 <= minute < UPPER_MINUTE


def valid_meeting(meeting_days: object, start_time: object, end_time: object) -> bool:
    """
    Check meeting days together with start/end time.

    Arranged courses must have both times set to 0.
    Otherwise every day letter must come from MTWHF (no repeats),
    start <= end, and both times must be real HHMM clock times.
    """
    if not _non_empty_str(meeting_days):
        return False
    if not (_is_int(start_time) and _is_int(end_time)):
        return False

    if meeting_days in ARRANGED_CODES:
        return start_time == 0 and end_time == 0

    seen: set[str] = set()
    for day in meeting_days:
        if day not in MEETING_DAY_LETTERS or day in seen:
            return False
        seen.add(day)

    if start_time > end_time:
        return False

    return _valid_clock_time(start_time) and _valid_clock_time(end_time)


def format_time(time: int) -> str:
    """
    Render an HHMM 24h time as 12h clock text.

    0 -> "12:00AM", 100 -> "1:00AM", 1200 -> "12:00PM", 1430 -> "2:30PM"
    """
    hour = time // 100
    minute = time % 100

    suffix = "PM" if hour >= 12 else "AM"
    if hour > 12:
        hour -= 12
    elif hour == 0:
        hour = 12

    return f"{hour}:{minute:02d}{suffix}"


# ---------------------------------------------------------------------------
# Course
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Course:
    """
    Represents one course offering from the catalog.

    Arranged courses can be created without times:

        Course("CSC 216", "Software Development", "601", 3, "jctetter", "Arranged")
    """

    name: str
    title: str
    section: str
    credits: int
    instructor_id: str
    meeting_days: str
    start_time: int = 0
    end_time: int = 0

    def __post_init__(self) -> None:
        # Order matters: the first failing check wins
        for field, check, message in _CHECKS:
            if not check(self):
                raise CourseValidationError(field, message)

    @property
    def is_arranged(self) -> bool:
        return self.meeting_days in ARRANGED_CODES

    def same_offering(self, name: Optional[str], section: Optional[str]) -> bool:
        """True if this course is the offering identified by name + section."""
        return self.name == name and self.section == section

    def get_meeting_string(self) -> str:
        """
        Meeting days and times for display, e.g. "MW 1:30PM-2:45PM".
        """
        if self.is_arranged:
            return ARRANGED
        return f"{self.meeting_days} {format_time(self.start_time)}-{format_time(self.end_time)}"

    def to_record(self) -> str:
        """
        Comma separated record line (same format as course record files).

        Times are only written for courses that are not Arranged.
        """
        fields: List[str] = [
            self.name,
            self.title,
            self.section,
            str(self.credits),
            self.instructor_id,
            self.meeting_days,
        ]
        if not self.is_arranged:
            fields += [str(self.start_time), str(self.end_time)]
        return ",".join(fields)

    def __str__(self) -> str:
        return self.to_record()


_CHECKS: Tuple[Tuple[str, Callable[[Course], bool], str], ...] = (
    ("name", lambda c: valid_name(c.name), "Invalid course name."),
    ("title", lambda c: _non_empty_str(c.title), "Invalid title."),
    ("section", lambda c: valid_section(c.section), "Invalid section."),
    ("credits", lambda c: valid_credits(c.credits), "Invalid credits."),
    ("instructor_id", lambda c: _non_empty_str(c.instructor_id), "Invalid instructor id."),
    (
        "meeting_days",
        lambda c: valid_meeting(c.meeting_days, c.start_time, c.end_time),
        "Invalid meeting days and times.",
    ),
)
