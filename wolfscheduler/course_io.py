"""
Course record files (flat text, one course per line).

This module is the default record source / record sink of the scheduler:

    read_course_records(path)            -> list[Course]   (catalog import)
    write_course_records(path, courses)  -> None           (schedule export)

Record format:

    CSC 116,Intro to Programming - Java,001,3,jdyoung2,MW,910,1100
    CSC 216,Software Development Fundamentals,601,3,jctetter,A

Arranged courses ("A" / "Arranged") have no start/end time fields.

Rules:
- malformed records are skipped, they never abort the import
- a record repeating the name + section of an earlier record is skipped
- an unreadable file raises OSError (the scheduler decides what to do with it)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from wolfscheduler.model import ARRANGED_CODES, Course


ARRANGED_FIELD_COUNT = 6
TIMED_FIELD_COUNT = 8


def parse_course_record(line: str) -> Course:
    """
    Parse exactly one record line into a Course.

    Raises ValueError for malformed lines (CourseValidationError is a
    ValueError too, so callers only need one except clause).
    """
    parts = line.strip().split(",")

    if len(parts) < ARRANGED_FIELD_COUNT:
        raise ValueError(f"Too few fields: {line!r}")

    name, title, section, credits_s, instructor_id, meeting_days = parts[:ARRANGED_FIELD_COUNT]
    credits = int(credits_s)

    if meeting_days in ARRANGED_CODES:
        # Arranged records must not carry times
        if len(parts) != ARRANGED_FIELD_COUNT:
            raise ValueError(f"Arranged course with extra fields: {line!r}")
        return Course(name, title, section, credits, instructor_id, meeting_days)

    if len(parts) != TIMED_FIELD_COUNT:
        raise ValueError(f"Expected {TIMED_FIELD_COUNT} fields: {line!r}")

    start_time = int(parts[6])
    end_time = int(parts[7])
    return Course(name, title, section, credits, instructor_id, meeting_days, start_time, end_time)


def read_course_records(path: str | Path) -> List[Course]:
    """
    Read all valid, non-duplicate courses from a record file (in file order).
    """
    text = Path(path).read_text(encoding="utf-8")

    courses: List[Course] = []
    for line in text.splitlines():
        if not line.strip():
            continue

        try:
            course = parse_course_record(line)
        except ValueError:
            continue

        # first record of an offering wins
        if any(c.same_offering(course.name, course.section) for c in courses):
            continue

        courses.append(course)

    return courses


def write_course_records(path: str | Path, courses: Iterable[Course]) -> None:
    """
    Write one record line per course.

    Creates parent directories if needed.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines = [course.to_record() for course in courses]
    out.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
