"""
WolfScheduler: course catalog + personal schedule.

The catalog is loaded once from a record source and never changes afterwards.
The schedule holds references to catalog courses (never copies), in the order
they were added.

Record source / sink are plain callables, so any backing store works:

    WolfScheduler("courses.txt")                                 # flat file
    WolfScheduler("unused", reader=lambda _: courses)            # in memory
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional

from wolfscheduler.course_io import read_course_records, write_course_records
from wolfscheduler.errors import (
    DestinationUnwritableError,
    DuplicateEnrollmentError,
    InvalidTitleError,
    SourceUnavailableError,
)
from wolfscheduler.model import Course


DEFAULT_TITLE = "My Schedule"

RecordSource = Callable[[str | Path], Iterable[Course]]
RecordSink = Callable[[str | Path, List[Course]], None]


def _short_rows(courses: List[Course]) -> list[list[str]]:
    """Rows of [name, section, title]. Empty list -> zero rows."""
    return [[c.name, c.section, c.title] for c in courses]


class WolfScheduler:
    """
    Manages a course catalog and one schedule built from it.
    """

    def __init__(
        self,
        source: str | Path,
        reader: RecordSource = read_course_records,
        writer: RecordSink = write_course_records,
    ) -> None:
        self._writer = writer
        self._title = DEFAULT_TITLE
        self._schedule: List[Course] = []

        try:
            self._catalog: List[Course] = list(reader(source))
        except Exception:
            # callers only see the generic message
            raise SourceUnavailableError("Cannot find file.") from None

    # -----------------------------------------------------------------------
    # Read-only views
    # -----------------------------------------------------------------------

    @property
    def catalog(self) -> List[Course]:
        return list(self._catalog)

    @property
    def schedule(self) -> List[Course]:
        return list(self._schedule)

    def get_course_catalog(self) -> list[list[str]]:
        """
        Catalog as a table: one row per course, columns name / section / title.
        """
        return _short_rows(self._catalog)

    def get_scheduled_courses(self) -> list[list[str]]:
        """
        Schedule as a table: one row per course, columns name / section / title.
        """
        return _short_rows(self._schedule)

    def get_full_scheduled_courses(self) -> list[list[str]]:
        """
        Schedule with all display columns:
        name, section, title, credits, instructor id, meeting string.
        """
        return [
            [
                c.name,
                c.section,
                c.title,
                str(c.credits),
                c.instructor_id,
                c.get_meeting_string(),
            ]
            for c in self._schedule
        ]

    def get_course_from_catalog(self, name: Optional[str], section: Optional[str]) -> Optional[Course]:
        """
        Return the catalog course with this name + section, or None.
        """
        for course in self._catalog:
            if course.same_offering(name, section):
                return course
        return None

    # -----------------------------------------------------------------------
    # Schedule changes
    # -----------------------------------------------------------------------

    def add_course_to_schedule(self, name: Optional[str], section: Optional[str]) -> bool:
        """
        Add the catalog course name + section to the schedule.

        Returns False if the catalog has no such course.
        Raises DuplicateEnrollmentError if a course with the same name
        (any section) is already scheduled.
        """
        course = self.get_course_from_catalog(name, section)
        if course is None:
            return False

        # only the name counts: two sections of one course are a duplicate
        for scheduled in self._schedule:
            if scheduled.name == course.name:
                raise DuplicateEnrollmentError(course.name)

        self._schedule.append(course)
        return True

    def remove_course_from_schedule(self, name: Optional[str], section: Optional[str]) -> bool:
        """
        Remove the scheduled course name + section. Returns False if not scheduled.
        """
        for i, course in enumerate(self._schedule):
            if course.same_offering(name, section):
                del self._schedule[i]
                return True
        return False

    def reset_schedule(self) -> None:
        self._schedule = []

    # -----------------------------------------------------------------------
    # Title
    # -----------------------------------------------------------------------

    def get_schedule_title(self) -> str:
        return self._title

    def set_schedule_title(self, title: Optional[str]) -> None:
        # "" is a valid title, only a missing one is rejected
        if title is None:
            raise InvalidTitleError("Title cannot be null.")
        self._title = title

    # -----------------------------------------------------------------------
    # Export
    # -----------------------------------------------------------------------

    def export_schedule(self, destination: str | Path) -> None:
        """
        Write the schedule through the record sink (one record per course).
        """
        try:
            self._writer(destination, list(self._schedule))
        except Exception:
            raise DestinationUnwritableError("The file cannot be saved.") from None
