"""
Exceptions raised by the course model and the scheduler.

All of them derive from ValueError: every failure here is caused by an
illegal argument (bad field value, bad title, unreadable source, ...).

"Not found", "not added" and "not removed" are NOT errors.
The scheduler reports them as None / False.
"""

from __future__ import annotations


class SchedulerError(ValueError):
    """Base class for all WolfScheduler errors."""


class CourseValidationError(SchedulerError):
    """
    A Course field failed validation during construction.

    `field` names the failing attribute (e.g. "name", "credits").
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class DuplicateEnrollmentError(SchedulerError):
    """A course with the same name is already in the schedule."""

    def __init__(self, name: str) -> None:
        super().__init__(f"You are already enrolled in {name}")
        self.name = name


class InvalidTitleError(SchedulerError):
    """The schedule title is missing."""


class SourceUnavailableError(SchedulerError):
    """The course catalog could not be read."""


class DestinationUnwritableError(SchedulerError):
    """The schedule could not be written."""
