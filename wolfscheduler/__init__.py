"""
WolfScheduler: validated course catalog + personal course schedule.
"""

from wolfscheduler.model import Course
from wolfscheduler.scheduler import WolfScheduler

__all__ = ["Course", "WolfScheduler"]
