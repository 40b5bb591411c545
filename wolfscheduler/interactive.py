from __future__ import annotations

from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wolfscheduler.errors import SchedulerError
from wolfscheduler.scheduler import WolfScheduler


CATALOG_COLUMNS = ("Name", "Section", "Title")
FULL_SCHEDULE_COLUMNS = ("Name", "Section", "Title", "Credits", "Instructor", "Meeting")


def build_table(title: str, columns: tuple[str, ...], rows: list[list[str]]) -> Table:
    """
    Render one of the scheduler's tabular projections as a rich Table.
    """
    # course data and titles are plain text, never markup
    table = Table(title=escape(title), box=box.SIMPLE)
    table.add_column("#", justify="right")
    for col in columns:
        table.add_column(col)
    for i, row in enumerate(rows, start=1):
        table.add_row(str(i), *(escape(value) for value in row))
    return table


def parse_offering(text: str) -> Optional[tuple[str, str]]:
    """
    Split "CSC 216:001" (or "CSC 216 001") into (name, section).
    """
    raw = text.strip()
    if ":" in raw:
        name, section = raw.rsplit(":", 1)
    elif " " in raw:
        name, section = raw.rsplit(" ", 1)
    else:
        return None
    name = name.strip().upper()
    section = section.strip()
    if not name or not section:
        return None
    return name, section


class InteractiveSession:
    """
    Menu loop over one WolfScheduler.

    Console and prompt function are injectable, so tests can drive the loop
    with scripted input and capture the output.
    """

    def __init__(
        self,
        scheduler: WolfScheduler,
        console: Optional[Console] = None,
        prompt: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.scheduler = scheduler
        self.console = console or Console()
        self._prompt = prompt or self.console.input

    def _println(self, msg: str = "") -> None:
        self.console.print(msg)

    def run(self) -> None:
        while True:
            n_scheduled = len(self.scheduler.get_scheduled_courses())
            self._println(f"\n=== {escape(self.scheduler.get_schedule_title())} ===")
            self._println(f"Catalog courses: {len(self.scheduler.get_course_catalog())} | Scheduled: {n_scheduled}")

            choice = self._prompt(
                "\n[1] View catalog\n"
                "[2] Add course\n"
                "[3] Remove course\n"
                "[4] View schedule\n"
                "[5] Rename schedule\n"
                "[6] Reset schedule\n"
                "[7] Export schedule\n"
                "[0] Exit\n"
                "Select: "
            ).strip()

            if choice == "0":
                self._println("Bye.")
                return

            if choice == "1":
                self.view_catalog()
            elif choice == "2":
                self.flow_add()
            elif choice == "3":
                self.flow_remove()
            elif choice == "4":
                self.view_schedule()
            elif choice == "5":
                self.flow_rename()
            elif choice == "6":
                self.scheduler.reset_schedule()
                self._println("Schedule reset.")
            elif choice == "7":
                self.flow_export()
            else:
                self._println("Invalid choice.")

    def view_catalog(self) -> None:
        rows = self.scheduler.get_course_catalog()
        if not rows:
            self._println("Catalog is empty.")
            return
        self.console.print(build_table("Course catalog", CATALOG_COLUMNS, rows))

    def view_schedule(self) -> None:
        rows = self.scheduler.get_full_scheduled_courses()
        if not rows:
            self._println("No courses scheduled.")
            return
        self.console.print(build_table(self.scheduler.get_schedule_title(), FULL_SCHEDULE_COLUMNS, rows))

    def flow_add(self) -> None:
        while True:
            text = self._prompt("Course to add, e.g. 'CSC 216:001' (blank = back): ").strip()
            if not text:
                return

            offering = parse_offering(text)
            if offering is None:
                self._println("Please enter name and section, e.g. 'CSC 216:001'.")
                continue

            name, section = offering
            try:
                added = self.scheduler.add_course_to_schedule(name, section)
            except SchedulerError as e:
                self._println(f"[red]{escape(str(e))}[/]")
                continue

            if added:
                self._println(f"Added: {escape(name)}-{escape(section)}")
            else:
                self._println(f"Not in catalog: {escape(name)}-{escape(section)}")

    def flow_remove(self) -> None:
        rows = self.scheduler.get_scheduled_courses()
        if not rows:
            self._println("No courses scheduled.")
            return

        self.console.print(build_table("Remove course", CATALOG_COLUMNS, rows))
        pick = self._prompt("Enter number to remove (or blank to cancel): ").strip()
        if not pick:
            return
        if not pick.isdigit():
            self._println("Not a number.")
            return

        idx = int(pick)
        if not (1 <= idx <= len(rows)):
            self._println("Out of range.")
            return

        name, section, _ = rows[idx - 1]
        self.scheduler.remove_course_from_schedule(name, section)
        self._println(f"Removed: {escape(name)}-{escape(section)}")

    def flow_rename(self) -> None:
        title = self._prompt("New schedule title: ").strip()
        self.scheduler.set_schedule_title(title)
        self._println(f"Title set to: {escape(title)}")

    def flow_export(self) -> None:
        path = self._prompt("Output file path (blank = cancel): ").strip()
        if not path:
            return
        try:
            self.scheduler.export_schedule(path)
        except SchedulerError as e:
            self._println(f"[red]{escape(str(e))}[/]")
            return
        self._println(f"Exported {len(self.scheduler.get_scheduled_courses())} courses to: {escape(path)}")


def run_interactive(scheduler: WolfScheduler) -> None:
    InteractiveSession(scheduler).run()
