"""
advisor/cli/menu.py

Interactive text menu over a Catalog: load a file, list every course, look
one up, or launch the Streamlit dashboard.

All catalog state lives on the Menu instance (one per run). Input and output
streams are injected so the whole session can be driven from tests.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Callable, TextIO

from advisor.catalog.catalog import Catalog, LoadResult
from advisor.catalog.find_course import find_course
from advisor.catalog.list_courses import list_courses
from advisor.cli.theme import Theme, load_theme, render_framed_lines
from advisor.config import DEFAULT_CATALOG_FILE

# Repo root: advisor/cli/ -> advisor/ -> repo root
_REPO_ROOT: Path = Path(__file__).resolve().parents[2]
DASHBOARD_SCRIPT: Path = _REPO_ROOT / "ui" / "advisor_dashboard.py"

_MENU_ITEMS: list[tuple[str, str]] = [
    ("1", "Load the courses from the file"),
    ("2", "Print Computer Science course list in alphanumeric order"),
    ("3", "Find a course by the course number"),
    ("4", "Launch dashboard"),
    ("9", "Exit"),
]


class InputClosed(Exception):
    """Raised internally when stdin reaches end of file."""


class Menu:
    """One interactive session: a catalog, its last load, and the I/O streams."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        theme: Theme | None = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.theme = theme if theme is not None else load_theme()
        self.runner = runner

        self.loaded = False
        self.last_result: LoadResult | None = None
        self.current_path = ""

    # -----------------------------------------------------------------------
    # I/O helpers
    # -----------------------------------------------------------------------

    def _say(self, style: str, text: str) -> None:
        self.stdout.write(self.theme.paint(style, text) + "\n")

    def _prompt(self, text: str) -> str:
        """Print a prompt and return the entered line (trimmed).

        Raises:
            InputClosed: When stdin is exhausted.
        """
        self.stdout.write(self.theme.paint("prompt", text))
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise InputClosed()
        return line.strip()

    def _wait_for_enter(self) -> None:
        self.stdout.write(self.theme.paint("prompt", "Press Enter to continue..."))
        self.stdout.flush()
        self.stdin.readline()

    def _render_menu(self) -> None:
        number = self.theme.color("number")
        text = self.theme.color("text")
        lines = [
            ("Course Advisor Menu", self.theme.color("title") + "Course Advisor Menu"),
            ("", ""),
        ]
        for key, label in _MENU_ITEMS:
            lines.append((f"{key}. {label}", f"{number}{key}. {text}{label}"))
        self.stdout.write(render_framed_lines(lines, self.theme))

    # -----------------------------------------------------------------------
    # Actions
    # -----------------------------------------------------------------------

    def load(self, file_name: str) -> bool:
        """Load file_name into the catalog and print the outcome."""
        result = self.catalog.load(file_name)
        self.last_result = result

        if not result.ok:
            for warning in result.warnings:
                self._say("error", warning)
            self._say("warning", f"No courses were loaded from {file_name}")
            # A previous successful load stays usable.
            return False

        self.loaded = True
        self.current_path = result.path
        self._say("success", f"Loaded {result.courses} courses from {result.path}")
        self._report_load_messages(result)
        self._say("success", "Courses have been loaded!")
        return True

    def _report_load_messages(self, result: LoadResult) -> None:
        for warning in result.warnings:
            self._say("warning", warning)

        if not result.missing_prerequisites:
            self._say("success", "All prerequisites found in the loaded catalog.")
            return
        for missing in result.missing_prerequisites:
            self._say("warning", f"Prerequisite missing from catalog: {missing}")

    def print_all_courses(self) -> None:
        courses = list_courses(self.catalog)
        if not courses:
            self._say("warning", "No courses available to display.")
            return

        text = self.theme.color("text")
        lines = [("Course List", self.theme.color("title") + "Course List"), ("", "")]
        for course in courses:
            plain = f"{course.course_id}, {course.name}"
            lines.append((plain, text + plain))

        self.stdout.write("\n")
        self.stdout.write(render_framed_lines(lines, self.theme))
        self.stdout.write("\n")

    def lookup(self, raw_id: str) -> None:
        lookup = find_course(self.catalog, raw_id)
        if lookup["query"] is None:
            self._say("error", "Course number must start with letters and end with digits.")
            return

        if lookup["was_trimmed"]:
            self._say("info", f"Searching for course: {lookup['query']}")

        if not lookup["found"]:
            self._say("error", f"Course not found: {lookup['query']}")
            return

        course = lookup["course"]
        self.stdout.write(
            f"{self.theme.paint('title', course.course_id)}, {course.name}\n"
        )
        if not lookup["prerequisites"]:
            self._say("info", "Prerequisites: none")
            return

        self._say("border", "Prerequisites:")
        for prereq in lookup["prerequisites"]:
            label = self.theme.paint("number", f"  {prereq['course_id']}")
            if prereq["missing"]:
                detail = self.theme.paint("warning", "(missing from catalog)")
            else:
                detail = prereq["name"]
            self.stdout.write(f"{label} - {detail}\n")

    def launch_dashboard(self) -> None:
        """Run the Streamlit dashboard, handing it the current catalog path."""
        if not DASHBOARD_SCRIPT.exists():
            self._say("error", f"Dashboard script not found: {DASHBOARD_SCRIPT}")
            return

        command = [sys.executable, "-m", "streamlit", "run", str(DASHBOARD_SCRIPT)]
        if self.current_path:
            command += ["--", self.current_path]

        try:
            completed = self.runner(command, check=False)
        except OSError:
            logging.exception("Failed to launch dashboard")
            self._say("error", "Unable to launch the dashboard. See console for details.")
            return

        if completed.returncode != 0:
            self._say("warning", f"Dashboard exited with code {completed.returncode}")

    # -----------------------------------------------------------------------
    # Main loop
    # -----------------------------------------------------------------------

    def run(self) -> None:
        """Show the menu until the user picks 9 or stdin closes."""
        try:
            while True:
                self._render_menu()
                choice = self._prompt("Enter option: ")
                if not self._dispatch(choice):
                    break
        except InputClosed:
            self.stdout.write("\n")
            self._say("info", "Input stream closed. Exiting.")

    def _dispatch(self, choice: str) -> bool:
        """Handle one menu choice. Returns False when the loop should stop."""
        if choice == "1":
            file_name = self._prompt("Enter file name: ")
            if file_name.endswith(","):
                self._say("warning", "Ignoring trailing comma in file name input.")
                file_name = file_name[:-1].strip()
            if not file_name:
                self._say("info", f"Using default catalog file: {DEFAULT_CATALOG_FILE}")
                file_name = DEFAULT_CATALOG_FILE
            self.load(file_name)
        elif choice in ("2", "3"):
            if not self.loaded:
                self._say("warning", "Please load courses first (option 1).")
            elif choice == "2":
                self.print_all_courses()
            else:
                self.lookup(self._prompt("Enter the course number: "))
        elif choice == "4":
            self.launch_dashboard()
        elif choice == "9":
            self._say("success", "Goodbye.")
            return False
        else:
            self._say("error", "Error, please enter option 1, 2, 3, 4, or 9.")

        self._wait_for_enter()
        return True


def run_menu(
    catalog: Catalog | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    theme: Theme | None = None,
) -> Menu:
    """Run an interactive session and return the Menu (handy for inspection)."""
    menu = Menu(catalog=catalog, stdin=stdin, stdout=stdout, theme=theme)
    menu.run()
    return menu
