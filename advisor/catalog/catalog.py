"""
advisor/catalog/catalog.py

In-memory course catalog loaded from a comma-separated file.

Each non-blank line is one course:  ID, Name[, PrereqID, PrereqID, ...]
No header row, no quoting. Malformed content never raises; every anomaly is
collected into the LoadResult so the caller decides how to surface it.

A Catalog instance is owned by a single caller (one menu run, one dashboard
session). There is no module-level catalog and no internal locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from advisor.catalog.course_id import canonical_course_id
from advisor.catalog.resolve_catalog_path import resolve_catalog_path
from advisor.config import max_parent_search_depth as default_search_depth

# Characters stripped from lines and fields (space, tab, CR, LF).
_WHITESPACE = " \t\r\n"
_DELIMITER = ","


@dataclass(frozen=True)
class Course:
    course_id: str
    name: str
    prerequisites: tuple[str, ...] = ()


@dataclass
class LoadResult:
    """Outcome of one Catalog.load() call."""

    ok: bool = False
    courses: int = 0
    warnings: list[str] = field(default_factory=list)
    missing_prerequisites: list[str] = field(default_factory=list)
    path: str = ""


class Catalog:
    """Course directory plus its sorted ID index, as of the last good load."""

    def __init__(self, max_parent_search_depth: int | None = None) -> None:
        if max_parent_search_depth is None:
            max_parent_search_depth = default_search_depth()
        self._max_parent_search_depth = max_parent_search_depth
        self._directory: dict[str, Course] = {}
        self._sorted_ids: list[str] = []

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    def load(self, file_name: str) -> LoadResult:
        """Read, validate, and install the catalog stored in file_name.

        The live directory and index are replaced only when the file yields
        at least one valid course. Any failure leaves them untouched.

        Args:
            file_name: Relative or absolute path. Relative names are also
                       searched for in ancestor directories of the CWD.

        Returns:
            LoadResult describing the attempt. ok is False when the file
            cannot be located or opened, or when no line produced a course.
        """
        result = LoadResult()
        if not file_name:
            result.warnings.append("File name is empty.")
            return result

        resolved = resolve_catalog_path(file_name, self._max_parent_search_depth)
        if resolved is None:
            result.warnings.append(f"Unable to locate file: {file_name}")
            result.path = file_name
            return result

        result.path = str(resolved)

        try:
            directory, warnings = _read_directory(resolved)
        except OSError:
            logging.warning("Unable to open catalog file %s", resolved, exc_info=True)
            result.warnings.append(f"Unable to open file: {result.path}")
            return result

        result.warnings.extend(warnings)
        if not directory:
            return result

        missing = _find_missing_prerequisites(directory)
        sorted_ids = sorted(directory)

        # Swap both together so get() and ids() never disagree.
        self._directory, self._sorted_ids = directory, sorted_ids

        result.ok = True
        result.courses = len(directory)
        result.missing_prerequisites = missing
        logging.info("Loaded %d courses from %s", result.courses, result.path)
        return result

    def get(self, course_id: str) -> Course | None:
        """Return the course stored under course_id (exact match), or None."""
        return self._directory.get(course_id)

    def ids(self) -> list[str]:
        """Return a snapshot copy of all course IDs in sorted order."""
        return list(self._sorted_ids)

    def __len__(self) -> int:
        return len(self._directory)

    def __contains__(self, course_id: object) -> bool:
        return course_id in self._directory


# ---------------------------------------------------------------------------
# Internal helpers (importable for unit tests)
# ---------------------------------------------------------------------------

def _split_fields(line: str) -> list[str]:
    """Split a trimmed line on commas and trim each field.

    A delimiter at the very end of the line does not start a new field, so
    "CSCI100," has a single field.
    """
    parts = line.split(_DELIMITER)
    if line.endswith(_DELIMITER):
        parts.pop()
    return [p.strip(_WHITESPACE) for p in parts]


def _parse_line(line: str, line_number: int, warnings: list[str]) -> Course | None:
    """Turn one trimmed, non-blank line into a Course, or None if it is skipped.

    Appends a message to warnings for every anomaly encountered.
    """
    fields = _split_fields(line)
    if len(fields) < 2:
        warnings.append(
            f"Skipping line {line_number}: expected course ID and name."
        )
        return None

    course_id = canonical_course_id(fields[0])
    if course_id is None:
        warnings.append(
            f"Skipping line {line_number}: invalid course ID '{fields[0]}'."
        )
        return None

    prerequisites: list[str] = []
    for raw in fields[2:]:
        if not raw:
            continue
        prereq_id = canonical_course_id(raw)
        if prereq_id is None:
            warnings.append(
                f"Skipping invalid prerequisite '{raw}' for course {course_id}."
            )
            continue
        if prereq_id in prerequisites:
            warnings.append(
                f"Duplicate prerequisite '{prereq_id}' ignored for course {course_id}."
            )
            continue
        prerequisites.append(prereq_id)

    return Course(course_id=course_id, name=fields[1], prerequisites=tuple(prerequisites))


def _read_directory(path: Path) -> tuple[dict[str, Course], list[str]]:
    """Parse every line of path into a fresh course directory.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    directory: dict[str, Course] = {}
    warnings: list[str] = []

    # newline="\n": only LF ends a line; a stray CR is trimmed with the rest.
    with path.open(encoding="utf-8", errors="replace", newline="\n") as fh:
        for line_number, raw_line in enumerate(fh, start=1):
            line = raw_line.strip(_WHITESPACE)
            if not line:
                continue

            course = _parse_line(line, line_number, warnings)
            if course is None:
                continue

            if course.course_id in directory:
                warnings.append(
                    f"Replacing existing course entry for {course.course_id}."
                )
            directory[course.course_id] = course

    return directory, warnings


def _find_missing_prerequisites(directory: dict[str, Course]) -> list[str]:
    """Return sorted, de-duplicated "<prereq> (referenced by <course>)" entries."""
    missing = {
        f"{prereq_id} (referenced by {course.course_id})"
        for course in directory.values()
        for prereq_id in course.prerequisites
        if prereq_id not in directory
    }
    return sorted(missing)
