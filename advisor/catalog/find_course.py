"""
advisor/catalog/find_course.py

Looks up one course by ID and resolves each prerequisite to its title.

Read-only: never mutates the catalog. Shared by the text menu and the
dashboard so both report lookups the same way.
"""

from __future__ import annotations

from advisor.catalog.catalog import Catalog
from advisor.catalog.course_id import normalize_course_id_input


def find_course(catalog: Catalog, raw_id: str) -> dict:
    """Normalize raw_id, look it up, and resolve prerequisite titles.

    Args:
        catalog: Catalog to query.
        raw_id:  Course number as typed (case and surrounding junk tolerated).

    Returns:
        dict with keys:
            query         (str | None)  -- normalized ID, None if raw_id holds no valid ID
            was_trimmed   (bool)        -- True if characters were dropped from raw_id
            found         (bool)
            course        (Course | None)
            prerequisites (list[dict])  -- one per prerequisite, in course order:
                                           {"course_id": str, "name": str | None, "missing": bool}
    """
    normalized = normalize_course_id_input(raw_id)
    if normalized is None:
        return {
            "query": None,
            "was_trimmed": False,
            "found": False,
            "course": None,
            "prerequisites": [],
        }

    query = normalized["course_id"]
    course = catalog.get(query)

    prerequisites: list[dict] = []
    if course is not None:
        for prereq_id in course.prerequisites:
            prereq = catalog.get(prereq_id)
            prerequisites.append({
                "course_id": prereq_id,
                "name": prereq.name if prereq is not None else None,
                "missing": prereq is None,
            })

    return {
        "query": query,
        "was_trimmed": normalized["was_trimmed"],
        "found": course is not None,
        "course": course,
        "prerequisites": prerequisites,
    }
