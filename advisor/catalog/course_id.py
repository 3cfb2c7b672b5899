"""
advisor/catalog/course_id.py

Course ID grammar: one or more letters immediately followed by one or more
digits (e.g. "CSCI200"). Applies to primary IDs and prerequisite IDs alike.

No file I/O. Pure string helpers only.
"""

from __future__ import annotations

import re

# ASCII only. IDs are matched after upper-casing, so lower case never appears.
_COURSE_ID_RE = re.compile(r"[A-Z]+[0-9]+")

# Leading ASCII letters, then digits; everything after is discarded.
_COURSE_ID_PREFIX_RE = re.compile(r"[A-Za-z]*[0-9]*")


def is_valid_course_id(course_id: str) -> bool:
    """Return True if course_id is letters followed by digits and nothing else.

    Expects an already-normalized (upper-case) value.

    Args:
        course_id: Candidate identifier.

    Returns:
        True for values such as "CSCI200"; False for "", "CSCI", "200",
        "1ABC", "CS1A2", "CSCI-200", or lower-case input.
    """
    return _COURSE_ID_RE.fullmatch(course_id) is not None


def canonical_course_id(field: str) -> str | None:
    """Upper-case a trimmed catalog field and validate it as a course ID.

    Non-ASCII fields are rejected before case mapping, so "ß100" or a
    dotless "ı" can never fold into a valid ASCII ID.

    Returns:
        The upper-case ID, or None if field is not a valid course ID.
    """
    if not field.isascii():
        return None
    course_id = field.upper()
    return course_id if is_valid_course_id(course_id) else None


def normalize_course_id_input(raw: str) -> dict | None:
    """Clean up a course number typed by a user before an exact lookup.

    Trims whitespace, upper-cases, drops one trailing comma (handy when the
    value was pasted from CSV output), then keeps the leading letters and
    digits and discards the rest.

    Args:
        raw: Text as typed, e.g. "  csci200, " or "CSCI200 Data Structures".

    Returns:
        None when no valid ID can be recovered; otherwise a dict:
            course_id   (str)  -- the normalized ID to look up
            was_trimmed (bool) -- True when anything beyond case/whitespace
                                  had to be removed
    """
    cleaned = raw.strip()
    if cleaned.endswith(","):
        cleaned = cleaned[:-1].strip()
    if not cleaned:
        return None

    # Match before upper-casing; Unicode case mapping can produce ASCII.
    prefix = _COURSE_ID_PREFIX_RE.match(cleaned).group(0)
    course_id = prefix.upper()
    if not is_valid_course_id(course_id):
        return None

    return {"course_id": course_id, "was_trimmed": len(prefix) != len(cleaned)}
