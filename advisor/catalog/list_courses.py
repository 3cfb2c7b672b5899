"""
advisor/catalog/list_courses.py

Returns every loaded course in alphanumeric ID order, using the catalog's
prebuilt sorted index (no re-sort).
"""

from advisor.catalog.catalog import Catalog, Course


def list_courses(catalog: Catalog) -> list[Course]:
    """Return all courses in the order of catalog.ids(). Empty if nothing is loaded."""
    courses = []
    for course_id in catalog.ids():
        course = catalog.get(course_id)
        if course is not None:
            courses.append(course)
    return courses
