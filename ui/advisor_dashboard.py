"""
ui/advisor_dashboard.py

Course Advisor Dashboard. Browse a loaded catalog, search by course number,
and follow prerequisites. Each browser session owns its own Catalog.

Run from the repository root:
    streamlit run ui/advisor_dashboard.py
    streamlit run ui/advisor_dashboard.py -- "data/CS 300 ABCU_Advising_Program_Input.csv"
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure repo root is on sys.path so advisor.* imports work regardless of
# where Streamlit is launched from.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from advisor.catalog.catalog import Catalog                        # noqa: E402
from advisor.catalog.course_id import normalize_course_id_input    # noqa: E402
from advisor.catalog.find_course import find_course                # noqa: E402
from advisor.config import DEFAULT_CATALOG_FILE                    # noqa: E402
from ui.theme import apply_advisor_theme, status_badge             # noqa: E402

EM_DASH = "—"

# Catalog path handed over by the text menu (after "--"), if any.
_INITIAL_PATH = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CATALOG_FILE

# ---------------------------------------------------------------------------
# Page config: must be the first Streamlit call in the file.
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Course Advisor", page_icon="📚", layout="wide")
apply_advisor_theme("Course Advisor", "Catalog browser & prerequisite lookup")

# ---------------------------------------------------------------------------
# Session state initialisation
# ---------------------------------------------------------------------------
if "advisor_catalog" not in st.session_state:
    st.session_state["advisor_catalog"] = Catalog()
if "advisor_last_result" not in st.session_state:
    st.session_state["advisor_last_result"] = None   # LoadResult of the most recent attempt
if "advisor_current_path" not in st.session_state:
    st.session_state["advisor_current_path"] = ""    # resolved path of the last good load
if "advisor_selected" not in st.session_state:
    st.session_state["advisor_selected"] = None      # course ID shown in the detail pane
if "advisor_flash" not in st.session_state:
    st.session_state["advisor_flash"] = None         # (level, message) or None
if "advisor_path_input" not in st.session_state:
    st.session_state["advisor_path_input"] = _INITIAL_PATH

catalog: Catalog = st.session_state["advisor_catalog"]


# ---------------------------------------------------------------------------
# Callbacks: run before the next render, so widget keys may be set here.
# ---------------------------------------------------------------------------
def _load(path: str) -> None:
    """Load path into the session catalog and record a flash message."""
    try:
        result = catalog.load(path.strip())
    except Exception:
        logging.exception("Unexpected error loading catalog %s", path)
        st.session_state["advisor_flash"] = (
            "error", "An unexpected error occurred. See console for details."
        )
        return

    st.session_state["advisor_last_result"] = result
    if not result.ok:
        st.session_state["advisor_flash"] = ("error", f"Unable to load catalog: {path}")
        return

    st.session_state["advisor_current_path"] = result.path
    st.session_state["advisor_flash"] = (
        "success", f"Loaded {result.courses} courses from {result.path}"
    )
    ids = catalog.ids()
    if st.session_state["advisor_selected"] not in ids:
        st.session_state["advisor_selected"] = ids[0]


def _on_load_clicked() -> None:
    _load(st.session_state["advisor_path_input"])


def _on_reload_clicked() -> None:
    current = st.session_state["advisor_current_path"]
    if not current:
        st.session_state["advisor_flash"] = ("info", "Load a catalog first.")
        return
    _load(current)


def _select(course_id: str) -> None:
    st.session_state["advisor_selected"] = course_id


def _on_search() -> None:
    raw = st.session_state["advisor_search"]
    if not raw.strip():
        return
    normalized = normalize_course_id_input(raw)
    if normalized is None:
        st.session_state["advisor_flash"] = (
            "error", "Course number must start with letters and end with digits."
        )
        return
    course_id = normalized["course_id"]
    if course_id not in catalog:
        st.session_state["advisor_flash"] = ("warning", f"Course not found: {course_id}")
        return
    _select(course_id)


# Auto-load the initial catalog once per session.
if st.session_state["advisor_last_result"] is None:
    _load(_INITIAL_PATH)

# Keep the selection valid for the list widget below.
_ids = catalog.ids()
if _ids and st.session_state["advisor_selected"] not in _ids:
    st.session_state["advisor_selected"] = _ids[0]

# ---------------------------------------------------------------------------
# Sidebar: catalog file controls
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("Catalog")
    st.text_input("Catalog file", key="advisor_path_input")
    col_load, col_reload = st.columns(2)
    col_load.button("Load", type="primary", on_click=_on_load_clicked, use_container_width=True)
    col_reload.button("Reload", on_click=_on_reload_clicked, use_container_width=True)

    st.divider()
    st.metric("Courses loaded", len(catalog))
    st.caption(f"**Source:** {st.session_state['advisor_current_path'] or EM_DASH}")

# Flash message: stored by callbacks so it survives the rerun.
if st.session_state["advisor_flash"] is not None:
    level, msg = st.session_state["advisor_flash"]
    st.session_state["advisor_flash"] = None
    if level == "success":
        st.success(msg)
    elif level == "warning":
        st.warning(msg)
    elif level == "info":
        st.info(msg)
    else:
        st.error(msg)

# ---------------------------------------------------------------------------
# Search row
# ---------------------------------------------------------------------------
st.text_input(
    "Find course",
    key="advisor_search",
    placeholder="e.g., CSCI200",
    on_change=_on_search,
)

if not _ids:
    st.info("No courses loaded. Choose a catalog file in the sidebar and press Load.")
else:
    col_list, col_detail = st.columns([1, 2])

    # -- Course list ---------------------------------------------------------
    with col_list:
        st.subheader("Courses")
        st.radio(
            "Courses",
            options=_ids,
            key="advisor_selected",
            format_func=lambda cid: f"{cid}, {catalog.get(cid).name}",
            label_visibility="collapsed",
        )

    # -- Detail pane ---------------------------------------------------------
    with col_detail:
        lookup = None
        try:
            lookup = find_course(catalog, st.session_state["advisor_selected"] or "")
        except Exception:
            logging.exception("Unexpected error in course lookup")
            st.error("An unexpected error occurred. See console for details.")

        if lookup is not None and not lookup["found"]:
            st.subheader("Course not found.")
        elif lookup is not None:
            course = lookup["course"]
            st.subheader(f"{course.course_id} {EM_DASH} {course.name}")
            st.markdown("**Prerequisites**")
            if not lookup["prerequisites"]:
                st.write("Prerequisites: none")
            for prereq in lookup["prerequisites"]:
                col_id, col_name = st.columns([1, 3])
                if prereq["missing"]:
                    col_id.button(prereq["course_id"], key=f"prereq_{prereq['course_id']}", disabled=True)
                    col_name.markdown(
                        status_badge("missing from catalog", ok=False),
                        unsafe_allow_html=True,
                    )
                else:
                    col_id.button(
                        prereq["course_id"],
                        key=f"prereq_{prereq['course_id']}",
                        on_click=_select,
                        args=(prereq["course_id"],),
                    )
                    col_name.markdown(
                        f"{prereq['name']} {status_badge('found', ok=True)}",
                        unsafe_allow_html=True,
                    )

# ---------------------------------------------------------------------------
# Load report: warnings and dangling prerequisites from the last attempt
# ---------------------------------------------------------------------------
result = st.session_state["advisor_last_result"]
if result is not None:
    st.divider()
    with st.expander(f"Catalog Warnings ({len(result.warnings)})", expanded=not result.ok):
        if not result.warnings:
            st.write("No warnings.")
        for warning in result.warnings:
            st.warning(warning)

    with st.expander(f"Missing Prerequisites ({len(result.missing_prerequisites)})"):
        if not result.missing_prerequisites:
            st.success("All prerequisites were found in the catalog.")
        else:
            st.write("The following prerequisites reference missing courses:")
            for missing in result.missing_prerequisites:
                st.write(f"- {missing}")
