"""
ui/theme.py

Course Advisor shared theme helper.
Call apply_advisor_theme() immediately after st.set_page_config() in any
dashboard page to inject styling and render the consistent header bar.

Palette tokens:
    accent magenta: #B4479A
    dark navy:      #14182B
    light gray:     #EEEEF2
    dark gray:      #5B5A69
    ok green:       #2E8B57
    warn amber:     #C98A12
"""

from __future__ import annotations

import streamlit as st

# ---------------------------------------------------------------------------
# Palette tokens
# ---------------------------------------------------------------------------
_ACCENT     = "#B4479A"
_DARK_NAVY  = "#14182B"
_LIGHT_GRAY = "#EEEEF2"
_DARK_GRAY  = "#5B5A69"
OK_GREEN    = "#2E8B57"
WARN_AMBER  = "#C98A12"

# ---------------------------------------------------------------------------
# CSS: injected once per page render.
# Double braces {{ }} produce literal CSS braces in the f-string.
# ---------------------------------------------------------------------------
_CSS = f"""
<style>
.block-container {{
    padding-top: 0.75rem !important;
    padding-bottom: 2rem !important;
}}

#MainMenu {{ visibility: hidden; }}
footer {{ visibility: hidden; }}

section[data-testid="stSidebar"] > div:first-child {{
    background-color: {_LIGHT_GRAY};
    padding-top: 0.75rem;
}}

div[data-testid="stCaptionContainer"] {{
    color: {_DARK_GRAY};
}}

/* Course list: tighter radio rows */
div[data-testid="stRadio"] > div {{
    gap: 0.15rem;
}}

.stButton > button[kind="primary"] {{
    background-color: {_ACCENT} !important;
    color: white !important;
    border: none !important;
    border-radius: 10px !important;
}}
.stButton > button[kind="primary"]:hover {{
    background-color: #96397f !important;
}}
.stButton > button {{
    border-radius: 10px !important;
}}

div[data-testid="metric-container"] {{
    border: 1px solid #E4E4E4;
    border-radius: 12px;
    padding: 0.55rem 0.85rem;
    background-color: white;
}}

hr {{
    border: none !important;
    border-top: 1px solid #E7E7E7 !important;
    margin: 1rem 0 !important;
}}
</style>
"""


def apply_advisor_theme(
    title: str,
    subtitle: str | None = None,
) -> None:
    """Inject the dashboard CSS and render the shared top bar.

    Must be called immediately after st.set_page_config().
    """
    st.markdown(_CSS, unsafe_allow_html=True)

    subtitle_html = (
        f"<div style='color:{_LIGHT_GRAY}; font-size:0.85rem; margin-top:0.15rem;'>{subtitle}</div>"
        if subtitle else
        ""
    )

    st.markdown(
        f"""
        <div style="
            background: {_DARK_NAVY};
            border-bottom: 3px solid {_ACCENT};
            padding: 0.65rem 1.25rem;
            margin: -0.75rem -1rem 1.0rem -1rem;
            display: flex;
            flex-direction: column;
            line-height: 1.1;
        ">
            <div style="color:white; font-size:1.25rem; font-weight:650;">
                {title}
            </div>
            {subtitle_html}
        </div>
        """,
        unsafe_allow_html=True,
    )


def status_badge(text: str, ok: bool) -> str:
    """Return a small colored HTML badge ("found" green, "missing" amber)."""
    color = OK_GREEN if ok else WARN_AMBER
    return (
        f"<span style='background:{color}; color:white; border-radius:8px; "
        f"padding:0.05rem 0.45rem; font-size:0.8rem;'>{text}</span>"
    )
