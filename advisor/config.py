"""
advisor/config.py

Environment-driven settings shared by the CLI, the dashboard, and the
catalog loader. Every helper accepts an optional environ mapping so tests
can inject values without touching os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

# Bundled sample catalog, used when the menu's file prompt is left blank.
DEFAULT_CATALOG_FILE: str = "data/CS 300 ABCU_Advising_Program_Input.csv"

# How many directories (starting with the CWD) the loader probes for a
# relatively-named catalog file.
DEFAULT_MAX_PARENT_SEARCH_DEPTH: int = 10

DEFAULT_LOG_LEVEL: str = "WARNING"

_THEMES: frozenset[str] = frozenset({"dark", "light", "plain"})
_FRAMES: frozenset[str] = frozenset({"ascii", "unicode", "none"})
_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _env(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def _env_lower(name: str, environ: Mapping[str, str] | None) -> str:
    return _env(environ).get(name, "").strip().lower()


def colors_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Return False when NO_COLOR is set (to any value, even empty)."""
    return "NO_COLOR" not in _env(environ)


def theme_name(environ: Mapping[str, str] | None = None) -> str:
    """Return the palette name: "dark", "light", or "plain".

    COURSE_ADVISOR_THEME accepts dark, light, plain, none, or off.
    NO_COLOR always wins and yields "plain". Unknown values fall back to dark.
    """
    if not colors_enabled(environ):
        return "plain"
    choice = _env_lower("COURSE_ADVISOR_THEME", environ)
    if choice in ("plain", "none", "off"):
        return "plain"
    return choice if choice in _THEMES else "dark"


def frame_name(environ: Mapping[str, str] | None = None) -> str:
    """Return the border style: "ascii", "unicode", or "none"."""
    choice = _env_lower("COURSE_ADVISOR_FRAME", environ)
    if choice == "off":
        return "none"
    return choice if choice in _FRAMES else "ascii"


def max_parent_search_depth(environ: Mapping[str, str] | None = None) -> int:
    """Return COURSE_ADVISOR_SEARCH_DEPTH as a positive int, or the default."""
    raw = _env(environ).get("COURSE_ADVISOR_SEARCH_DEPTH", "").strip()
    if not raw:
        return DEFAULT_MAX_PARENT_SEARCH_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        depth = 0
    if depth < 1:
        logging.warning(
            "Ignoring invalid COURSE_ADVISOR_SEARCH_DEPTH=%r; using %d",
            raw,
            DEFAULT_MAX_PARENT_SEARCH_DEPTH,
        )
        return DEFAULT_MAX_PARENT_SEARCH_DEPTH
    return depth


def log_level(environ: Mapping[str, str] | None = None) -> str:
    """Return the level name for logging.basicConfig (upper-cased)."""
    raw = _env(environ).get("COURSE_ADVISOR_LOG_LEVEL", "").strip().upper()
    return raw if raw in _LOG_LEVELS else DEFAULT_LOG_LEVEL
