"""
advisor/cli/theme.py

Terminal styling for the text menu: ANSI color palettes and frame
characters, both chosen once per run from the environment.

    COURSE_ADVISOR_THEME  dark | light | plain (none/off)   default dark
    COURSE_ADVISOR_FRAME  ascii | unicode | none (off)       default ascii
    NO_COLOR              any value forces the plain palette
"""

from __future__ import annotations

from collections.abc import Mapping

from advisor.config import frame_name, theme_name

# ---------------------------------------------------------------------------
# Palettes: one ANSI sequence per text role.
# ---------------------------------------------------------------------------
_STYLES: tuple[str, ...] = (
    "border", "title", "number", "text", "prompt",
    "success", "warning", "error", "info", "reset",
)

_DARK_PALETTE: dict[str, str] = {
    "border":  "\x1b[95m",
    "title":   "\x1b[97;1m",
    "number":  "\x1b[93;1m",
    "text":    "\x1b[97m",
    "prompt":  "\x1b[96;1m",
    "success": "\x1b[92m",
    "warning": "\x1b[93m",
    "error":   "\x1b[91m",
    "info":    "\x1b[94m",
    "reset":   "\x1b[0m",
}

_LIGHT_PALETTE: dict[str, str] = {
    "border":  "\x1b[35m",
    "title":   "\x1b[30;1m",
    "number":  "\x1b[34;1m",
    "text":    "\x1b[30m",
    "prompt":  "\x1b[36;1m",
    "success": "\x1b[32m",
    "warning": "\x1b[33m",
    "error":   "\x1b[31m",
    "info":    "\x1b[35m",
    "reset":   "\x1b[0m",
}

_PLAIN_PALETTE: dict[str, str] = {style: "" for style in _STYLES}

PALETTES: dict[str, dict[str, str]] = {
    "dark": _DARK_PALETTE,
    "light": _LIGHT_PALETTE,
    "plain": _PLAIN_PALETTE,
}

# ---------------------------------------------------------------------------
# Frames: corners, horizontal, vertical.
# ---------------------------------------------------------------------------
FRAMES: dict[str, dict[str, str]] = {
    "ascii": {
        "top_left": "+", "top_right": "+",
        "bottom_left": "+", "bottom_right": "+",
        "horizontal": "-", "vertical": "|",
    },
    "unicode": {
        "top_left": "╔", "top_right": "╗",
        "bottom_left": "╚", "bottom_right": "╝",
        "horizontal": "═", "vertical": "║",
    },
    "none": {
        "top_left": "", "top_right": "",
        "bottom_left": "", "bottom_right": "",
        "horizontal": "", "vertical": "",
    },
}


class Theme:
    """A palette plus a frame style."""

    def __init__(self, palette: str = "dark", frame: str = "ascii") -> None:
        if palette not in PALETTES:
            raise ValueError(
                f"Unknown palette {palette!r}. Supported: {sorted(PALETTES)}"
            )
        if frame not in FRAMES:
            raise ValueError(
                f"Unknown frame {frame!r}. Supported: {sorted(FRAMES)}"
            )
        self.palette_name = palette
        self.frame_name = frame
        self.palette = PALETTES[palette]
        self.frame = FRAMES[frame]

    def color(self, style: str) -> str:
        """Return the ANSI sequence for style ("" under the plain palette)."""
        return self.palette[style]

    def paint(self, style: str, text: str) -> str:
        """Wrap text in style and a trailing reset."""
        return f"{self.palette[style]}{text}{self.palette['reset']}"


def load_theme(environ: Mapping[str, str] | None = None) -> Theme:
    """Build the Theme selected by the environment (see module docstring)."""
    return Theme(palette=theme_name(environ), frame=frame_name(environ))


def render_framed_lines(lines: list[tuple[str, str]], theme: Theme) -> str:
    """Render (plain, colored) line pairs inside the theme's frame.

    The plain text is only used to measure width, so colored text lines up
    regardless of how many escape sequences it carries.

    Returns:
        The framed block, newline-terminated.
    """
    frame = theme.frame
    border = theme.color("border")
    reset = theme.color("reset")

    if not frame["vertical"]:
        out = []
        for _plain, colored in lines:
            out.append(f"{colored}{reset}" if colored else "")
        return "\n".join(out) + "\n"

    max_width = max((len(plain) for plain, _colored in lines), default=0)
    inner_width = max_width + 2  # one space of padding on each side

    top = frame["top_left"] + frame["horizontal"] * inner_width + frame["top_right"]
    bottom = frame["bottom_left"] + frame["horizontal"] * inner_width + frame["bottom_right"]

    out = [f"{border}{top}{reset}"]
    for plain, colored in lines:
        padding = " " * (max_width - len(plain))
        body = f"{colored}{reset}" if colored else ""
        out.append(
            f"{border}{frame['vertical']}{reset} {body}{padding} "
            f"{border}{frame['vertical']}{reset}"
        )
    out.append(f"{border}{bottom}{reset}")
    return "\n".join(out) + "\n"
