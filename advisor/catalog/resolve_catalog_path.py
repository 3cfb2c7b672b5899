"""
advisor/catalog/resolve_catalog_path.py

Locates a catalog file by name. Relative names are tried against the current
working directory first, then against each ancestor directory, so the tool
still finds data/… when launched from a nested build or scripts folder.

File-existence probing only; nothing is opened or parsed here.
"""

from __future__ import annotations

from pathlib import Path

from advisor.config import DEFAULT_MAX_PARENT_SEARCH_DEPTH


def resolve_catalog_path(
    file_name: str,
    max_depth: int = DEFAULT_MAX_PARENT_SEARCH_DEPTH,
    cwd: Path | None = None,
) -> Path | None:
    """Return the absolute path of file_name, or None if it cannot be found.

    Resolution order:
        1. Empty name -> None.
        2. Absolute name -> accepted only if it exists.
        3. Relative name that exists under cwd -> accepted.
        4. Otherwise probe <ancestor>/<file_name> for cwd and its parents,
           at most max_depth directories in total, first hit wins.

    Args:
        file_name: Name or path as supplied by the caller.
        max_depth: Number of directories (cwd included) to probe in step 4.
        cwd:       Starting directory; defaults to Path.cwd().

    Returns:
        Absolute Path of the first existing candidate, or None.
    """
    if not file_name:
        return None

    requested = Path(file_name)
    if requested.is_absolute():
        return requested if requested.exists() else None

    start = Path.cwd() if cwd is None else cwd.absolute()

    candidate = start / requested
    if candidate.exists():
        return candidate

    for search_dir in [start, *start.parents][:max_depth]:
        candidate = search_dir / requested
        if candidate.exists():
            return candidate

    return None
