"""
advisor/cli/main.py

Console entry point for the text menu.

Run from anywhere inside the repository (the default catalog file is found
by searching parent directories):
    course-advisor
    course-advisor "data/CS 300 ABCU_Advising_Program_Input.csv"
    python -m advisor.cli.main
"""

from __future__ import annotations

import argparse
import logging

from advisor.cli.menu import Menu
from advisor.config import log_level


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="course-advisor",
        description="Browse a course catalog CSV from the terminal.",
    )
    parser.add_argument(
        "catalog_file",
        nargs="?",
        help="Catalog file to load before the menu is shown.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    menu = Menu()
    if args.catalog_file:
        menu.load(args.catalog_file)
    menu.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
