"""
tests/test_config.py

Unit tests for advisor/config.py. All cases pass an explicit environ mapping;
os.environ is never modified.
"""

import sys
import unittest
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from advisor.config import (  # noqa: E402
    DEFAULT_CATALOG_FILE,
    DEFAULT_MAX_PARENT_SEARCH_DEPTH,
    colors_enabled,
    log_level,
    max_parent_search_depth,
)


class TestSearchDepth(unittest.TestCase):

    def test_default_depth(self):
        self.assertEqual(max_parent_search_depth({}), DEFAULT_MAX_PARENT_SEARCH_DEPTH)
        self.assertEqual(DEFAULT_MAX_PARENT_SEARCH_DEPTH, 10)

    def test_override(self):
        self.assertEqual(max_parent_search_depth({"COURSE_ADVISOR_SEARCH_DEPTH": " 3 "}), 3)

    def test_invalid_values_fall_back_and_log(self):
        """Non-numeric and non-positive values are ignored with a warning."""
        for value in ("abc", "0", "-2"):
            with self.subTest(value=value):
                with self.assertLogs(level="WARNING"):
                    depth = max_parent_search_depth({"COURSE_ADVISOR_SEARCH_DEPTH": value})
                self.assertEqual(depth, DEFAULT_MAX_PARENT_SEARCH_DEPTH)


class TestLogLevel(unittest.TestCase):

    def test_default_level(self):
        self.assertEqual(log_level({}), "WARNING")

    def test_level_name_is_upper_cased(self):
        self.assertEqual(log_level({"COURSE_ADVISOR_LOG_LEVEL": "debug"}), "DEBUG")

    def test_unknown_level_falls_back(self):
        self.assertEqual(log_level({"COURSE_ADVISOR_LOG_LEVEL": "verbose"}), "WARNING")


class TestColorsAndDefaults(unittest.TestCase):

    def test_colors_enabled_unless_no_color(self):
        self.assertTrue(colors_enabled({}))
        self.assertFalse(colors_enabled({"NO_COLOR": "1"}))

    def test_default_catalog_file_ships_with_repo(self):
        """The default catalog file exists relative to the repo root."""
        self.assertTrue((REPO_ROOT / DEFAULT_CATALOG_FILE).is_file())


if __name__ == "__main__":
    unittest.main()
