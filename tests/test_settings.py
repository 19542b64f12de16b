# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from storefront.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants and the category registry."""

    def test_api_base_url_is_https_without_trailing_slash(self) -> None:
        self.assertTrue(Settings.API_BASE_URL.startswith("http"))
        self.assertFalse(Settings.API_BASE_URL.endswith("/"))

    def test_category_path_has_placeholder(self) -> None:
        self.assertIn("{category}", Settings.CATEGORY_PATH)
        self.assertTrue(Settings.CATEGORY_PATH.startswith("/products/"))

    def test_request_timeout_is_positive_int(self) -> None:
        """REQUEST_TIMEOUT must be a positive integer."""
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertGreater(Settings.REQUEST_TIMEOUT, 0)

    def test_four_fixed_categories(self) -> None:
        """The picker offers exactly the four catalog categories."""
        self.assertEqual(
            [c["id"] for c in Settings.CATEGORIES],
            [
                "electronics",
                "jewelery",
                "men's clothing",
                "women's clothing",
            ],
        )

    def test_each_category_has_required_keys(self) -> None:
        for cat in Settings.CATEGORIES:
            with self.subTest(cat=cat.get("id", "?")):
                self.assertIn("id", cat)
                self.assertIn("label", cat)

    def test_path_constants_are_paths(self) -> None:
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_default_headers_accept_json(self) -> None:
        self.assertEqual(
            Settings.DEFAULT_HEADERS["Accept"], "application/json"
        )

    def test_impersonate_browser_is_string(self) -> None:
        self.assertIsInstance(Settings.IMPERSONATE_BROWSER, str)
        self.assertTrue(len(Settings.IMPERSONATE_BROWSER) > 0)


if __name__ == "__main__":
    unittest.main()
