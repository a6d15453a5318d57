import os
import unittest
from unittest.mock import patch

from coinnews.settings import DEFAULT_API_URL, load_settings


class SettingsTests(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings()
        self.assertEqual(settings.api_url, DEFAULT_API_URL)
        self.assertEqual(settings.cache_ttl_seconds, 300)
        self.assertEqual(settings.http_max_retries, 0)
        self.assertEqual(settings.topic_limit, 10)
        self.assertEqual(settings.general_limit, 20)
        self.assertEqual(settings.body_preview_chars, 200)

    @patch.dict(
        os.environ,
        {"NEWS_CACHE_TTL": "60", "NEWS_TOPIC_LIMIT": "5", "NEWS_LANGUAGE": "PT", "NEWS_HTTP_MAX_RETRIES": "2"},
        clear=True,
    )
    def test_env_overrides(self):
        settings = load_settings()
        self.assertEqual(settings.cache_ttl_seconds, 60)
        self.assertEqual(settings.topic_limit, 5)
        self.assertEqual(settings.language, "PT")
        self.assertEqual(settings.http_max_retries, 2)

    @patch.dict(os.environ, {"NEWS_CACHE_TTL": "soon", "NEWS_GENERAL_LIMIT": "0"}, clear=True)
    def test_invalid_values_fall_back_to_defaults(self):
        with self.assertLogs("coinnews.settings", level="WARNING"):
            settings = load_settings()
        self.assertEqual(settings.cache_ttl_seconds, 300)
        self.assertEqual(settings.general_limit, 20)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
