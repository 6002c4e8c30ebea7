import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from timeboard.config import DEFAULT_CONFIG, Config, Credentials


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.dir, ignore_errors=True)

    def test_defaults(self):
        config = Config(self.dir)
        self.assertEqual(config.default_period, 'week')
        self.assertEqual(config.page_size, 1000)
        self.assertEqual(config.error_banner_ms, 3000)
        self.assertEqual(config.api_base_url, DEFAULT_CONFIG['api_base_url'])

    def test_saved_values_merge_over_defaults(self):
        with open(os.path.join(self.dir, 'config.json'), 'w', encoding='utf-8') as f:
            json.dump({'default_period': 'month'}, f)
        config = Config(self.dir)
        self.assertEqual(config.default_period, 'month')
        self.assertEqual(config.request_timeout, 15.0)

    def test_setter_persists(self):
        Config(self.dir).default_period = 'year'
        self.assertEqual(Config(self.dir).default_period, 'year')

    def test_corrupt_file_falls_back_to_defaults(self):
        with open(os.path.join(self.dir, 'config.json'), 'w', encoding='utf-8') as f:
            f.write('{not json')
        self.assertEqual(Config(self.dir).default_period, 'week')


class TestCredentials(unittest.TestCase):
    def test_from_env(self):
        env = {'CLOCKIFY_API_KEY': 'k', 'WORKSPACE_ID': 'w', 'USER_ID': 'u'}
        with patch.dict(os.environ, env, clear=True):
            creds = Credentials.from_env(os.devnull)
        self.assertEqual(creds, Credentials('k', 'w', 'u'))
        self.assertEqual(creds.missing(), [])

    def test_missing_values_are_reported_not_rejected(self):
        with patch.dict(os.environ, {}, clear=True):
            creds = Credentials.from_env(os.devnull)
        self.assertEqual(creds.missing(), ['CLOCKIFY_API_KEY', 'WORKSPACE_ID', 'USER_ID'])


if __name__ == "__main__":
    unittest.main()
