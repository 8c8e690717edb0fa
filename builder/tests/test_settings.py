import importlib
import os
import tempfile
from unittest import mock

import dotenv
from django.test import SimpleTestCase

from appcreator_platform.settings import common
from appcreator_platform.settings import settings as project_settings

DOTENV_KEYS = ('SECRET_KEY', 'ALLOWED_HOSTS', 'DEBUG')


class DotenvSettingsTest(SimpleTestCase):
    """Test cases for loading settings from a .env file"""

    def setUp(self):
        self.addCleanup(self._reload_settings)

    @staticmethod
    def _reload_settings():
        importlib.reload(common)
        importlib.reload(project_settings)

    def test_dotenv_values_reach_core_settings(self):
        """Test .env is loaded before SECRET_KEY, DEBUG and ALLOWED_HOSTS are read"""
        real_load_dotenv = dotenv.load_dotenv

        with tempfile.TemporaryDirectory() as tmp_dir:
            env_path = os.path.join(tmp_dir, '.env')
            with open(env_path, 'w', encoding='utf-8') as f:
                f.write('SECRET_KEY=secret-from-dotenv\n')
                f.write('ALLOWED_HOSTS=api.example.com\n')
                f.write('DEBUG=False\n')

            with mock.patch.dict(os.environ):
                for key in DOTENV_KEYS:
                    os.environ.pop(key, None)
                with mock.patch('dotenv.load_dotenv', side_effect=lambda *args, **kwargs: real_load_dotenv(env_path)):
                    self._reload_settings()

                self.assertEqual(common.SECRET_KEY, 'secret-from-dotenv')
                self.assertEqual(common.ALLOWED_HOSTS, ['api.example.com'])
                self.assertFalse(common.DEBUG)
                self.assertEqual(project_settings.SECRET_KEY, 'secret-from-dotenv')
                self.assertEqual(project_settings.SIMPLE_JWT['SIGNING_KEY'], 'secret-from-dotenv')
