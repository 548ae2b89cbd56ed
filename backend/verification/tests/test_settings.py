"""Tests for the per-environment settings modules."""
import importlib

from django.test import SimpleTestCase


class SettingsModuleTests(SimpleTestCase):

    def test_every_environment_configures_verification_logger(self):
        for name in ('base', 'dev', 'prod', 'test'):
            module = importlib.import_module(f'config.settings.{name}')
            with self.subTest(settings=name):
                self.assertIn('verification', module.LOGGING['loggers'])
                self.assertIn('verification.apps.VerificationConfig', module.INSTALLED_APPS)

    def test_prod_disables_debug_and_uses_json_logs(self):
        prod = importlib.import_module('config.settings.prod')
        self.assertFalse(prod.DEBUG)
        self.assertEqual(prod.LOGGING['handlers']['console']['formatter'], 'json')
        self.assertEqual(prod.LOGGING['loggers']['verification']['level'], prod.LOG_LEVEL)
