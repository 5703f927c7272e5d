"""Tests for structured JSON logging."""

import json
import logging
import unittest

from utils.logging import JSONFormatter


class TestJSONFormatter(unittest.TestCase):

    def _record(self, **extra):
        logger = logging.getLogger('test.accounts')
        record = logger.makeRecord(
            'test.accounts', logging.INFO, __file__, 10, 'User %s', ('created',), None, extra=extra
        )
        return json.loads(JSONFormatter().format(record))

    def test_core_fields(self):
        data = self._record()

        self.assertEqual(data['level'], 'INFO')
        self.assertEqual(data['logger'], 'test.accounts')
        self.assertEqual(data['message'], 'User created')
        self.assertEqual(data['service'], 'accounts')
        self.assertTrue(data['timestamp'].endswith('Z'))

    def test_extra_fields_included(self):
        data = self._record(userId='u-1', email='a@x.com')

        self.assertEqual(data['userId'], 'u-1')
        self.assertEqual(data['email'], 'a@x.com')
        self.assertNotIn('args', data)
        self.assertNotIn('lineno', data)

    def test_non_json_values_stringified(self):
        data = self._record(role=object())
        self.assertIsInstance(data['role'], str)
