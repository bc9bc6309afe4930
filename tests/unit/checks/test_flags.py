#!/usr/bin/env python3
"""
Unit tests for flags.py module
"""

import os
import sys
import unittest

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../../src')))

from checks.flags import extract_flags, find_flag
from checks.rules import ReportRule


class TestFindFlag(unittest.TestCase):
    """Tests for find_flag"""

    def test_value_form(self):
        self.assertEqual(find_flag(['arg1', '--path=foo'], '--path'), 'foo')

    def test_value_keeps_later_equals(self):
        self.assertEqual(find_flag(['--opt=a=b'], '--opt'), 'a=b')

    def test_bare_flag(self):
        self.assertEqual(find_flag(['--verbose'], '--verbose'), '')

    def test_empty_value(self):
        self.assertEqual(find_flag(['--path='], '--path'), '')

    def test_absent(self):
        self.assertIsNone(find_flag(['--paths=foo', '-path=foo'], '--path'))

    def test_last_occurrence_wins(self):
        self.assertEqual(find_flag(['--path=a', '--path=b'], '--path'), 'b')


class TestExtractFlags(unittest.TestCase):
    """Tests for extract_flags"""

    def test_extracts_value(self):
        rules = [ReportRule(property='--path', as_='path')]
        self.assertEqual(extract_flags(['arg1', '--path=foo'], rules), {'path': 'foo'})

    def test_override_on_bare_flag(self):
        rules = [ReportRule(property='--verbose', as_='verbose', value='true')]
        self.assertEqual(extract_flags(['arg1', '--verbose'], rules), {'verbose': 'true'})

    def test_override_wins_over_value(self):
        rules = [ReportRule(property='--mode', as_='mode', value='set')]
        self.assertEqual(extract_flags(['--mode=debug'], rules), {'mode': 'set'})

    def test_absent_property_omitted(self):
        rules = [
            ReportRule(property='--path', as_='path'),
            ReportRule(property='--port', as_='port', value='x')
        ]
        self.assertEqual(extract_flags(['--path=foo'], rules), {'path': 'foo'})

    def test_no_match_is_empty(self):
        rules = [ReportRule(property='--path', as_='path')]
        self.assertEqual(extract_flags(['arg1', '--paths=foo'], rules), {})

    def test_key_defaults_to_property(self):
        rules = [ReportRule(property='--path')]
        self.assertEqual(extract_flags(['--path=foo'], rules), {'--path': 'foo'})

    def test_inputs_untouched(self):
        cmdline = ['--path=foo', '--verbose']
        rules = [ReportRule(property='--verbose', as_='v', value='1')]

        first = extract_flags(cmdline, rules)
        second = extract_flags(cmdline, rules)

        self.assertEqual(first, second)
        self.assertEqual(cmdline, ['--path=foo', '--verbose'])


if __name__ == '__main__':
    unittest.main()
