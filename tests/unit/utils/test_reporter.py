#!/usr/bin/env python3
"""
Unit tests for reporter.py module
"""

import os
import sys
import json
import shutil
import tempfile
import unittest

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../../src')))

from utils.reporter import Reporter


class TestReporter(unittest.TestCase):
    """Tests for the Reporter class"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.output_dir = os.path.join(self.temp_dir, 'reports')

    def tearDown(self):
        """Tear down test fixtures"""
        shutil.rmtree(self.temp_dir)

    def _reporter(self, format):
        reporter = Reporter(self.output_dir, format)
        reporter.report({'check_kind:process', 'framework:cis'}, {'path': 'foo'})
        reporter.report({'check_kind:process'}, {'verbose': 'true'})
        return reporter

    def test_creates_output_dir(self):
        Reporter(self.output_dir)
        self.assertTrue(os.path.isdir(self.output_dir))

    def test_report_records_event(self):
        reporter = Reporter(self.output_dir)
        finding = {'path': 'foo'}
        reporter.report({'framework:cis', 'check_kind:process'}, finding)
        finding['path'] = 'changed'

        self.assertEqual(len(reporter.events), 1)
        self.assertEqual(reporter.events[0]['tags'], ['check_kind:process', 'framework:cis'])
        self.assertEqual(reporter.events[0]['data'], {'path': 'foo'})

    def test_no_findings(self):
        self.assertIsNone(Reporter(self.output_dir).generate_report())

    def test_json_report(self):
        path = self._reporter('json').generate_report()

        self.assertTrue(path.endswith('.json'))
        with open(path) as f:
            data = json.load(f)
        self.assertEqual(data['summary'], {'total_findings': 2, 'findings_by_kind': {'process': 2}})
        self.assertEqual(data['events'][0]['data'], {'path': 'foo'})

    def test_text_report(self):
        path = self._reporter('TEXT').generate_report()

        self.assertTrue(path.endswith('.txt'))
        with open(path) as f:
            content = f.read()
        self.assertIn('2 findings reported', content)
        self.assertIn('path: foo', content)
        self.assertIn('verbose: true', content)

    def test_html_report(self):
        path = self._reporter('html').generate_report()

        self.assertTrue(path.endswith('.html'))
        with open(path) as f:
            content = f.read()
        self.assertIn('<td>path</td>', content)
        self.assertIn('<td>foo</td>', content)
        self.assertIn('check_kind:process, framework:cis', content)


if __name__ == '__main__':
    unittest.main()
