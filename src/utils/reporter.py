#!/usr/bin/env python3
"""
Reporter Module
Collects findings reported by checks and renders them as a report file.
"""

import os
import logging
import json
import datetime
import threading
from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), 'templates')


class Reporter:
    """Handles finding collection and report generation"""

    def __init__(self, output_dir, format='text'):
        """Initialize with output directory and format"""
        self.logger = logging.getLogger('procaudit.reporter')
        self.output_dir = output_dir
        self.format = format.lower()
        self.events = []
        self._lock = threading.Lock()

        # Create output directory if it doesn't exist
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

    def report(self, tags, finding):
        """Record one finding with its tags"""
        event = {
            'timestamp': datetime.datetime.now().isoformat(),
            'tags': sorted(tags),
            'data': dict(finding)
        }
        with self._lock:
            self.events.append(event)

    def generate_report(self):
        """Generate the report based on format"""
        with self._lock:
            events = list(self.events)

        if not events:
            self.logger.warning("No findings to generate report from")
            return None

        # Create timestamp for filename
        timestamp = datetime.datetime.now().strftime('%Y%m%d_%H%M%S')
        filename = f"procaudit_report_{timestamp}"

        if self.format == 'json':
            return self._generate_json_report(filename, events)
        elif self.format == 'html':
            return self._generate_html_report(filename, events)
        else:
            # Default to text format
            return self._generate_text_report(filename, events)

    def _generate_json_report(self, filename, events):
        """Generate JSON report"""
        self.logger.info("Generating JSON report")

        report_data = {
            'timestamp': datetime.datetime.now().isoformat(),
            'hostname': os.uname().nodename,
            'events': events,
            'summary': self._generate_summary(events)
        }

        filepath = os.path.join(self.output_dir, f"{filename}.json")
        with open(filepath, 'w') as f:
            json.dump(report_data, f, indent=2)

        self.logger.info(f"JSON report saved to {filepath}")

        return filepath

    def _generate_text_report(self, filename, events):
        """Generate text report"""
        self.logger.info("Generating text report")

        content = []

        content.append("=" * 80)
        content.append("Process Compliance Report")
        content.append(f"Generated: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        content.append(f"Hostname: {os.uname().nodename}")
        content.append("=" * 80)
        content.append("")

        content.append("SUMMARY")
        content.append("-" * 80)

        summary = self._generate_summary(events)
        content.append(f"{summary['total_findings']} findings reported")
        for kind, count in summary['findings_by_kind'].items():
            content.append(f"- {kind}: {count}")
        content.append("")

        content.append("FINDINGS")
        content.append("-" * 80)
        for i, event in enumerate(events):
            content.append(f"{i+1}. [{', '.join(event['tags'])}] {event['timestamp']}")
            for key, value in sorted(event['data'].items()):
                content.append(f"    {key}: {value}")
        content.append("")

        filepath = os.path.join(self.output_dir, f"{filename}.txt")
        with open(filepath, 'w') as f:
            f.write('\n'.join(content))

        self.logger.info(f"Text report saved to {filepath}")

        return filepath

    def _generate_html_report(self, filename, events):
        """Generate HTML report"""
        self.logger.info("Generating HTML report")

        env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(['html', 'xml'])
        )
        template = env.get_template('report.html')

        html_content = template.render(
            timestamp=datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            hostname=os.uname().nodename,
            events=events,
            summary=self._generate_summary(events)
        )

        filepath = os.path.join(self.output_dir, f"{filename}.html")
        with open(filepath, 'w') as f:
            f.write(html_content)

        self.logger.info(f"HTML report saved to {filepath}")

        return filepath

    def _generate_summary(self, events):
        """Count findings per check kind"""
        findings_by_kind = {}

        for event in events:
            kinds = [tag.split(':', 1)[1] for tag in event['tags'] if tag.startswith('check_kind:')]
            for kind in kinds or ['unknown']:
                findings_by_kind[kind] = findings_by_kind.get(kind, 0) + 1

        return {
            'total_findings': len(events),
            'findings_by_kind': findings_by_kind
        }
