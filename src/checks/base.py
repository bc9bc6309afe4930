#!/usr/bin/env python3
"""
Base Check Module
State shared by every check: the reporter, the check kind and the rule identity.
"""

import logging

CHECK_KIND_PROCESS = 'process'


class BaseCheck:
    """Common plumbing for checks that hand findings to a reporter"""

    def __init__(self, reporter, kind, rule_id=None, tags=None):
        """
        Args:
            reporter: Object exposing report(tags, finding)
            kind: Check category, reported as the check_kind tag
            rule_id: Identifier of the rule this check evaluates
            tags: Extra tags attached to every report
        """
        self.logger = logging.getLogger(f'procaudit.checks.{kind}')
        self.reporter = reporter
        self.kind = kind
        self.rule_id = rule_id or kind
        self.tags = list(tags or [])

    def report_tags(self):
        """Tags sent along with each finding"""
        tags = {f'check_kind:{self.kind}'}
        tags.update(self.tags)
        return tags

    def report(self, finding):
        self.logger.debug(f"{self.rule_id}: reporting {finding}")
        self.reporter.report(self.report_tags(), finding)

    def run(self):
        raise NotImplementedError
