#!/usr/bin/env python3
"""
ProcessCheck Module
Reports command-line flags of a named running process.
"""

from typing import Dict, List

from checks.base import BaseCheck, CHECK_KIND_PROCESS
from checks.flags import extract_flags
from checks.rules import ProcessSpec, RuleError
from utils.cache import DEFAULT_TTL
from utils.process_fetcher import ProcessInfo, ProviderError, fetch_processes

PROCESS_CACHE_KEY = 'compliance-processes'


def match_processes(snapshot: Dict[int, ProcessInfo], name: str) -> List[ProcessInfo]:
    """Processes in the snapshot whose name is exactly `name`, in PID order"""
    return [snapshot[pid] for pid in sorted(snapshot) if snapshot[pid].name == name]


class ProcessCheck(BaseCheck):
    """Evaluates one ProcessSpec against the process table"""

    def __init__(self, reporter, spec: ProcessSpec, fetcher=fetch_processes, cache=None,
                 cache_ttl=DEFAULT_TTL, rule_id=None, tags=None):
        """
        Args:
            reporter: Receives report(tags, finding) for non-empty findings
            spec: Process name and report rules
            fetcher: Callable returning a process snapshot
            cache: Shared TTLCache; None fetches on every run
            cache_ttl: Validity of a fetched snapshot in seconds
            rule_id: Identifier used in log messages
            tags: Extra report tags
        """
        if not spec.name:
            raise RuleError("Unable to create process check: empty process name")

        super().__init__(reporter, CHECK_KIND_PROCESS, rule_id=rule_id, tags=tags)
        self.spec = spec
        self.fetcher = fetcher
        self.cache = cache
        self.cache_ttl = cache_ttl

    def _get_processes(self):
        if self.cache is None:
            return self.fetcher()
        return self.cache.get_or_fetch(PROCESS_CACHE_KEY, self.fetcher, self.cache_ttl)

    def run(self):
        """
        Evaluate the check once

        Nothing is reported when the process is absent, when several
        processes share the name, or when none of the rules match.

        Raises:
            ProviderError: If the process table could not be read
        """
        self.logger.debug(f"{self.rule_id}: running process check for {self.spec.name}")

        try:
            snapshot = self._get_processes()
        except ProviderError as e:
            self.logger.error(f"{self.rule_id}: unable to fetch processes: {e}")
            raise

        matched = match_processes(snapshot, self.spec.name)
        if len(matched) != 1:
            self.logger.debug(f"{self.rule_id}: {len(matched)} processes named {self.spec.name}, skipping")
            return

        finding = extract_flags(matched[0].cmdline, self.spec.rules)
        if not finding:
            self.logger.debug(f"{self.rule_id}: no reported property found on {self.spec.name}")
            return

        self.report(finding)
