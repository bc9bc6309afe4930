#!/usr/bin/env python3
"""
CheckEngine Module
Owns the shared process cache and runs registered checks concurrently.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from checks.process_check import ProcessCheck
from checks.rules import RuleError, load_rules
from utils.cache import DEFAULT_TTL, TTLCache
from utils.process_fetcher import ProviderError, fetch_processes


class CheckEngine:
    """Runs process checks against one shared process-table cache"""

    def __init__(self, reporter, config=None, fetcher=fetch_processes):
        """Initialize with reporter, configuration and process fetcher"""
        self.logger = logging.getLogger('procaudit.engine')
        if config is not None and not isinstance(config, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config).__name__}")

        self.config = config or {}
        self.reporter = reporter
        self.fetcher = fetcher

        self.cache_ttl = self.config.get('process_cache_ttl', DEFAULT_TTL)
        self.thread_count = self.config.get('thread_count', 4)

        if isinstance(self.cache_ttl, bool) or not isinstance(self.cache_ttl, (int, float)) or self.cache_ttl < 0:
            raise ValueError(f"process_cache_ttl must be a non-negative number, got {self.cache_ttl!r}")
        if isinstance(self.thread_count, bool) or not isinstance(self.thread_count, int) or self.thread_count < 1:
            raise ValueError(f"thread_count must be a positive integer, got {self.thread_count!r}")

        self.cache = None
        self.checks = []

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    @property
    def running(self):
        return self.cache is not None

    def _ensure_running(self):
        if not self.running:
            raise RuntimeError("Check engine is not started")

    def start(self):
        """Create the process cache"""
        if self.running:
            return
        self.cache = TTLCache(default_ttl=self.cache_ttl)
        self.logger.info(f"Check engine started (cache ttl {self.cache_ttl}s)")

    def stop(self):
        """Drop cached snapshots and registered checks"""
        if not self.running:
            return
        self.cache.clear()
        self.cache = None
        self.checks = []
        self.logger.info("Check engine stopped")

    def add_process_check(self, spec, rule_id=None, tags=None):
        """
        Register a process check

        Args:
            spec: ProcessSpec to evaluate
            rule_id: Identifier of the rule, defaults to process-<n>
            tags: Extra report tags

        Returns:
            ProcessCheck: The registered check

        Raises:
            RuleError: If another registered check already uses rule_id
        """
        self._ensure_running()

        taken = {check.rule_id for check in self.checks}
        if rule_id is None:
            index = len(self.checks) + 1
            while f'process-{index}' in taken:
                index += 1
            rule_id = f'process-{index}'
        elif rule_id in taken:
            raise RuleError(f"Duplicate rule id: {rule_id}")

        check = ProcessCheck(
            self.reporter,
            spec,
            fetcher=self.fetcher,
            cache=self.cache,
            cache_ttl=self.cache_ttl,
            rule_id=rule_id,
            tags=tags
        )
        self.checks.append(check)
        return check

    def load_rules(self, entries, only=None):
        """
        Register a check for every rule in the configuration's rules list

        Args:
            entries: Raw 'rules' list from the configuration
            only: If given, register just the rule with this id

        Returns:
            int: Number of checks registered
        """
        count = 0
        for rule in load_rules(entries):
            if only and rule.id != only:
                continue
            self.add_process_check(rule.process, rule_id=rule.id, tags=rule.tags)
            count += 1

        self.logger.info(f"Registered {count} process checks")
        return count

    def _run_check(self, check):
        try:
            check.run()
            return None
        except ProviderError as e:
            return str(e) or type(e).__name__

    def run_checks(self):
        """
        Evaluate every registered check once

        Returns:
            dict: Rule id to error message, or None for checks that ran cleanly
        """
        self._ensure_running()

        if not self.checks:
            self.logger.warning("No checks registered")
            return {}

        self.logger.info(f"Running {len(self.checks)} checks")

        with ThreadPoolExecutor(max_workers=self.thread_count) as executor:
            futures = [(check, executor.submit(self._run_check, check)) for check in self.checks]
            results = {check.rule_id: future.result() for check, future in futures}

        failed = [rule_id for rule_id, error in results.items() if error is not None]
        if failed:
            self.logger.warning(f"{len(failed)} checks failed: {', '.join(failed)}")

        return results
