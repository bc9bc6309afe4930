#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test configuration for procaudit

Common helpers: process snapshot fixtures, a manual clock for cache
expiry, and a synchronous stand-in for ThreadPoolExecutor.
"""

import os
import sys
from unittest.mock import patch

# Add src directory to sys.path if not already there
src_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '../src'))
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from utils.process_fetcher import ProcessInfo


def make_snapshot(processes):
    """Build a snapshot from {pid: (name, [cmdline tokens])}"""
    return {pid: ProcessInfo(name=name, cmdline=list(cmdline)) for pid, (name, cmdline) in processes.items()}


class CountingFetcher:
    """Process fetcher returning a fixed snapshot and counting calls"""

    def __init__(self, snapshot=None, error=None):
        self.snapshot = snapshot or {}
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.snapshot


class ManualClock:
    """Clock for TTLCache that only moves when told to"""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class SynchronousExecutor:
    """
    A replacement for ThreadPoolExecutor that executes functions synchronously
    """
    def __init__(self, max_workers=None):
        self.max_workers = max_workers

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    def submit(self, fn, *args, **kwargs):
        class FakeFuture:
            def __init__(self, result):
                self._result = result

            def result(self):
                return self._result

        # Execute the function synchronously
        result = fn(*args, **kwargs)
        return FakeFuture(result)

    def map(self, fn, *iterables, timeout=None, chunksize=1):
        """Synchronous implementation of executor.map"""
        return map(fn, *iterables)

def patch_thread_executor(target):
    """
    Patch ThreadPoolExecutor at `target` in test setup and teardown methods

    Usage:
    @patch_thread_executor('checks.engine.ThreadPoolExecutor')
    class TestMyClass(unittest.TestCase):
        ...
    """
    def decorator(test_class):
        orig_setUp = test_class.setUp
        orig_tearDown = test_class.tearDown

        def patched_setUp(self):
            self.thread_pool_patcher = patch(target, SynchronousExecutor)
            self.thread_pool_patcher.start()
            orig_setUp(self)

        def patched_tearDown(self):
            orig_tearDown(self)
            self.thread_pool_patcher.stop()

        test_class.setUp = patched_setUp
        test_class.tearDown = patched_tearDown
        return test_class

    return decorator
