#!/usr/bin/env python3
"""
Process Fetcher Module
Takes a snapshot of the running process table (name and command line per PID).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import psutil

logger = logging.getLogger('procaudit.process_fetcher')


class ProviderError(Exception):
    """Raised when the process table cannot be read"""


@dataclass(frozen=True)
class ProcessInfo:
    """Name and command-line tokens of one running process"""
    name: str
    cmdline: List[str] = field(default_factory=list)


def fetch_processes() -> Dict[int, ProcessInfo]:
    """
    Enumerate the running processes

    Processes that exit or deny access while the table is being walked
    are left out of the snapshot.

    Returns:
        dict: Mapping of PID to ProcessInfo

    Raises:
        ProviderError: If the process table itself cannot be enumerated
    """
    snapshot = {}

    try:
        for proc in psutil.process_iter(['name', 'cmdline']):
            try:
                info = proc.info
                snapshot[proc.pid] = ProcessInfo(
                    name=info.get('name') or '',
                    cmdline=list(info.get('cmdline') or [])
                )
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                continue
    except (psutil.Error, OSError) as e:
        raise ProviderError(f"Unable to enumerate processes: {e}") from e

    logger.debug(f"Fetched {len(snapshot)} processes")

    return snapshot
