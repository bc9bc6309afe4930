#!/usr/bin/env python3
"""
Flags Module
Extracts reported attributes from a process command line.
"""

from typing import Dict, Iterable, Optional, Sequence

from checks.rules import ReportRule


def find_flag(cmdline: Sequence[str], prop: str) -> Optional[str]:
    """
    Look up a flag in a command line

    Tokens are either `property=value` or a bare `property`. When the flag
    appears more than once the last occurrence wins.

    Returns:
        str: The value after the first '=', '' for a bare flag,
             or None when the flag is absent
    """
    found = None

    for token in cmdline:
        name, sep, value = token.partition('=')
        if name == prop:
            found = value if sep else ''

    return found


def extract_flags(cmdline: Sequence[str], rules: Iterable[ReportRule]) -> Dict[str, str]:
    """
    Build the finding for a command line

    Args:
        cmdline: Command-line tokens of the matched process
        rules: Report rules to apply, in order

    Returns:
        dict: Report key to value for every rule whose property is present
    """
    finding = {}

    for rule in rules:
        value = find_flag(cmdline, rule.property)
        if value is None:
            continue

        # A literal value replaces whatever was on the command line
        if rule.value is not None:
            value = rule.value

        finding[rule.report_key] = value

    return finding
