#!/usr/bin/env python3
"""
Rules Module
Declarative process rules: which process to look at and which
command-line properties to report.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

PROPERTY_KIND_FLAG = 'flag'

SUPPORTED_PROPERTY_KINDS = (PROPERTY_KIND_FLAG,)

logger = logging.getLogger('procaudit.rules')


class RuleError(Exception):
    """Raised for malformed or unsupported rule definitions"""


@dataclass(frozen=True)
class ReportRule:
    """One command-line property to look for and how to report it"""
    property: str
    kind: str = PROPERTY_KIND_FLAG
    as_: str = ''
    value: Optional[str] = None

    @property
    def report_key(self):
        """Key under which the property is reported"""
        return self.as_ or self.property

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReportRule':
        if not isinstance(data, dict):
            raise RuleError(f"Report entry must be a mapping, got {type(data).__name__}")

        kind = data.get('kind', PROPERTY_KIND_FLAG)
        if kind not in SUPPORTED_PROPERTY_KINDS:
            raise RuleError(f"Unsupported property kind: {kind}")

        prop = data.get('property')
        if not prop:
            raise RuleError("Report entry is missing 'property'")

        value = data.get('value')
        return cls(
            property=str(prop),
            kind=kind,
            as_=str(data.get('as') or ''),
            value=None if value is None else str(value)
        )


@dataclass(frozen=True)
class ProcessSpec:
    """Target process name and the ordered rules reported for it"""
    name: str
    rules: Tuple[ReportRule, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProcessSpec':
        if not isinstance(data, dict):
            raise RuleError(f"Process block must be a mapping, got {type(data).__name__}")

        name = data.get('name')
        if not name:
            raise RuleError("Process block is missing 'name'")

        report = data.get('report') or []
        return cls(name=str(name), rules=tuple(ReportRule.from_dict(entry) for entry in report))


@dataclass(frozen=True)
class Rule:
    """A process rule as declared in the configuration"""
    id: str
    process: ProcessSpec
    tags: Tuple[str, ...] = ()


def _parse_tags(rule_id, tags):
    """A single string is one tag; otherwise a list of strings is required"""
    if tags is None:
        return ()
    if isinstance(tags, str):
        return (tags,)
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise RuleError(f"Rule {rule_id}: 'tags' must be a string or a list of strings")
    return tuple(tags)


def load_rules(entries: Optional[List[Dict[str, Any]]]) -> List[Rule]:
    """
    Parse the 'rules' list of the configuration

    Args:
        entries: List of rule mappings, each with 'id' and 'process'

    Returns:
        list: Parsed Rule objects in declaration order

    Raises:
        RuleError: On the first malformed entry
    """
    if entries is not None and not isinstance(entries, list):
        raise RuleError(f"Rules must be a list, got {type(entries).__name__}")

    rules = []
    seen = set()

    for index, entry in enumerate(entries or []):
        if not isinstance(entry, dict):
            raise RuleError(f"Rule #{index} must be a mapping")

        rule_id = entry.get('id')
        if not rule_id:
            raise RuleError(f"Rule #{index} is missing 'id'")
        if rule_id in seen:
            raise RuleError(f"Duplicate rule id: {rule_id}")
        seen.add(rule_id)

        if 'process' not in entry:
            raise RuleError(f"Rule {rule_id} has no 'process' block")

        try:
            process = ProcessSpec.from_dict(entry['process'])
        except RuleError as e:
            raise RuleError(f"Rule {rule_id}: {e}") from e

        rules.append(Rule(id=str(rule_id), process=process, tags=_parse_tags(rule_id, entry.get('tags'))))

    logger.debug(f"Loaded {len(rules)} rules")

    return rules
