# Initialize checks package

from .base import BaseCheck, CHECK_KIND_PROCESS
from .engine import CheckEngine
from .flags import extract_flags
from .process_check import ProcessCheck, match_processes, PROCESS_CACHE_KEY
from .rules import ProcessSpec, ReportRule, Rule, RuleError, load_rules

__all__ = [
    'BaseCheck',
    'CHECK_KIND_PROCESS',
    'CheckEngine',
    'extract_flags',
    'ProcessCheck',
    'match_processes',
    'PROCESS_CACHE_KEY',
    'ProcessSpec',
    'ReportRule',
    'Rule',
    'RuleError',
    'load_rules'
]
