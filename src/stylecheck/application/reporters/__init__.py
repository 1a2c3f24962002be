"""Reporters for style check results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from stylecheck.application.reporters._base import BaseReporter
from stylecheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from stylecheck.application.reporters.json_reporter import JSONReporter
from stylecheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
