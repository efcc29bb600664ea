"""
csslint-report - Report formatters for CSS lint results

This package provides:
- Immutable result models (file results, diagnostics, rule references)
- XML attribute escaping
- Checkstyle XML formatter
- Formatter registry and report assembly
"""

__version__ = "0.1.0"

from .escape import xml_escape
from .formatters.checkstyle import CheckstyleXmlFormatter
from .models import Diagnostic, FileResult, ReadFailure, RuleRef, Severity
from .registry import FormatterRegistry, registry
from .report import render_report

__all__ = [
    "CheckstyleXmlFormatter",
    "Diagnostic",
    "FileResult",
    "FormatterRegistry",
    "ReadFailure",
    "RuleRef",
    "Severity",
    "registry",
    "render_report",
    "xml_escape",
]
