"""
Output formatters for lint results.
"""

from .base import BaseFormatter, Formatter
from .checkstyle import CheckstyleXmlFormatter

__all__ = [
    "BaseFormatter",
    "CheckstyleXmlFormatter",
    "Formatter",
]
