import re

from ..escape import xml_escape
from ..models import FileResult, RuleRef
from .base import BaseFormatter

_WHITESPACE = re.compile(r"\s")


def generate_source(rule: RuleRef | None) -> str:
    """
    Build the Checkstyle source string for a rule.

    Checkstyle sources usually resemble Java class names, e.g.
    ``net.csslint.SomeRuleName``.
    """
    if rule is None or rule.name is None:
        return "net.csslint.generic"
    return "net.csslint." + _WHITESPACE.sub("", rule.name)


def generate_identifier(rule: RuleRef | None) -> str:
    if rule is None or rule.id is None:
        return "generic"
    return rule.id


class CheckstyleXmlFormatter(BaseFormatter):
    """Checkstyle-compatible XML output"""

    @property
    def id(self) -> str:
        return "checkstyle-xml"

    @property
    def name(self) -> str:
        return "Checkstyle XML format"

    def start_format(self) -> str:
        return '<?xml version="1.0" encoding="utf-8"?><checkstyle>'

    def end_format(self) -> str:
        return "</checkstyle>"

    def read_error(self, filename: str, message: str) -> str:
        return (
            f'<file name="{xml_escape(filename)}">'
            '<error line="0" column="0" severity="error" source="net.csslint.readerror"'
            f' identifier="read-error" message="{xml_escape(message)}"></error>'
            "</file>"
        )

    def format_results(self, results: FileResult, filename: str) -> str:
        messages = results.messages
        if not messages:
            return ""

        # Filename goes in as given; existing consumers rely on it unescaped
        output = [f'<file name="{filename}">']
        for message in messages:
            # Rollups are summary counts, not line-level issues
            if message.rollup:
                continue
            output.append(
                f'<error line="{message.line}" column="{message.col}" severity="{message.type}"'
                f' message="{xml_escape(message.message)}" source="{generate_source(message.rule)}"'
                f' identifier="{generate_identifier(message.rule)}"/>'
            )
        output.append("</file>")

        return "".join(output)
