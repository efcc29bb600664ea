import logging

from .exceptions import DuplicateFormatterError, UnknownFormatterError
from .formatters.base import Formatter

logger = logging.getLogger(__name__)


class FormatterRegistry:
    """Registry mapping formatter identifiers to formatters"""

    def __init__(self):
        self._formatters: dict[str, Formatter] = {}
        self._load_builtin_formatters()

    def register(self, formatter: Formatter):
        if formatter.id in self._formatters:
            raise DuplicateFormatterError(formatter.id)
        self._formatters[formatter.id] = formatter
        logger.debug("Registered formatter %s (%s)", formatter.id, formatter.name)

    def get(self, formatter_id: str) -> Formatter:
        try:
            return self._formatters[formatter_id]
        except KeyError:
            raise UnknownFormatterError(formatter_id, self.ids()) from None

    def get_all_formatters(self) -> list[Formatter]:
        return list(self._formatters.values())

    def ids(self) -> list[str]:
        return list(self._formatters)

    def __contains__(self, formatter_id: object) -> bool:
        return formatter_id in self._formatters

    def _load_builtin_formatters(self):
        from .formatters.checkstyle import CheckstyleXmlFormatter

        self.register(CheckstyleXmlFormatter())


registry = FormatterRegistry()
