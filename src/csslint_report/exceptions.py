class ReportError(Exception):
    """Base class for report generation errors"""


class UnknownFormatterError(ReportError):
    def __init__(self, formatter_id: str, known: list[str]):
        self.formatter_id = formatter_id
        self.known = known
        super().__init__(
            f"Unknown formatter '{formatter_id}' (available: {', '.join(known) or 'none'})"
        )


class DuplicateFormatterError(ReportError):
    def __init__(self, formatter_id: str):
        self.formatter_id = formatter_id
        super().__init__(f"Formatter '{formatter_id}' is already registered")
