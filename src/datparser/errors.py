class DatParserError(Exception):
    """Base class for errors surfaced to callers of the parser."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{message}: {source}")
        self.source = source


class SourceNotFoundError(DatParserError):
    """The named part file does not exist or cannot be opened."""

    def __init__(self, source: str):
        super().__init__(source, "Part file not found")


class ParseError(DatParserError):
    """The line source failed while it was being read."""

    def __init__(self, source: str):
        super().__init__(source, "Failed to parse part file")
