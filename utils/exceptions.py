class SlcspError(Exception):
    """Base class for failures that abort an SLCSP run."""


class SourceReadError(SlcspError):
    """
    An input could not be read: missing or unreadable file, empty file,
    malformed CSV, or a row with the wrong number of fields.
    """

    def __init__(self, source, reason):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Error reading data from {self.source}: {reason}")


class RateParseError(SlcspError):
    """A plan rate field is not a finite decimal number."""

    def __init__(self, source, row, value):
        self.source = str(source)
        self.row = row
        self.value = value
        super().__init__(f"Error parsing data from {self.source}: invalid rate {value!r} on row {row}")
