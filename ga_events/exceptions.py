"""
Custom exception hierarchy for ga-events.

Callers can catch ``GaEventsError`` for anything raised by the library,
or a specific subclass (e.g., ``MissingEventName`` vs ``ExportError``).
Input I/O errors (missing directory, undecodable bytes) are **not**
wrapped -- they propagate as the built-in ``OSError`` /
``UnicodeDecodeError`` raised by the reader.
"""


class GaEventsError(Exception):
    """Base exception for all ga-events errors."""


class MissingEventName(GaEventsError):
    """Raised when a data row has no ``name`` value after keying.

    Fatal for the whole run: the document is never written.
    """

    def __init__(self, group_name: str, row_number: int) -> None:
        self.group_name = group_name
        self.row_number = row_number
        super().__init__(
            f"Table '{group_name}': data row {row_number} has no 'name' value. "
            "Every event row must name its event."
        )


class ParsingError(GaEventsError):
    """Raised when a table has no header row to key its data rows by."""


class ConfigValidationError(GaEventsError):
    """Raised when a config file is empty or its content is unusable."""


class ExportError(GaEventsError):
    """Raised when the output document cannot be written.

    For example, permission errors or a destination that is a directory.
    """
