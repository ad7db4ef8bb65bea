"""Exceptions raised by the walk-to-table pipeline.

Library code raises these; only the command-line entry point turns them into
an error log line and a non-zero exit status.
"""


class InputError(Exception):
    """The walk file is missing, unreadable, or not valid text."""


class ParseError(ValueError):
    """The walk file is malformed (a continuation line precedes every key)."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number
