"""
Error taxonomy for .enex parsing.

Lexical errors are not wrapped: lxml's XMLSyntaxError (and OSError from the
input stream) reach the caller unchanged. Everything raised here means the
markup was well-formed but not shaped like an Evernote export.
"""

from typing import Any


class EnexError(Exception):
    """Base class for structural and format errors in an .enex export."""


class UnexpectedEvent(EnexError):
    """An event arrived where the parser expected something else."""

    def __init__(self, context: str, event: Any) -> None:
        self.context = context
        self.event = event
        shown = "end of input" if event is None else repr(event)
        super().__init__(f"Unexpected {shown}, {context}")


class UnexpectedElement(EnexError):
    """An element was opened that is not allowed at this position."""

    def __init__(self, tag: str, context: str = "") -> None:
        self.tag = tag
        self.context = context
        message = f"Unexpected <{tag}>"
        if context:
            message = f"{message} {context}"
        super().__init__(message)


class TimestampError(EnexError, ValueError):
    """Text inside <created>/<updated> is not a compact timestamp."""

    def __init__(self, text: Any) -> None:
        self.text = text
        super().__init__(f"Invalid timestamp {text!r}, expected YYYYMMDDTHHMMSS[Z|±HH[:MM]]")
