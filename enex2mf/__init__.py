"""
enex2mf: convert Evernote .enex exports into Markdown.

Public API:

    • EnexParser / parse_enex_file: stream Note records out of an export
    • Note / NoteAttributes: the records
    • EnexError and subclasses: structural and timestamp errors
"""

from .errors import EnexError, TimestampError, UnexpectedElement, UnexpectedEvent
from .parsers import EnexParser, parse_enex_file
from .types import Note, NoteAttributes, note_to_dict

__version__ = "0.1.0"

__all__ = [
    "EnexParser",
    "parse_enex_file",
    "Note",
    "NoteAttributes",
    "note_to_dict",
    "EnexError",
    "TimestampError",
    "UnexpectedElement",
    "UnexpectedEvent",
]
