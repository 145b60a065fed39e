"""
Parsing layer: lxml event source, cursor and the note state machine.

Callers normally only need:

    from enex2mf.parsers import EnexParser, parse_enex_file
"""

from .enex import EnexParser, parse_enex_file
from .timestamps import parse_enex_timestamp

__all__ = [
    "EnexParser",
    "parse_enex_file",
    "parse_enex_timestamp",
]
