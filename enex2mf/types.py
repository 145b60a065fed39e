"""
enex2mf/types.py

Record types produced by the .enex parser.

A Note is created empty when the parser sees <note>, filled in field by
field as child elements arrive in document order, and handed to the caller
once </note> is reached. The parser never touches it again after that.

The export container (<en-export>) has no record of its own; only its
start/end boundaries matter to the parser.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# NoteAttributes
# ---------------------------------------------------------------------------
# Optional metadata from <note-attributes>. Every field is independent and
# kept as the raw text from the export (latitude etc. are not converted).
# ---------------------------------------------------------------------------
@dataclass
class NoteAttributes:
    author: Optional[str] = None
    source: Optional[str] = None
    source_url: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    altitude: Optional[str] = None


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------
# One exported note.
#
#   • content holds the raw ENML/HTML; rendering/ converts it
#   • created/updated are timezone-aware, in local time
#   • tags keep document order and duplicates
#   • attributes default to all-absent when the export omits the block
# ---------------------------------------------------------------------------
@dataclass
class Note:
    title: Optional[str] = None
    content: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
    attributes: NoteAttributes = field(default_factory=NoteAttributes)

    @property
    def modified(self) -> Optional[datetime]:
        """Effective modification time: `updated`, falling back to `created`."""
        return self.updated if self.updated is not None else self.created


def note_to_dict(note: Note) -> Dict[str, Any]:
    """
    Convert a Note into a JSON-ready dictionary.

    Timestamps become ISO 8601 strings (or None); attributes stay nested
    under "attributes".
    """
    return {
        "title": note.title,
        "content": note.content,
        "created": note.created.isoformat() if note.created else None,
        "updated": note.updated.isoformat() if note.updated else None,
        "tags": list(note.tags),
        "attributes": asdict(note.attributes),
    }
