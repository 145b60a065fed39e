"""
Streaming parser for Evernote .enex exports.

The parser is a flat state machine over markup events. Its whole position
in the document is one state value, and the note being built travels inside
that value:

    Initial -> Container -> NoteBody(note) <-> Attributes(note)
                   ^              |
                   +--- </note> --+   (note handed to the caller)
    Container -- </en-export> --> Done

Each call to next_record() advances the machine until one note is complete,
so an export of any size is processed one note at a time:

    with open("notebook.enex", "rb") as fh:
        for note in EnexParser(fh):
            print(note.title, note.created)

Rules that follow document order:
    • a repeated title/content/created/updated overwrites the earlier one
    • <tag> elements accumulate, duplicates included
    • a repeated <note-attributes> block replaces the earlier block
    • <resource> subtrees are skipped without being decoded

The first error (lexical, structural or timestamp) is raised to the caller
and moves the machine to Done; it never resynchronizes.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from enex2mf.errors import UnexpectedElement
from enex2mf.parsers.cursor import EnexCursor
from enex2mf.parsers.events import DEFAULT_CHUNK_SIZE, EnexEventSource, Event
from enex2mf.types import Note, NoteAttributes

CONTAINER_TAG = "en-export"
NOTE_TAG = "note"
ATTRIBUTES_TAG = "note-attributes"
RESOURCE_TAG = "resource"

NOTE_TEXT_FIELDS = {"title": "title", "content": "content"}
NOTE_TIMESTAMP_FIELDS = {"created": "created", "updated": "updated"}
ATTRIBUTE_FIELDS = {
    "author": "author",
    "source": "source",
    "source-url": "source_url",
    "latitude": "latitude",
    "longitude": "longitude",
    "altitude": "altitude",
}


# ---------------------------------------------------------------------------
# Parser states
# ---------------------------------------------------------------------------
@dataclass
class Initial:
    pass


@dataclass
class Container:
    pass


@dataclass
class NoteBody:
    note: Note


@dataclass
class Attributes:
    note: Note


@dataclass
class Done:
    pass


ParserState = Union[Initial, Container, NoteBody, Attributes, Done]


class EnexParser:
    """
    Lazy, single-pass iterator of Note records.

    Iterating raises the first parse error from __next__ and then behaves as
    exhausted. next_record() exposes the same step as "Note, or None at end
    of input".
    """

    def __init__(
        self,
        stream: Optional[BinaryIO] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        events: Optional[Iterable[Event]] = None,
    ) -> None:
        """
        Parse `stream`, or an already tokenized `events` sequence instead.

        Exactly one of the two must be given.
        """
        if (stream is None) == (events is None):
            raise ValueError("pass either a stream or an event sequence")
        if events is None:
            events = EnexEventSource(stream, chunk_size=chunk_size)
        self._cursor = EnexCursor(iter(events))
        self.state: ParserState = Initial()

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> "EnexParser":
        """Build a parser over an already tokenized event sequence."""
        return cls(events=events)

    def __iter__(self) -> Iterator[Note]:
        return self

    def __next__(self) -> Note:
        note = self.next_record()
        if note is None:
            raise StopIteration
        return note

    def next_record(self) -> Optional[Note]:
        """Advance to the next completed note; None once the export is exhausted."""
        while not isinstance(self.state, Done):
            try:
                note = self._step()
            except Exception:
                self.state = Done()
                raise
            if note is not None:
                return note
        return None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _step(self) -> Optional[Note]:
        """Apply one transition. Returns the note when one was just closed."""
        state = self.state
        cursor = self._cursor

        if isinstance(state, Initial):
            cursor.expect_document_start()
            cursor.expect_element_open(CONTAINER_TAG)
            self.state = Container()
            return None

        if isinstance(state, Container):
            tag = cursor.next_open_or_matching_close(CONTAINER_TAG)
            if tag == NOTE_TAG:
                self.state = NoteBody(Note())
            elif tag is None:
                cursor.expect_document_end()
                self.state = Done()
            else:
                raise UnexpectedElement(tag, f"in <{CONTAINER_TAG}>")
            return None

        if isinstance(state, NoteBody):
            note = state.note
            tag = cursor.next_open_or_matching_close(NOTE_TAG)
            if tag is None:
                self.state = Container()
                return note
            if tag in NOTE_TEXT_FIELDS:
                setattr(note, NOTE_TEXT_FIELDS[tag], cursor.read_text_until_close(tag))
            elif tag in NOTE_TIMESTAMP_FIELDS:
                setattr(note, NOTE_TIMESTAMP_FIELDS[tag], cursor.read_timestamp_until_close(tag))
            elif tag == "tag":
                text = cursor.read_text_until_close(tag)
                if text is not None:
                    note.tags.append(text)
            elif tag == ATTRIBUTES_TAG:
                note.attributes = NoteAttributes()
                self.state = Attributes(note)
            elif tag == RESOURCE_TAG:
                cursor.skip_subtree(tag)
            else:
                raise UnexpectedElement(tag, f"in <{NOTE_TAG}>")
            return None

        if isinstance(state, Attributes):
            note = state.note
            tag = cursor.next_open_or_matching_close(ATTRIBUTES_TAG)
            if tag is None:
                self.state = NoteBody(note)
            elif tag in ATTRIBUTE_FIELDS:
                setattr(note.attributes, ATTRIBUTE_FIELDS[tag], cursor.read_text_until_close(tag))
            else:
                raise UnexpectedElement(tag, f"in <{ATTRIBUTES_TAG}>")
            return None

        return None


def parse_enex_file(
    path: Union[str, "PathLike[str]"], chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[Note]:
    """
    Yield the notes of an .enex file, closing it when iteration ends.

    Stopping early (or an error) closes the file once the generator is
    closed or garbage collected.
    """
    with open(path, "rb") as fh:
        yield from EnexParser(fh, chunk_size=chunk_size)
