"""
Markup event source for .enex exports.

lxml does the tokenizing. Its feed parser is driven with a parser *target*
so that character data arrives as its own event instead of being attached
to elements, which is what the record state machine needs:

    StartDocument
    StartElement("en-export")
    StartElement("note")
    StartElement("title")
    Text("Groceries")
    EndElement("title")
    ...
    EndElement("en-export")
    EndDocument

Bytes are read from the stream one chunk at a time and only as many chunks
are fed as it takes to produce the next event, so memory use is bounded by
the chunk size plus the largest text run (resource payloads included).
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import BinaryIO, Deque, Iterator, List, Optional, Union

from lxml import etree

DEFAULT_CHUNK_SIZE = 64 * 1024


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StartDocument:
    pass


@dataclass(frozen=True)
class EndDocument:
    pass


@dataclass(frozen=True)
class StartElement:
    name: str


@dataclass(frozen=True)
class EndElement:
    name: str


@dataclass(frozen=True)
class Text:
    text: str


Event = Union[StartDocument, EndDocument, StartElement, EndElement, Text]


def _local_name(tag: str) -> str:
    # "{namespace}name" -> "name"
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


class _EventCollector:
    """
    lxml parser target that turns callbacks into queued events.

    Character data between two element boundaries is coalesced, trimmed and
    dropped when it is only whitespace. CDATA sections arrive through
    data() like any other text.
    """

    def __init__(self, events: Deque[Event]) -> None:
        self._events = events
        self._text: List[str] = []

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = "".join(self._text).strip()
        self._text = []
        if text:
            self._events.append(Text(text))

    def start(self, tag, attrib, nsmap=None) -> None:
        self._flush_text()
        self._events.append(StartElement(_local_name(tag)))

    def end(self, tag) -> None:
        self._flush_text()
        self._events.append(EndElement(_local_name(tag)))

    def data(self, data) -> None:
        self._text.append(data)

    def close(self) -> None:
        self._flush_text()
        self._events.append(EndDocument())


class EnexEventSource:
    """
    Pull-based iterator of markup events over a binary stream.

    The stream is consumed destructively: once exhausted the source raises
    StopIteration forever. lxml.etree.XMLSyntaxError and OSError propagate
    unchanged, after every event that precedes them and exactly once.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._stream = stream
        self._chunk_size = chunk_size
        self._events: Deque[Event] = deque([StartDocument()])
        self._parser = etree.XMLParser(
            target=_EventCollector(self._events),
            load_dtd=False,
            no_network=True,
            huge_tree=True,
        )
        self._finished = False
        self._error: Optional[Exception] = None

    def __iter__(self) -> Iterator[Event]:
        return self

    def __next__(self) -> Event:
        while not self._events:
            if self._error is not None:
                # Everything lxml produced before the error has been handed out
                error, self._error = self._error, None
                raise error
            if self._finished:
                raise StopIteration
            self._pump()
        return self._events.popleft()

    def _pump(self) -> None:
        """
        Feed one more chunk to lxml, or close the parser at end of stream.

        A failure is held back until the events queued ahead of it have been
        consumed, so the error position does not depend on the chunk size.
        """
        try:
            chunk = self._stream.read(self._chunk_size)
            if chunk:
                self._parser.feed(chunk)
            else:
                self._finished = True
                self._parser.close()
        except Exception as exc:
            self._finished = True
            self._error = exc
