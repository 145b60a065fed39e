"""
Low-level cursor over markup events.

`expect_*` methods consume one event and fail unless it is the one asked
for. `read_*` methods consume events up to a closing tag and return a value.
Every mismatch becomes an EnexError instead of a silent default.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterator, List, Optional

from enex2mf.errors import UnexpectedEvent
from enex2mf.parsers.events import (
    EndDocument,
    EndElement,
    Event,
    StartDocument,
    StartElement,
    Text,
)
from enex2mf.parsers.timestamps import parse_enex_timestamp


class EnexCursor:
    def __init__(self, events: Iterator[Event]) -> None:
        self._events = events

    def _next(self, context: str) -> Event:
        try:
            return next(self._events)
        except StopIteration:
            raise UnexpectedEvent(context, None) from None

    # ------------------------------------------------------------------
    # Document and element boundaries
    # ------------------------------------------------------------------
    def expect_document_start(self) -> None:
        event = self._next("expected document start")
        if not isinstance(event, StartDocument):
            raise UnexpectedEvent("expected document start", event)

    def expect_document_end(self) -> None:
        event = self._next("expected document end")
        if not isinstance(event, EndDocument):
            raise UnexpectedEvent("expected document end", event)

    def expect_element_open(self, name: str) -> None:
        context = f"expected <{name}>"
        event = self._next(context)
        if not (isinstance(event, StartElement) and event.name == name):
            raise UnexpectedEvent(context, event)

    def next_open_or_matching_close(self, closing_name: str) -> Optional[str]:
        """Return the name of the next opened element, or None at </closing_name>."""
        context = f"in <{closing_name}>"
        event = self._next(context)
        if isinstance(event, StartElement):
            return event.name
        if isinstance(event, EndElement) and event.name == closing_name:
            return None
        raise UnexpectedEvent(context, event)

    # ------------------------------------------------------------------
    # Element bodies
    # ------------------------------------------------------------------
    def read_text_until_close(self, closing_name: str) -> Optional[str]:
        """
        Concatenate text events up to </closing_name>.

        Returns None when the element had no text at all.
        """
        parts: List[str] = []
        while True:
            event = self._next("expected text")
            if isinstance(event, Text):
                parts.append(event.text)
            elif isinstance(event, EndElement) and event.name == closing_name:
                return "".join(parts) if parts else None
            else:
                raise UnexpectedEvent("expected text", event)

    def read_timestamp_until_close(self, closing_name: str) -> datetime:
        # An empty element is a format error, not a missing timestamp.
        return parse_enex_timestamp(self.read_text_until_close(closing_name))

    def skip_subtree(self, tag_name: str) -> None:
        """Discard everything up to and including the </tag_name> matching the open just consumed."""
        context = f"skipping <{tag_name}>"
        depth = 0
        while True:
            event = self._next(context)
            if isinstance(event, StartElement):
                depth += 1
            elif isinstance(event, EndElement):
                if depth == 0:
                    if event.name != tag_name:
                        raise UnexpectedEvent(context, event)
                    return
                depth -= 1
            elif isinstance(event, (StartDocument, EndDocument)):
                raise UnexpectedEvent(context, event)
