"""
MindForger outline writer.

A converted notebook is a single Markdown document: one outline header
named after the notebook, then one section per note with MindForger's
metadata comment on the heading line:

    # Recipes <!-- Metadata: type: Outline; created: ...; -->
    # Pancakes <!-- Metadata: type: Note; tags: food,breakfast; created: 2018-12-26 09:39:16; modified: ...; -->

    From https://example.com/pancakes

    Mix flour and eggs...
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union

from enex2mf.rendering.html_to_markdown import html_to_markdown
from enex2mf.types import Note

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def notebook_name(input_path: Union[str, Path, None]) -> str:
    """Notebook name from the export's file stem ("unknown" when there is none)."""
    if input_path is None:
        return "unknown"
    return Path(input_path).stem or "unknown"


def notebook_header(name: str, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime(TIME_FORMAT)
    return (
        f"# {name} <!-- Metadata: type: Outline; created: {stamp}; reads: 0; "
        f"read: {stamp}; revision: 0; modified: {stamp}; importance: 0/5; urgency: 0/5; -->"
    )


def note_heading(note: Note, default_title: str = "untitled") -> str:
    parts = [f"# {note.title or default_title} <!-- Metadata: type: Note; "]
    if note.tags:
        parts.append(f"tags: {','.join(note.tags)}; ")
    if note.created is not None:
        parts.append(f"created: {note.created.strftime(TIME_FORMAT)}; ")
    if note.modified is not None:
        parts.append(f"modified: {note.modified.strftime(TIME_FORMAT)}; ")
    parts.append("-->")
    return "".join(parts)


def write_note(writer: TextIO, note: Note, default_title: str = "untitled") -> None:
    """Write one note as a MindForger section."""
    writer.write(note_heading(note, default_title) + "\n\n")
    if note.attributes.source_url:
        writer.write(f"From {note.attributes.source_url}\n\n")
    writer.write(html_to_markdown(note.content) + "\n")
    writer.write("\n")
