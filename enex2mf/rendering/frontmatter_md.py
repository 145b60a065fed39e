"""
YAML-frontmatter Markdown writer.

Each note becomes a standalone Markdown document whose metadata sits in a
frontmatter block, the layout used by Obsidian, Joplin and similar tools:

    ---
    title: Pancakes
    tags:
    - food
    created: '2018-12-26T09:39:16+01:00'
    source_url: https://example.com/pancakes
    ---

    Mix flour and eggs...
"""

import re
from dataclasses import asdict
from typing import Any, Dict, Set, TextIO

import frontmatter

from enex2mf.rendering.html_to_markdown import html_to_markdown
from enex2mf.types import Note

UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')
MAX_STEM_LENGTH = 100


def note_metadata(note: Note, default_title: str = "untitled") -> Dict[str, Any]:
    metadata: Dict[str, Any] = {"title": note.title or default_title}
    if note.tags:
        metadata["tags"] = list(note.tags)
    if note.created is not None:
        metadata["created"] = note.created.isoformat()
    if note.updated is not None:
        metadata["updated"] = note.updated.isoformat()

    # Only attributes the export actually carried
    for key, value in asdict(note.attributes).items():
        if value is not None:
            metadata[key] = value
    return metadata


def note_to_post(note: Note, default_title: str = "untitled") -> frontmatter.Post:
    return frontmatter.Post(html_to_markdown(note.content), **note_metadata(note, default_title))


def write_note(writer: TextIO, note: Note, default_title: str = "untitled") -> None:
    writer.write(frontmatter.dumps(note_to_post(note, default_title)))
    writer.write("\n\n")


def _safe_stem(text: str) -> str:
    return UNSAFE_FILENAME_RE.sub("_", text).strip(" .")[:MAX_STEM_LENGTH]


def note_filename(note: Note, default_title: str, used: Set[str]) -> str:
    """
    Filesystem-safe .md name for a note, unique within `used`.

    The chosen name is added to `used`. Clashes get " (2)", " (3)", ...
    """
    stem = _safe_stem(note.title or "") or _safe_stem(default_title) or "untitled"

    candidate = f"{stem}.md"
    counter = 2
    while candidate.lower() in used:
        candidate = f"{stem} ({counter}).md"
        counter += 1
    used.add(candidate.lower())
    return candidate
