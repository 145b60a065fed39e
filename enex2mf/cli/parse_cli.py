"""
parse_cli.py

Typer command group that parses an .enex export into a JSON artifact.

The artifact is a list of notes as produced by `note_to_dict()`: raw
content, ISO 8601 timestamps, tags and attributes. It is meant for
inspecting an export or feeding it to other tools without re-parsing the
XML each time.
"""

import json
from itertools import islice
from pathlib import Path
from typing import Optional

import typer
from lxml import etree

from enex2mf import config
from enex2mf.errors import EnexError
from enex2mf.parsers import parse_enex_file
from enex2mf.types import note_to_dict

# ---------------------------------------------------------------------------
# Create the Typer sub-application for `enex2mf parse`
# ---------------------------------------------------------------------------
parse_app = typer.Typer(
    help=(
        "Parse an .enex export into a structured JSON artifact.\n\n"
        "The default output location is:\n\n"
        "    parsed_notes.json\n\n"
        "Use --output to override the destination."
    )
)


# ---------------------------------------------------------------------------
# `enex2mf parse run`
# ---------------------------------------------------------------------------
@parse_app.command("run")
def parse_run(
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the .enex export.",
    ),
    output: Path = typer.Option(
        Path("parsed_notes.json"),
        "--output",
        "-o",
        file_okay=True,
        dir_okay=False,
        writable=True,
        help="Where to write the parsed notes JSON artifact.",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        min=0,
        help="Only parse the first N notes.",
    ),
):
    """
    Parse an .enex export into a JSON artifact.

    Nothing is written when the export fails to parse.
    """
    typer.echo(f"Parsing Evernote export from: {input_path}")

    notes = parse_enex_file(input_path, chunk_size=config.CHUNK_SIZE)
    try:
        parsed = [note_to_dict(note) for note in islice(notes, limit)]
    except (EnexError, etree.XMLSyntaxError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    finally:
        notes.close()

    with output.open("w", encoding="utf-8") as f:
        json.dump(parsed, f, indent=2, ensure_ascii=False)

    typer.echo(f"Parsed {len(parsed)} notes.")
    typer.echo(f"Output written to: {output}")
