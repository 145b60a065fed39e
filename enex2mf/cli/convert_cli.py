"""
Conversion commands for the enex2mf CLI.

Public surface:

    • `convert_app`  → mounted in enex2mf/cli/main.py as:

          enex2mf convert run Recipes.enex [--format mindforger|frontmatter] [--output PATH]

Formats
-------
mindforger
    One outline document for the whole notebook, written to stdout or to
    the --output file.

frontmatter
    One Markdown file per note in the --output directory. Without
    --output, all notes are written to stdout one after another.

Parsing stops at the first error in the export. Notes converted before the
error stay written; the command then exits with status 1.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Set, TextIO

import typer
from lxml import etree

from enex2mf import config
from enex2mf.errors import EnexError
from enex2mf.logging_utils import log_debug, log_verbose
from enex2mf.parsers import parse_enex_file
from enex2mf.rendering import frontmatter_md, mindforger

# ---------------------------------------------------------------------------
# Sub-application definition
# ---------------------------------------------------------------------------
convert_app = typer.Typer(
    help=(
        "Convert an .enex export to Markdown.\n\n"
        "The default format is MindForger (one outline per notebook); use "
        "--format frontmatter for one Markdown file per note."
    )
)


# ---------------------------------------------------------------------------
# Command: enex2mf convert run
# ---------------------------------------------------------------------------
@convert_app.command("run")
def convert_command(
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the .enex export.",
    ),
    output_format: str = typer.Option(
        config.DEFAULT_FORMAT,
        "--format",
        "-f",
        help="Output format: mindforger or frontmatter.",
        show_default=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (mindforger) or directory (frontmatter). Defaults to stdout.",
    ),
    default_title: str = typer.Option(
        config.DEFAULT_TITLE,
        "--default-title",
        help="Title used for notes without one.",
        show_default=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print progress to stderr."),
    debug: bool = typer.Option(False, "--debug", help="Print per-note details to stderr."),
) -> None:
    """
    Convert an .enex export into Markdown.
    """
    if output_format not in config.OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"must be one of: {', '.join(config.OUTPUT_FORMATS)}",
            param_hint="--format",
        )

    try:
        run_convert(
            input_path=input_path,
            output_format=output_format,
            output=output,
            default_title=default_title,
            verbose=verbose,
            debug=debug,
        )
    except (EnexError, etree.XMLSyntaxError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


def run_convert(
    input_path: Path,
    output_format: str = "mindforger",
    output: Optional[Path] = None,
    default_title: str = "untitled",
    verbose: bool = False,
    debug: bool = False,
) -> int:
    """
    Convert `input_path` and return the number of notes written.

    This function does NOT catch parse errors; the command wrapper turns
    them into an exit status.
    """
    log_verbose(f"Parsing {input_path} ({output_format})...", verbose)

    if output_format == "mindforger":
        if output is None:
            count = _write_mindforger(sys.stdout, input_path, default_title, debug)
        else:
            with output.open("w", encoding="utf-8") as fh:
                count = _write_mindforger(fh, input_path, default_title, debug)
    elif output is None:
        count = _write_frontmatter_stream(sys.stdout, input_path, default_title, debug)
    else:
        count = _write_frontmatter_dir(output, input_path, default_title, debug)

    log_verbose(f"Converted {count} notes.", verbose)
    return count


def _write_mindforger(writer: TextIO, input_path: Path, default_title: str, debug: bool) -> int:
    writer.write(mindforger.notebook_header(mindforger.notebook_name(input_path)) + "\n")
    count = 0
    for note in parse_enex_file(input_path, chunk_size=config.CHUNK_SIZE):
        log_debug(f"note {count + 1}: {note.title!r}, {len(note.tags)} tags", debug)
        mindforger.write_note(writer, note, default_title)
        count += 1
    return count


def _write_frontmatter_stream(writer: TextIO, input_path: Path, default_title: str, debug: bool) -> int:
    count = 0
    for note in parse_enex_file(input_path, chunk_size=config.CHUNK_SIZE):
        log_debug(f"note {count + 1}: {note.title!r}", debug)
        frontmatter_md.write_note(writer, note, default_title)
        count += 1
    return count


def _write_frontmatter_dir(directory: Path, input_path: Path, default_title: str, debug: bool) -> int:
    directory.mkdir(parents=True, exist_ok=True)
    used: Set[str] = set()
    count = 0
    for note in parse_enex_file(input_path, chunk_size=config.CHUNK_SIZE):
        target = directory / frontmatter_md.note_filename(note, default_title, used)
        log_debug(f"note {count + 1}: {note.title!r} -> {target.name}", debug)
        with target.open("w", encoding="utf-8") as fh:
            frontmatter_md.write_note(fh, note, default_title)
        count += 1
    return count
