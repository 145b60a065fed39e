"""
Root entrypoint for the enex2mf CLI.

This module defines the top-level `enex2mf` command and mounts the
sub-apps from other modules under enex2mf/cli/:

    • enex2mf/cli/convert_cli.py  →  `enex2mf convert ...`
    • enex2mf/cli/parse_cli.py    →  `enex2mf parse ...`

Typical use:

    enex2mf convert run Recipes.enex > Recipes.md
    enex2mf convert run Recipes.enex --format frontmatter --output vault/Recipes
    enex2mf parse run Recipes.enex --output parsed_notes.json
"""

import typer

from .convert_cli import convert_app
from .parse_cli import parse_app

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "Convert Evernote .enex exports into Markdown.\n\n"
        "  enex2mf convert run <file.enex>   write MindForger or frontmatter Markdown\n\n"
        "  enex2mf parse run <file.enex>     dump the parsed notes as JSON\n\n"
        "Settings can also come from the environment or a .env file "
        "(ENEX2MF_FORMAT, ENEX2MF_DEFAULT_TITLE, ENEX2MF_CHUNK_SIZE)."
    )
)

# ---------------------------------------------------------------------------
# Register sub-applications
# ---------------------------------------------------------------------------
cli.add_typer(convert_app, name="convert")
cli.add_typer(parse_app, name="parse")

# ---------------------------------------------------------------------------
# Entry point for `python -m enex2mf.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
