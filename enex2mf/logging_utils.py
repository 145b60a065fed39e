"""
logging_utils.py

Logging helpers shared by the enex2mf CLI commands.

There is no logging framework here: messages go through Typer's echo so
they look the same as the rest of the CLI output. Both helpers write to
stderr, because `enex2mf convert run` streams Markdown to stdout and the
two must not mix.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of what is happening
        (e.g., "Parsing notebook.enex...", "Converted 12 notes.").

    verbose : bool
        Whether verbose mode is active. When False, nothing is printed.
    """
    if verbose:
        typer.echo(message, err=True)


def log_debug(message: str, debug: bool) -> None:
    """Print per-note detail, prefixed so it stands out from progress lines."""
    if debug:
        typer.echo(f"[debug] {message}", err=True)
