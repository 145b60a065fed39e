"""
Shared pytest configuration for the enex2mf test suite.

This file centralizes reusable helpers so that:
    • parser tests build exports from inline XML without temp files
    • fixture .enex files load the same way everywhere
    • CLI tests share one Typer CliRunner setup
"""

import io
from pathlib import Path

import pytest
from typer.testing import CliRunner

from enex2mf.parsers import EnexParser

# ============================================================================
# FIXTURE DIRECTORY
# ============================================================================
FIXTURES_DIR = Path(__file__).parent / "fixtures"

ENEX_PROLOGUE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE en-export SYSTEM "http://xml.evernote.com/pub/evernote-export2.dtd">\n'
)


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def fixture_path():
    """Return the full path of a file in tests/fixtures/."""

    def _path(name: str) -> Path:
        return FIXTURES_DIR / name

    return _path


@pytest.fixture
def make_parser():
    """
    Build an EnexParser over inline XML.

    The body is wrapped in the usual XML prologue and <en-export> element
    unless `wrap=False`. A tiny chunk size makes lxml split text across
    several feeds, which the parser must not notice.
    """

    def _make(body: str, wrap: bool = True, chunk_size: int = 7) -> EnexParser:
        if wrap:
            body = f'{ENEX_PROLOGUE}<en-export export-date="20181226T083916Z">{body}</en-export>'
        return EnexParser(io.BytesIO(body.encode("utf-8")), chunk_size=chunk_size)

    return _make
