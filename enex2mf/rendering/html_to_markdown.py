"""
Convert note content (ENML, Evernote's XHTML dialect) to Markdown.

ENML wraps everything in <en-note> and references attachments with
<en-media>. Attachments are not exported, so those references are dropped.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup
from markdownify import markdownify as md

DROP_TAGS = ["script", "style", "en-media", "en-crypt"]

# XML declaration and DOCTYPE that precede <en-note>
PROLOGUE_RE = re.compile(r"^\s*(<\?xml[^>]*\?>)?\s*(<!DOCTYPE[^>]*>)?", re.IGNORECASE)
BLANK_LINES_RE = re.compile(r"\n{3,}")


def html_to_markdown(html: Optional[str]) -> str:
    """
    Convert an ENML/HTML fragment to Markdown.

    - Empty or missing content gives ""
    - Uses the <en-note> root when present, else <body>
    - Uses markdownify (ATX headings, "-" bullets)
    - Undoes markdownify's "\\-" escaping and collapses blank-line runs
    """
    if not html:
        return ""

    soup = BeautifulSoup(PROLOGUE_RE.sub("", html, count=1), "lxml")
    for tag in soup(DROP_TAGS):
        tag.decompose()
    root = soup.find("en-note") or soup.body or soup

    # en-note is not an HTML tag; convert its children only
    inner = "".join(str(child) for child in root.children)
    md_text = md(inner, heading_style="ATX", bullets="-")

    md_text = md_text.replace("\\-", "-")
    lines = [line.rstrip() for line in md_text.splitlines()]
    return BLANK_LINES_RE.sub("\n\n", "\n".join(lines)).strip()
