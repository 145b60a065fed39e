"""
Rendering layer: turn parsed Note records into Markdown.

    • html_to_markdown: note content (ENML/HTML) to Markdown text
    • mindforger: one MindForger outline for a whole notebook
    • frontmatter_md: YAML-frontmatter Markdown, one document per note
"""

from .html_to_markdown import html_to_markdown

__all__ = ["html_to_markdown"]
