"""Derive a short, plain-text title from a note body."""
import re
from typing import Optional

from notes2md.config import config

# Destination part of an inline Markdown link, e.g. "(http://example.com)"
RE_LINK_DESTINATION = re.compile(r"\([^)]*\)")
RE_MARKDOWN_SYNTAX = re.compile(r"[\"'`#()!~>_\[\]*]")


def first_content_line(content: str) -> str:
    """Return the first line that is not blank, or an empty string."""
    for line in content.split("\n"):
        if line.strip():
            return line
    return ""


def derive_title(content: str, max_length: Optional[int] = None) -> str:
    """Build a single-line title from the first non-blank line of ``content``.

    Link destinations and Markdown punctuation are removed, leading spaces
    and dots are stripped, and the result is cut to ``max_length``
    characters. The result may be empty; callers that need a filename must
    reject that case themselves.
    """
    if max_length is None:
        max_length = config.title_max_length

    title = RE_LINK_DESTINATION.sub("", first_content_line(content))
    title = RE_MARKDOWN_SYNTAX.sub("", title)
    title = title.lstrip(" .").strip()
    return title[:max_length]
