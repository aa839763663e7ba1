"""Markdown detection for plain-text attachment content.

Recognizes the chat platform's "mrkdwn" conventions: surrounding
emphasis markers, code spans and blocks, block quotes, and angle-bracket
links. Pure functions, no infrastructure dependencies.

Emphasis follows the platform's flanking rules: the marked text must not
start or end with whitespace, must stay on one line, and the markers must
not touch a word character on the outside. So ``2 * 3 * 4`` and
``snake_case_name`` are plain text, while ``*bold*`` is not.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum

from slackfield.domain.errors import MarkdownContentError

logger = logging.getLogger(__name__)


class Decoration(StrEnum):
    """Markdown constructs that are not allowed in plain-text content."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    PRE = "pre"
    CODE = "code"
    QUOTE = "quote"
    LINK = "link"


def _emphasis(marker: str) -> re.Pattern[str]:
    """Pattern for ``<marker>text<marker>`` obeying the flanking rules."""
    m = re.escape(marker)
    return re.compile(rf"(?<!\w){m}(?!\s)[^{m}\n]+(?<!\s){m}(?!\w)")


DECORATION_PATTERNS: dict[Decoration, re.Pattern[str]] = {
    Decoration.BOLD: _emphasis("*"),
    Decoration.ITALIC: _emphasis("_"),
    Decoration.STRIKE: _emphasis("~"),
    Decoration.PRE: re.compile(r"```.+?```", re.DOTALL),
    Decoration.CODE: re.compile(r"`[^`\n]+`"),
    Decoration.QUOTE: re.compile(r"^>{1,3}\s", re.MULTILINE),
    # <https://example.com|label>, <mailto:a@b.c>
    Decoration.LINK: re.compile(r"<[^<>|\s]+\|[^<>\n]+>|<[a-zA-Z][\w+.-]*:[^<>|\s]+>"),
}


def find_decorations(text: str) -> list[Decoration]:
    """Return every decoration found in *text*, in declaration order.

    Returns an empty list for plain text.

    Examples:
        >>> find_decorations("*Deploy* finished")
        [<Decoration.BOLD: 'bold'>]
        >>> find_decorations("All systems operational")
        []
    """
    return [deco for deco, pattern in DECORATION_PATTERNS.items() if pattern.search(text)]


def contains_markdown(text: str) -> bool:
    """Check whether *text* contains any markdown formatting syntax."""
    return any(pattern.search(text) for pattern in DECORATION_PATTERNS.values())


def check_does_not_contain_markdown(field_name: str, text: str) -> None:
    """Raise :class:`MarkdownContentError` if *text* contains markdown.

    *field_name* identifies the offending field in the error message.
    """
    found = find_decorations(text)
    if found:
        logger.debug("Markdown found in %s: %s", field_name, ", ".join(found))
        raise MarkdownContentError(field_name, text, [str(deco) for deco in found])
