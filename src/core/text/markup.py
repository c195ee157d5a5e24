"""
Markup: HTML Entity Escaping and Decoding

- escape: encode `<`, `>` and `&` as entities (single pass)
- refine_safe_html_text: decode entities by parsing the text as HTML
  and reading the text content of its body

Decoding delegates to a MarkupParser collaborator. The default parser
is BeautifulSoup with the html5lib tree builder, which moves head-only
elements such as <title> into <head> the way a browser does. It is
created lazily, once per process, under a lock. Callers and tests can
pass their own parser per call or replace the default with
set_markup_parser.

A parser failure is not propagated: refine_safe_html_text logs it and
returns the source unchanged.
"""

import logging
import re
import threading
from abc import ABC, abstractmethod
from typing import Final, Optional

from bs4 import BeautifulSoup


logger = logging.getLogger(__name__)

DEFAULT_TREE_BUILDER: Final[str] = "html5lib"

# Elements that belong in <head>
HEAD_ONLY_TAGS: Final[list[str]] = ["title", "meta", "link", "base"]


# =============================================================================
# ESCAPE
# =============================================================================

ESCAPE_TABLE: Final[dict[str, str]] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
}

ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[<>&]")


def escape(text: str) -> str:
    """
    Replace `<`, `>` and `&` with their HTML entities.

    Not idempotent: an already escaped `&amp;` becomes `&amp;amp;`.

    Examples:
        >>> escape("<a & b>")
        '&lt;a &amp; b&gt;'
    """
    return ESCAPE_PATTERN.sub(lambda match: ESCAPE_TABLE[match.group(0)], text)


# =============================================================================
# MARKUP PARSERS
# =============================================================================


class MarkupParser(ABC):
    """Abstract markup parser used to decode entity-encoded HTML."""

    @abstractmethod
    def extract_text(self, source: str) -> str:
        """Parse `source` as an HTML document and return its body text.

        Args:
            source: HTML or entity-encoded text.

        Returns:
            Plain text content with entities decoded.
        """
        pass


class BeautifulSoupMarkupParser(MarkupParser):
    """MarkupParser backed by BeautifulSoup."""

    def __init__(self, features: str = DEFAULT_TREE_BUILDER):
        """Initialize the parser.

        Args:
            features: BeautifulSoup tree builder name.
        """
        self.features = features

    def extract_text(self, source: str) -> str:
        soup = BeautifulSoup(source, self.features)
        if soup.body is not None:
            return soup.body.get_text()

        # Builders like html.parser only create the elements the source spells out
        if soup.head is not None:
            soup.head.decompose()
        for element in soup.find_all(HEAD_ONLY_TAGS):
            element.decompose()
        return soup.get_text()


_markup_parser: Optional[MarkupParser] = None
_markup_parser_lock = threading.Lock()


def get_markup_parser() -> MarkupParser:
    """Return the process-wide default parser, creating it on first use."""
    global _markup_parser

    if _markup_parser is None:
        with _markup_parser_lock:
            if _markup_parser is None:
                _markup_parser = BeautifulSoupMarkupParser()
                logger.debug("Created default markup parser")
    return _markup_parser


def set_markup_parser(parser: Optional[MarkupParser]) -> None:
    """Replace the default parser; None resets it to lazy creation."""
    global _markup_parser

    with _markup_parser_lock:
        _markup_parser = parser


# =============================================================================
# DECODE
# =============================================================================


def refine_safe_html_text(source: str, parser: Optional[MarkupParser] = None) -> str:
    """
    Turn entity-encoded HTML back into text
    (&lt;&nbsp;1&amp;2&nbsp;&gt; -> "<\\xa01&2\\xa0>").

    Args:
        source: Source string
        parser: Parser to use instead of the process-wide default

    Returns:
        Decoded body text, or `source` unchanged if parsing fails
    """
    try:
        active = parser if parser is not None else get_markup_parser()
        return active.extract_text(source)
    except Exception as e:
        logger.debug(f"Markup parsing failed, keeping source text: {e}")
        return source
