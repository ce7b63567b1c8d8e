# owstat/scraper/query.py
"""
Query layer over a parsed career page.

Every query is a CSS selector evaluated against the whole document. List
queries preserve document order. Whether zero matches is an error is an
explicit ``required`` argument of each call: required queries raise
SelectorNotFound, optional ones return an empty list (or None for scalars).
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Union

from bs4 import BeautifulSoup

from owstat.errors import ParseError, SelectorNotFound

logger = logging.getLogger(__name__)

_STYLE_URL_RE = re.compile(r"url\(\s*['\"]?([^'\")]*)['\"]?\s*\)")


def parse_document(markup: Union[str, bytes]) -> BeautifulSoup:
    """Parse raw page markup, rejecting empty or undecodable input."""
    if isinstance(markup, bytes):
        try:
            markup = markup.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Document is not valid UTF-8: {e}") from e
    if not markup or not markup.strip():
        raise ParseError("Document is empty")
    try:
        return BeautifulSoup(markup, "html.parser")
    except Exception as e:
        raise ParseError(f"Failed to parse document: {e}") from e


def quote_attr(value: str) -> str:
    """Quote a value for use inside an ``[attr="..."]`` selector."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def parse_int(text: str) -> int:
    """Parse a display integer such as ``"1,234"`` into an int."""
    clean = text.replace(",", "").strip()
    try:
        return int(clean)
    except ValueError as e:
        raise ParseError(f"Not an integer: '{text}'") from e


class DocumentQuery:
    """Selector-based text and attribute lookups against one document."""

    def __init__(self, document: Union[BeautifulSoup, str, bytes]):
        if isinstance(document, BeautifulSoup):
            self.soup = document
        else:
            self.soup = parse_document(document)

    def _select(self, selector: str):
        try:
            return self.soup.select(selector)
        except Exception as e:
            raise ParseError(f"Invalid selector '{selector}': {e}") from e

    # --- Text content ---

    def scalar(self, selector: str, required: bool = True) -> Optional[str]:
        """Text content of the first match."""
        nodes = self._select(selector)
        if not nodes:
            if required:
                raise SelectorNotFound(selector)
            return None
        return nodes[0].get_text()

    def strings(self, selector: str, required: bool = True) -> List[str]:
        """Text content of every match, in document order."""
        nodes = self._select(selector)
        if not nodes and required:
            raise SelectorNotFound(selector)
        return [node.get_text() for node in nodes]

    # --- Attributes ---

    def attr(self, selector: str, name: str, required: bool = True) -> Optional[str]:
        """Attribute of the first match; a match lacking it yields ''."""
        nodes = self._select(selector)
        if not nodes:
            if required:
                raise SelectorNotFound(selector, name)
            return None
        return _attr_value(nodes[0], name)

    def attrs(self, selector: str, name: str, required: bool = True) -> List[str]:
        """Attribute of every match; matches lacking it keep their slot as ''."""
        nodes = self._select(selector)
        if not nodes and required:
            raise SelectorNotFound(selector, name)
        return [_attr_value(node, name) for node in nodes]

    # --- Typed helpers ---

    def integer(self, selector: str, required: bool = True) -> Optional[int]:
        """First match parsed as an integer, grouping commas stripped."""
        text = self.scalar(selector, required=required)
        if text is None:
            return None
        return parse_int(text)

    def style_url(self, selector: str, required: bool = True) -> Optional[str]:
        """URL inside the ``background-image`` of the first match's style."""
        style = self.attr(selector, "style", required=required)
        if style is None:
            return None
        match = _STYLE_URL_RE.search(style)
        return match.group(1).strip() if match else ""


def _attr_value(node, name: str) -> str:
    value = node.get(name)
    if value is None:
        return ""
    # bs4 returns multi-valued attributes such as class as a list
    if isinstance(value, list):
        return " ".join(value)
    return value
