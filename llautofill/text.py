"""Whitespace and case normalization for header tokens and display names."""

import re
from typing import Optional

from bs4.element import Tag

_WHITESPACE = re.compile(r'\s+')


def normalize(text: Optional[str]) -> str:
    """
    Collapse whitespace runs (including non-breaking spaces) and trim.

    Examples:
        "  Smith,\\xa0 John " -> "Smith, John"
        None -> ""
    """
    if not text:
        return ''
    return _WHITESPACE.sub(' ', text.replace('\xa0', ' ')).strip()


def to_comparable(text: Optional[str]) -> str:
    """Normalized, upper-cased form used only for comparisons."""
    return normalize(text).upper()


def cell_text(cell: Optional[Tag]) -> str:
    """Normalized text content of a table cell (empty for a missing cell)."""
    if cell is None:
        return ''
    return normalize(cell.get_text())
