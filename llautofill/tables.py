"""Heuristic discovery of tables by their header row."""

import logging
from enum import Enum
from typing import Iterable, Optional

from bs4.element import Tag

from .text import to_comparable

logger = logging.getLogger('llautofill.tables')


class MatchMode(Enum):
    """How a required header token is compared against header cells."""
    EXACT = 'exact'  # token equals a whole header cell
    SUBSTRING = 'substring'  # token appears inside some header cell


def header_texts(table: Tag) -> Optional[list[str]]:
    """
    Read the comparable texts of a table's header row.

    Args:
        table: Parsed <table> element

    Returns:
        List of upper-cased, whitespace-normalized header cell texts,
        or None if the table has no ``thead tr``
    """
    header_row = table.select_one('thead tr')
    if header_row is None:
        return None
    return [to_comparable(cell.get_text()) for cell in header_row.find_all(['td', 'th'])]


def _token_matches(token: str, header: str, mode: MatchMode) -> bool:
    if mode is MatchMode.EXACT:
        return header == token
    return token in header


def column_index(headers: list[str], token: str, mode: MatchMode = MatchMode.EXACT) -> int:
    """Position of the first header satisfying ``token`` under ``mode``, or -1."""
    for idx, header in enumerate(headers):
        if _token_matches(token, header, mode):
            return idx
    return -1


def headers_satisfy(headers: list[str], required: Iterable[str], mode: MatchMode) -> bool:
    """True when every required token is found among the headers."""
    return all(column_index(headers, token, mode) >= 0 for token in required)


def locate_table(
    document: Tag,
    selectors: str,
    required: Iterable[str],
    mode: MatchMode = MatchMode.EXACT,
) -> Optional[Tag]:
    """
    Find the first table (document order) whose header row has all required tokens.

    Tables without a header row are skipped rather than ending the search.

    Args:
        document: Parsed document (BeautifulSoup or any containing Tag)
        selectors: CSS selector(s) for candidate tables, e.g. "table.std, table"
        required: Comparable header tokens that must all be present
        mode: EXACT for whole-cell matches, SUBSTRING for contained matches

    Returns:
        The matching table element, or None
    """
    required = tuple(required)
    for table in document.select(selectors):
        headers = header_texts(table)
        if not headers:
            continue
        if headers_satisfy(headers, required, mode):
            return table
    logger.debug(f'No table with headers {required} ({mode.value})')
    return None


def body_rows(table: Tag) -> list[Tag]:
    """
    Data rows of a table, in document order.

    Rows inside ``thead``/``tfoot`` and rows of nested tables are left out.
    Rows written directly under ``<table>`` count as body rows, since
    html.parser does not insert the implied ``<tbody>``.
    """
    rows = []
    for tr in table.find_all('tr'):
        if tr.find_parent('table') is not table:
            continue
        if tr.parent.name in ('thead', 'tfoot'):
            continue
        rows.append(tr)
    return rows


def row_cells(row: Tag) -> list[Tag]:
    """Direct ``td`` children of a row."""
    return row.find_all('td', recursive=False)
