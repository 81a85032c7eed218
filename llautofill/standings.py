"""Parsing of a rundle standings page into a name -> stats index."""

import logging
import math
import re
from typing import Optional

from bs4 import BeautifulSoup

from .constants import STANDINGS_HEADERS, STANDINGS_SELECTORS
from .models import StandingsEntry, StandingsIndex
from .tables import MatchMode, body_rows, column_index, header_texts, locate_table, row_cells
from .text import cell_text

logger = logging.getLogger('llautofill.standings')

_COUNT = re.compile(r'[0-9]+')
_DECIMAL = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def parse_count(text: str) -> Optional[int]:
    """
    Parse a W/L/T cell; None unless it is a plain non-negative whole number.

    Examples:
        "12" -> 12
        "1_0" -> None
        "-1" -> None
    """
    if not _COUNT.fullmatch(text):
        return None
    return int(text)


def parse_decimal(text: str) -> Optional[float]:
    """Parse a TCA/PCAA cell; None for empty or non-numeric text (no exponents, no '_')."""
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def parse_standings(html: str) -> Optional[StandingsIndex]:
    """
    Build the standings index from a rundle standings page.

    The standings table is the first table whose header row contains the
    exact cells PLAYER, W, L, T, TCA and PCAA. RANK is optional; when it is
    missing (or a row's rank cell is blank) the rank is the row's 1-based
    position in the table body.

    Rows are discarded individually when their name is empty or any of
    W, L, T, TCA, PCAA fails to parse. Later rows with the same display
    name overwrite earlier ones.

    Args:
        html: Raw HTML text of the standings page

    Returns:
        Dict mapping display name (as printed) to StandingsEntry, or None if
        no standings table exists or no row survived parsing
    """
    soup = BeautifulSoup(html, 'html.parser')
    table = locate_table(soup, STANDINGS_SELECTORS, STANDINGS_HEADERS, MatchMode.EXACT)
    if table is None:
        logger.warning('Standings table not found: header scan failed')
        return None

    headers = header_texts(table) or []
    col = {token: column_index(headers, token) for token in STANDINGS_HEADERS}
    rank_col = column_index(headers, 'RANK')

    index: StandingsIndex = {}
    for position, row in enumerate(body_rows(table)):
        cells = row_cells(row)
        texts = [cell_text(c) for c in cells]
        if not any(texts):
            continue

        def text_at(idx: int) -> str:
            return texts[idx] if 0 <= idx < len(texts) else ''

        name = text_at(col['PLAYER'])
        if not name:
            continue

        wins = parse_count(text_at(col['W']))
        losses = parse_count(text_at(col['L']))
        ties = parse_count(text_at(col['T']))
        tca = parse_decimal(text_at(col['TCA']))
        pcaa = parse_decimal(text_at(col['PCAA']))
        if wins is None or losses is None or ties is None or tca is None or pcaa is None:
            logger.debug(f'Skipping standings row {position + 1} ({name}): unparseable numbers')
            continue

        rank = text_at(rank_col) or str(position + 1)
        index[name] = StandingsEntry(
            display_name=name,
            tca=tca,
            pcaa=pcaa,
            wins=wins,
            losses=losses,
            ties=ties,
            rank=rank,
        )

    logger.info(f'Parsed standings entries: {len(index)}')
    if not index:
        logger.warning('Standings table had no usable rows')
        return None
    return index
