"""Profile page gate and current-season data extraction."""

import logging
import re
from typing import Optional
from urllib.parse import urljoin, urlsplit

from bs4.element import Tag

from .constants import (
    CURRENT_SEASON_HEADERS,
    CURRENT_SEASON_SELECTORS,
    PROFILE_PATH,
    STANDINGS_LINK_SELECTOR,
)
from .models import SeasonData, SubjectStats
from .standings import parse_decimal
from .tables import MatchMode, body_rows, column_index, header_texts, locate_table, row_cells
from .text import cell_text

logger = logging.getLogger('llautofill.profile')

# "?12345" or "?12345&1"
_PROFILE_QUERY = re.compile(r'^[1-9]\d*(?:&1)?$')


def is_profile_url(url: str) -> bool:
    """
    Check whether a URL is a player profile page the autofill may run on.

    Examples:
        "https://www.learnedleague.com/profiles.php?12345" -> True
        "https://www.learnedleague.com/profiles.php?12345&1" -> True
        "https://www.learnedleague.com/profiles.php?0" -> False
        "https://www.learnedleague.com/standings.php?98&A_Pacific" -> False
    """
    parts = urlsplit(url)
    if not parts.path.lower().endswith(PROFILE_PATH):
        return False
    return bool(_PROFILE_QUERY.match(parts.query))


def get_current_season_data(document: Tag, base_url: str = '') -> Optional[SeasonData]:
    """
    Read the profile owner's TCA/PCAA and rundle standings link.

    The current-season table is the first ``table.std`` whose header row has
    the exact cells W, L, T, PTS, TMP, TCA, PCAA and RANK. Its first body row
    holds the player's line; the first cell links to the rundle standings.

    Args:
        document: Parsed profile page
        base_url: URL the page was loaded from, used to resolve relative links

    Returns:
        SeasonData, or None if the table, link or either stat is missing
    """
    table = locate_table(
        document, CURRENT_SEASON_SELECTORS, CURRENT_SEASON_HEADERS, MatchMode.EXACT
    )
    if table is None:
        logger.warning('Current season table not found')
        return None

    rows = body_rows(table)
    if not rows:
        return None
    cells = row_cells(rows[0])
    headers = header_texts(table) or []
    tca_col = column_index(headers, 'TCA')
    pcaa_col = column_index(headers, 'PCAA')

    anchor = cells[0].select_one(STANDINGS_LINK_SELECTOR) if cells else None
    tca = parse_decimal(cell_text(cells[tca_col])) if tca_col < len(cells) else None
    pcaa = parse_decimal(cell_text(cells[pcaa_col])) if pcaa_col < len(cells) else None
    if anchor is None or tca is None or pcaa is None:
        return None

    return SeasonData(
        rundle_url=urljoin(base_url, anchor.get('href', '')),
        subject=SubjectStats(tca=tca, pcaa=pcaa),
    )
