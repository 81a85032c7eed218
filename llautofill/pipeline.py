"""End-to-end autofill of a profile page's results table."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .config import get_config
from .fetcher import Fetcher, fetch, fetch_standings_html
from .models import FillInstruction, SeasonData, StandingsIndex, SubjectStats
from .profile import get_current_season_data
from .reconciler import find_results_table, read_result_rows, reconcile
from .render import apply_fill_instructions
from .schemas import AutofillConfig
from .standings import parse_standings

logger = logging.getLogger('llautofill.pipeline')


@dataclass
class AutofillResult:
    """Everything produced by one autofill run."""
    document: BeautifulSoup
    instructions: list[FillInstruction] = field(default_factory=list)
    index: StandingsIndex = field(default_factory=dict)
    season: Optional[SeasonData] = None

    @property
    def rows_filled(self) -> int:
        return len(self.instructions)


def reconcile_documents(
    results_document: Tag,
    standings_html: str,
    subject: SubjectStats,
    log: Optional[logging.Logger] = None,
) -> Optional[tuple[list[FillInstruction], StandingsIndex]]:
    """
    Reconcile a results page against an already retrieved standings page.

    Args:
        results_document: Parsed page containing the results table
        standings_html: Raw HTML of the rundle standings page
        subject: The profile owner's TCA/PCAA
        log: Diagnostics sink passed to reconcile()

    Returns:
        (fill instructions, standings index), or None if either table
        could not be found
    """
    results_table = find_results_table(results_document)
    if results_table is None:
        return None
    return _reconcile_table(results_table, standings_html, subject, log)


def _reconcile_table(
    results_table: Tag,
    standings_html: str,
    subject: SubjectStats,
    log: Optional[logging.Logger] = None,
) -> Optional[tuple[list[FillInstruction], StandingsIndex]]:
    index = parse_standings(standings_html)
    if index is None:
        return None

    rows = read_result_rows(results_table)
    return reconcile(rows, index, subject, log=log), index


def autofill_profile(
    profile_html: str,
    profile_url: str = '',
    fetcher: Fetcher = fetch,
    config: Optional[AutofillConfig] = None,
    standings_html: Optional[str] = None,
) -> Optional[AutofillResult]:
    """
    Fill the blank result, record and rank cells of a profile page.

    Steps:
        1. Locate the results table and the current-season line
        2. Fetch the rundle standings page (unless standings_html is given)
        3. Reconcile rows against the standings and write the cells

    Args:
        profile_html: Raw HTML of the profile page
        profile_url: URL of the profile page (resolves the rundle link)
        fetcher: Fetch function for the standings page
        config: Optional config (default: get_config())
        standings_html: Pre-fetched standings HTML, skips the fetch

    Returns:
        AutofillResult with the annotated document, or None when a required
        table or link was not found

    Raises:
        RetrievalError: If the standings page could not be fetched
    """
    config = config or get_config()
    document = BeautifulSoup(profile_html, 'html.parser')

    results_table = find_results_table(document)
    if results_table is None:
        return None
    season = get_current_season_data(document, base_url=profile_url or config.base_url)
    if season is None:
        logger.warning('Rundle link not found')
        return None

    if standings_html is None:
        standings_html = fetch_standings_html(season.rundle_url, fetcher)

    reconciled = _reconcile_table(results_table, standings_html, season.subject)
    if reconciled is None:
        return None
    instructions, index = reconciled

    apply_fill_instructions(instructions, opacity=config.shade_opacity)
    return AutofillResult(document=document, instructions=instructions, index=index, season=season)
