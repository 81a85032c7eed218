"""Filling blank result/record/rank cells from the rundle standings."""

import logging
import re
from typing import NamedTuple, Optional

from bs4.element import Tag

from .constants import (
    MATCH_DAY_MAX,
    MATCH_DAY_MIN,
    MATCH_DAY_PATTERN,
    METRIC_DECIMALS,
    RESULT_SEPARATOR,
    RESULTS_HEADERS,
    RESULTS_SELECTORS,
)
from .matcher import resolve
from .metrics import compute_metrics
from .models import (
    FillInstruction,
    Metrics,
    ResultRow,
    Shade,
    StandingsEntry,
    StandingsIndex,
    SubjectStats,
)
from .tables import MatchMode, body_rows, column_index, header_texts, locate_table, row_cells
from .text import cell_text, to_comparable

logger = logging.getLogger('llautofill.reconciler')

_MATCH_DAY_RE = re.compile(MATCH_DAY_PATTERN)


class RowCells(NamedTuple):
    """Handle to the writable cells of one results row."""
    row: Tag
    result: Tag
    record: Tag
    rank: Tag


def parse_match_day(text: str) -> Optional[int]:
    """
    Extract the match day number from a results-table cell.

    Examples:
        "Match Day 7" -> 7
        "MD12" -> 12
        "Week 3" -> None
    """
    match = _MATCH_DAY_RE.search(to_comparable(text))
    if not match:
        return None
    return int(match.group(1))


def find_results_table(document: Tag) -> Optional[Tag]:
    """Locate the profile's per-match results table."""
    table = locate_table(document, RESULTS_SELECTORS, RESULTS_HEADERS, MatchMode.SUBSTRING)
    if table is None:
        logger.warning('Results table not found')
    else:
        logger.info('Results table found')
    return table


def read_result_rows(table: Tag) -> list[ResultRow]:
    """
    Read the rows of a results table.

    Column positions come from the header row (first header containing each
    of MATCH DAY, OPPONENT, RESULT, RECORD, RANK). Rows too short to reach
    every column are left out.

    Args:
        table: Table returned by find_results_table()

    Returns:
        List of ResultRow in table order, each with a RowCells handle
    """
    headers = header_texts(table) or []
    match_day_col, opponent_col, result_col, record_col, rank_col = (
        column_index(headers, token, MatchMode.SUBSTRING) for token in RESULTS_HEADERS
    )
    needed = (match_day_col, opponent_col, result_col, record_col, rank_col)
    if min(needed) < 0:
        return []

    rows = []
    for tr in body_rows(table):
        cells = row_cells(tr)
        if len(cells) <= max(needed):
            continue
        rows.append(
            ResultRow(
                match_day_text=cell_text(cells[match_day_col]),
                opponent_display=cell_text(cells[opponent_col]),
                result_blank=not cell_text(cells[result_col]),
                record_blank=not cell_text(cells[record_col]),
                rank_blank=not cell_text(cells[rank_col]),
                handle=RowCells(tr, cells[result_col], cells[record_col], cells[rank_col]),
            )
        )
    return rows


def _format_raw(value: float) -> str:
    """Print a stat as the site does: no trailing .0 on whole numbers."""
    return str(int(value)) if float(value).is_integer() else repr(value)


def format_result_text(metrics: Metrics) -> str:
    """Result cell text: "OEPAA⋅PEPAA" with three decimals each."""
    return (
        f'{metrics.oepaa:.{METRIC_DECIMALS}f}{RESULT_SEPARATOR}'
        f'{metrics.pepaa:.{METRIC_DECIMALS}f}'
    )


def format_tooltip(subject: SubjectStats, opponent: StandingsEntry, metrics: Metrics) -> str:
    """Tooltip for the result cell listing the raw inputs and all four metrics."""
    d = METRIC_DECIMALS
    return '\n'.join(
        [
            f'Opponent: TCA={_format_raw(opponent.tca)}, PCAA={_format_raw(opponent.pcaa)}',
            f'Player: TCA={_format_raw(subject.tca)}, PCAA={_format_raw(subject.pcaa)}',
            f'PEPA={metrics.pepa:.{d}f}, OEPA={metrics.oepa:.{d}f}',
            f'PEPAA={metrics.pepaa:.{d}f}, OEPAA={metrics.oepaa:.{d}f} '
            f'(games={metrics.games_played})',
        ]
    )


def shade_for(metrics: Metrics) -> Shade:
    """Right half green when the player is favoured, left half red when the opponent is."""
    return Shade(
        left_red=metrics.oepaa > metrics.pepaa,
        right_green=metrics.pepaa > metrics.oepaa,
    )


def _is_eligible(row: ResultRow) -> bool:
    match_day = parse_match_day(row.match_day_text)
    if match_day is None or not (MATCH_DAY_MIN <= match_day <= MATCH_DAY_MAX):
        return False
    if not (row.result_blank or row.record_blank or row.rank_blank):
        return False
    return bool(row.opponent_display)


def reconcile(
    rows: list[ResultRow],
    index: StandingsIndex,
    subject: SubjectStats,
    log: Optional[logging.Logger] = None,
) -> list[FillInstruction]:
    """
    Decide what to write into each eligible results row.

    A row is eligible when its match day is within 2-25, at least one of
    result/record/rank is blank, and it names an opponent. Opponents that
    cannot be resolved are logged and skipped. Only blank columns receive
    text.

    Args:
        rows: Rows from read_result_rows() (or any caller-built ResultRow list)
        index: Standings index from parse_standings()
        subject: The profile owner's TCA/PCAA
        log: Sink for diagnostics (default: the module logger)

    Returns:
        One FillInstruction per filled row, in input order
    """
    log = log or logger
    instructions = []

    for row in rows:
        if not _is_eligible(row):
            continue

        opponent = resolve(row.opponent_display, index)
        if opponent is None:
            log.warning(f'Opponent not found in standings: {row.opponent_display}')
            continue

        metrics = compute_metrics(subject, opponent)
        instruction = FillInstruction(row_handle=row.handle)

        if row.result_blank:
            instruction.result_text = format_result_text(metrics)
            instruction.tooltip_text = format_tooltip(subject, opponent, metrics)
            instruction.shade = shade_for(metrics)
        if row.record_blank:
            instruction.record_text = opponent.record
        if row.rank_blank:
            instruction.rank_text = opponent.rank

        instructions.append(instruction)

    log.info(f'Rows filled: {len(instructions)}')
    return instructions
