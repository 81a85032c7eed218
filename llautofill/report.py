"""Tabular views of standings and fill results for export."""

import polars as pl

from .models import FillInstruction, StandingsIndex

STANDINGS_SCHEMA = {
    'player': pl.Utf8,
    'rank': pl.Utf8,
    'wins': pl.Int64,
    'losses': pl.Int64,
    'ties': pl.Int64,
    'record': pl.Utf8,
    'tca': pl.Float64,
    'pcaa': pl.Float64,
}

FILLS_SCHEMA = {
    'row': pl.Int64,
    'result': pl.Utf8,
    'record': pl.Utf8,
    'rank': pl.Utf8,
    'player_favoured': pl.Boolean,
    'opponent_favoured': pl.Boolean,
}


def standings_frame(index: StandingsIndex) -> pl.DataFrame:
    """One row per standings entry, in index order."""
    rows = [
        {
            'player': entry.display_name,
            'rank': entry.rank,
            'wins': entry.wins,
            'losses': entry.losses,
            'ties': entry.ties,
            'record': entry.record,
            'tca': entry.tca,
            'pcaa': entry.pcaa,
        }
        for entry in index.values()
    ]
    return pl.DataFrame(rows, schema=STANDINGS_SCHEMA)


def fills_frame(instructions: list[FillInstruction]) -> pl.DataFrame:
    """
    One row per fill instruction.

    Columns left blank by an instruction are null; the favoured flags are
    null when the result cell was not filled.
    """
    rows = []
    for position, instruction in enumerate(instructions, 1):
        shade = instruction.shade
        rows.append(
            {
                'row': position,
                'result': instruction.result_text,
                'record': instruction.record_text,
                'rank': instruction.rank_text,
                'player_favoured': shade.right_green if shade else None,
                'opponent_favoured': shade.left_red if shade else None,
            }
        )
    return pl.DataFrame(rows, schema=FILLS_SCHEMA)
