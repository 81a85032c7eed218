from .models import (
    FillInstruction,
    Metrics,
    ResultRow,
    SeasonData,
    Shade,
    StandingsEntry,
    StandingsIndex,
    SubjectStats,
)
from .text import normalize, to_comparable
from .tables import MatchMode, locate_table
from .standings import parse_standings
from .matcher import MATCH_STRATEGIES, match_exact, match_truncated, resolve
from .metrics import compute_metrics
from .reconciler import find_results_table, parse_match_day, read_result_rows, reconcile
from .profile import get_current_season_data, is_profile_url
from .fetcher import FetchResult, RetrievalError, fetch, fetch_standings_html
from .render import apply_fill_instructions
from .pipeline import AutofillResult, autofill_profile, reconcile_documents

__all__ = [
    # Models
    'FillInstruction',
    'Metrics',
    'ResultRow',
    'SeasonData',
    'Shade',
    'StandingsEntry',
    'StandingsIndex',
    'SubjectStats',
    # Text and table discovery
    'normalize',
    'to_comparable',
    'MatchMode',
    'locate_table',
    # Standings, matching and metrics
    'parse_standings',
    'MATCH_STRATEGIES',
    'match_exact',
    'match_truncated',
    'resolve',
    'compute_metrics',
    # Reconciliation
    'find_results_table',
    'parse_match_day',
    'read_result_rows',
    'reconcile',
    # Profile page
    'get_current_season_data',
    'is_profile_url',
    # Retrieval
    'FetchResult',
    'RetrievalError',
    'fetch',
    'fetch_standings_html',
    # Write-back and orchestration
    'apply_fill_instructions',
    'AutofillResult',
    'autofill_profile',
    'reconcile_documents',
]
