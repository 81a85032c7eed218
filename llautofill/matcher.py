"""Resolution of results-table opponent names against the standings index."""

from typing import Callable, Optional, Sequence

from .models import StandingsEntry, StandingsIndex

MatchStrategy = Callable[[str, StandingsIndex], Optional[StandingsEntry]]


def _before_dot(text: str) -> str:
    """Text up to (excluding) the first '.', or the whole text if there is none."""
    return text.split('.', 1)[0]


def match_exact(opponent: str, index: StandingsIndex) -> Optional[StandingsEntry]:
    """Direct lookup by display name."""
    return index.get(opponent)


def match_truncated(opponent: str, index: StandingsIndex) -> Optional[StandingsEntry]:
    """
    Match names the site has truncated with a trailing period on either page.

    For each key in index order, the key matches when its text before the
    first '.' is a prefix of the opponent name, or when the opponent's text
    before its first '.' is a prefix of the key. The first qualifying key wins.

    Examples:
        "Smith, John" matches key "Smith, Jo."
        "Smith, Jo." matches key "Smith, John"
    """
    opp_prefix = _before_dot(opponent)
    for key, entry in index.items():
        key_prefix = _before_dot(key)
        if key_prefix and opponent[: len(key_prefix)] == key_prefix:
            return entry
        if opp_prefix and key[: len(opp_prefix)] == opp_prefix:
            return entry
    return None


# Tried in order; the first strategy returning an entry wins
MATCH_STRATEGIES: tuple[MatchStrategy, ...] = (match_exact, match_truncated)


def resolve(
    opponent: str,
    index: StandingsIndex,
    strategies: Sequence[MatchStrategy] = MATCH_STRATEGIES,
) -> Optional[StandingsEntry]:
    """
    Find the standings entry for an opponent display name.

    Args:
        opponent: Normalized opponent name from the results table
        index: Standings index from parse_standings()
        strategies: Ordered matching strategies (default: exact, then truncated)

    Returns:
        The matched StandingsEntry, or None if no strategy matched
    """
    for strategy in strategies:
        entry = strategy(opponent, index)
        if entry is not None:
            return entry
    return None
