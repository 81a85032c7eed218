"""Sanity checks for parsed standings data."""

from .models import StandingsEntry, StandingsIndex


def validate_standings_entry(entry: StandingsEntry) -> list[str]:
    """
    Check that a standings line is plausible.

    Sanity checks:
    - TCA and PCAA are not negative
    - The player has played at least one match (otherwise metrics are 0)
    - The rank is not blank

    Args:
        entry: StandingsEntry to check

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if entry.tca < 0:
        warnings.append(f'{entry.display_name} has negative TCA ({entry.tca})')
    if entry.pcaa < 0:
        warnings.append(f'{entry.display_name} has negative PCAA ({entry.pcaa})')

    if entry.games_played == 0:
        warnings.append(
            f'{entry.display_name} has no games played (expected performance will be 0)'
        )

    if not entry.rank.strip():
        warnings.append(f'{entry.display_name} has a blank rank')

    return warnings


def validate_standings(index: StandingsIndex) -> list[str]:
    """
    Check every entry of a standings index.

    Also flags display names that are truncated (contain a '.') and share
    their prefix with another entry, since truncation matching takes the
    first of them.

    Args:
        index: Standings index from parse_standings()

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings: list[str] = []

    for entry in index.values():
        warnings.extend(validate_standings_entry(entry))

    names = list(index)
    for name in names:
        if '.' not in name:
            continue
        prefix = name.split('.', 1)[0]
        if not prefix:
            continue
        rivals = [other for other in names if other != name and other.startswith(prefix)]
        if rivals:
            warnings.append(
                f'Truncated name {name} is ambiguous with: {", ".join(sorted(rivals))}'
            )

    return warnings
