"""Expected-performance metrics for a player against one opponent."""

from .models import Metrics, StandingsEntry, SubjectStats


def compute_metrics(subject: SubjectStats, opponent: StandingsEntry) -> Metrics:
    """
    Compute expected performance in both directions.

    Formulas:
        - PEPA  = player TCA * opponent PCAA
        - OEPA  = opponent TCA * player PCAA
        - PEPAA = PEPA / opponent games played (0 when no games played)
        - OEPAA = OEPA / opponent games played (0 when no games played)

    No rounding is applied here.

    Args:
        subject: The profile owner's TCA/PCAA
        opponent: Opponent's standings entry

    Returns:
        Metrics with all four figures and the games-played denominator
    """
    games_played = opponent.games_played
    pepa = subject.tca * opponent.pcaa
    oepa = opponent.tca * subject.pcaa

    pepaa = pepa / games_played if games_played > 0 else 0.0
    oepaa = oepa / games_played if games_played > 0 else 0.0

    return Metrics(
        pepa=pepa,
        oepa=oepa,
        pepaa=pepaa,
        oepaa=oepaa,
        games_played=games_played,
    )
