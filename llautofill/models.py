"""Data models for the LL autofill engine."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class StandingsEntry:
    """One player's line in the rundle standings."""
    display_name: str  # exactly as printed on the standings page
    tca: float
    pcaa: float
    wins: int
    losses: int
    ties: int
    rank: str

    @property
    def record(self) -> str:
        return f'{self.wins}-{self.losses}-{self.ties}'

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties


# display name -> entry; keys unique, later duplicates overwrite earlier ones
StandingsIndex = Dict[str, StandingsEntry]


@dataclass(frozen=True)
class SubjectStats:
    """The profile owner's own TCA/PCAA, never looked up in the standings."""
    tca: float
    pcaa: float


@dataclass(frozen=True)
class SeasonData:
    """Current-season data read from a profile page."""
    rundle_url: str
    subject: SubjectStats


@dataclass(frozen=True)
class Metrics:
    """Expected-performance figures for one subject/opponent pairing."""
    pepa: float
    oepa: float
    pepaa: float
    oepaa: float
    games_played: int


@dataclass
class ResultRow:
    """One row of the profile's results table."""
    match_day_text: str
    opponent_display: str
    result_blank: bool
    record_blank: bool
    rank_blank: bool
    handle: Any = None  # caller's own row representation


@dataclass(frozen=True)
class Shade:
    """Which halves of the result cell are coloured."""
    left_red: bool = False
    right_green: bool = False

    @property
    def active(self) -> bool:
        return self.left_red or self.right_green


@dataclass
class FillInstruction:
    """What to write into a result row; fields stay None for cells left alone."""
    row_handle: Any
    result_text: Optional[str] = None
    tooltip_text: Optional[str] = None
    shade: Optional[Shade] = None
    record_text: Optional[str] = None
    rank_text: Optional[str] = None
