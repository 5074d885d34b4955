"""Canonical game record shared by normalize -> rank -> synthesize -> map."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class GameRecord(BaseModel):
    """
    One upstream game after normalization.

    The ranker fills the derived fields and ``rank_score``; the recap
    synthesizer fills the three text fields.
    """

    # Required fields
    home_team: str = Field(min_length=1)
    away_team: str = Field(min_length=1)

    # Optional fields
    id: str = ""
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    completed: bool = False
    periods_played: int = Field(default=4, ge=4)
    conference_game: bool = False
    home_id: int = 0
    away_id: int = 0
    tags: list[str] = Field(default_factory=list)

    # Provenance
    season: Optional[int] = None
    week: Optional[int] = None
    scope: Optional[str] = None

    # Ranker annotations
    score_differential: Optional[int] = None
    total_points: Optional[int] = None
    winner_side: Optional[Literal["home", "away"]] = None
    rank_score: Optional[int] = None

    # Synthesizer annotations
    recap: Optional[str] = None
    one_stat: Optional[str] = None
    why_it_mattered: Optional[str] = None

    @property
    def is_eligible(self) -> bool:
        if not self.completed:
            return False
        if self.home_score is None or self.away_score is None:
            return False
        return self.home_score >= 0 and self.away_score >= 0

    @property
    def winner(self) -> str:
        return self.home_team if self.winner_side == "home" else self.away_team

    @property
    def loser(self) -> str:
        return self.away_team if self.winner_side == "home" else self.home_team

    @property
    def winner_score(self) -> Optional[int]:
        return self.home_score if self.winner_side == "home" else self.away_score

    @property
    def loser_score(self) -> Optional[int]:
        return self.away_score if self.winner_side == "home" else self.home_score
