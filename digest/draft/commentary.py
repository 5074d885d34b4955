"""Static commentary sections until an opinions source exists."""

from __future__ import annotations

from typing import Sequence

from digest.schemas import PublishedGame, WhatsNextItem

_OPINIONS = (
    "Defensive coordinators are winning the early-season chess matches with aggressive third-down schemes.",
    "Quarterback efficiency on first and second down remains the strongest predictor of offensive success.",
    "Red-zone execution separated close games this week; teams that settled for field goals early paid the price later.",
    "Turnover margin continues to be the most reliable indicator of game outcomes, with a +2 swing worth roughly 10 points.",
)


def generate_opinions(games: Sequence[PublishedGame]) -> list[str]:
    return list(_OPINIONS)


def generate_whats_next(week: int) -> list[WhatsNextItem]:
    return [
        WhatsNextItem(when="Fri", match="TBD", hook="Friday night spotlight"),
        WhatsNextItem(when="Sat", match="TBD", hook="Weekend showcase"),
    ]
