"""Fixed dataset used when the upstream provider cannot be reached."""

from __future__ import annotations

import copy

_STUB_GAMES: list[dict] = [
    {
        "id": "2025-08-30-278-290",
        "home_team": "Fresno State",
        "away_team": "Georgia Southern",
        "home_id": 278,
        "away_id": 290,
        "home_points": 28,
        "away_points": 24,
        "completed": True,
        "periods": 4,
        "conference_game": False,
    }
]


def stub_games() -> list[dict]:
    """Return a fresh copy of the stub payloads."""
    return copy.deepcopy(_STUB_GAMES)
