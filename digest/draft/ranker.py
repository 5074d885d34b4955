"""Excitement ranking for completed games."""

from __future__ import annotations

from typing import Iterable

from digest.ingestion.schema import GameRecord

TOP_GAMES_LIMIT = 5

CLOSE_MARGIN = 8
# A 28-24 final earns both close-game bonuses.
ONE_POSSESSION_MARGIN = 4
SHOOTOUT_POINTS = 70
BIG_SHOOTOUT_POINTS = 80
REGULATION_PERIODS = 4


def annotate_derived(record: GameRecord) -> GameRecord:
    """Fill score_differential, total_points and winner_side in place."""
    if not record.is_eligible:
        raise ValueError(f"Game {record.id!r} has no final score")
    record.score_differential = abs(record.home_score - record.away_score)
    record.total_points = record.home_score + record.away_score
    # A tied score resolves to the home side.
    record.winner_side = "home" if record.home_score >= record.away_score else "away"
    return record


def score_game(record: GameRecord) -> int:
    """Sum the excitement bonuses for an annotated record."""
    differential = record.score_differential
    total = record.total_points
    if differential is None or total is None:
        raise ValueError(f"Game {record.id!r} is missing derived fields")

    score = 0
    if differential <= CLOSE_MARGIN:
        score += 6
    if differential <= ONE_POSSESSION_MARGIN:
        score += 4
    if differential == 0:
        score += 3

    if total > SHOOTOUT_POINTS:
        score += 3
    if total > BIG_SHOOTOUT_POINTS:
        score += 2

    if record.conference_game:
        score += 1

    if record.periods_played == REGULATION_PERIODS + 1:
        score += 4
    elif record.periods_played > REGULATION_PERIODS + 1:
        score += 6

    return score


def rank_games(records: Iterable[GameRecord], limit: int = TOP_GAMES_LIMIT) -> list[GameRecord]:
    """Return up to *limit* eligible games, most exciting first.

    Games with equal scores keep their input order.
    """

    ranked: list[GameRecord] = []
    for record in records:
        if not record.is_eligible:
            continue
        annotate_derived(record)
        record.rank_score = score_game(record)
        ranked.append(record)

    ranked.sort(key=lambda game: game.rank_score, reverse=True)
    return ranked[:limit]
