"""Normalize upstream game payloads into GameRecord objects."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from digest.ingestion.schema import GameRecord

logger = logging.getLogger(__name__)

REGULATION_PERIODS = 4

_TRUE_STRINGS = {"true", "1", "yes", "y", "final"}


def _first(payload: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _safe_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _safe_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _clean_name(value: Any) -> str:
    if isinstance(value, dict):
        value = value.get("name") or value.get("school")
    if not isinstance(value, str):
        return ""
    return value.strip()


def _periods_played(payload: dict[str, Any]) -> int:
    periods = _safe_int(payload.get("periods"))
    if periods is None:
        line_scores = _first(payload, "home_line_scores", "homeLineScores")
        if isinstance(line_scores, list) and line_scores:
            periods = len(line_scores)
    if periods is None or periods < REGULATION_PERIODS:
        return REGULATION_PERIODS
    return periods


def _tags(payload: dict[str, Any]) -> list[str]:
    tags = payload.get("tags")
    if not isinstance(tags, list):
        return []
    return [str(tag) for tag in tags if tag is not None and str(tag).strip()]


def normalize_game(
    payload: dict[str, Any],
    season: int | None = None,
    week: int | None = None,
    scope: str | None = None,
) -> GameRecord | None:
    """Map one upstream payload to a GameRecord.

    Returns None when the payload has no usable team names.
    """

    home_team = _clean_name(_first(payload, "home_team", "homeTeam"))
    away_team = _clean_name(_first(payload, "away_team", "awayTeam"))
    if not home_team or not away_team:
        return None

    game_id = payload.get("id")
    return GameRecord(
        id="" if game_id is None else str(game_id),
        home_team=home_team,
        away_team=away_team,
        home_score=_safe_int(_first(payload, "home_points", "homePoints", "home_score")),
        away_score=_safe_int(_first(payload, "away_points", "awayPoints", "away_score")),
        completed=_safe_bool(payload.get("completed")),
        periods_played=_periods_played(payload),
        conference_game=_safe_bool(_first(payload, "conference_game", "conferenceGame")),
        home_id=_safe_int(_first(payload, "home_id", "homeId")) or 0,
        away_id=_safe_int(_first(payload, "away_id", "awayId")) or 0,
        tags=_tags(payload),
        season=season,
        week=week,
        scope=scope,
    )


def normalize_games(
    payloads: Iterable[Any],
    season: int | None = None,
    week: int | None = None,
    scope: str | None = None,
) -> list[GameRecord]:
    """Normalize upstream payloads, keeping ineligible games in the result."""

    records: list[GameRecord] = []
    for index, payload in enumerate(payloads):
        if not isinstance(payload, dict):
            logger.warning("Skipping non-object game payload at index=%s", index)
            continue
        record = normalize_game(payload, season, week, scope)
        if record is None:
            logger.warning(
                "Skipping game payload without team names id=%s",
                payload.get("id"),
            )
            continue
        if not record.is_eligible:
            logger.info(
                "Game id=%s %s vs %s is not eligible for ranking (completed=%s)",
                record.id,
                record.home_team,
                record.away_team,
                record.completed,
            )
        records.append(record)
    return records
