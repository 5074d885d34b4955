from __future__ import annotations

from typing import Mapping

from digest.ingestion.schema import GameRecord
from digest.schemas import GameIds, PublishedGame, TeamOut

SCORE_SEPARATOR = "–"


def _team_out(name: str, team_data: Mapping[str, Mapping[str, str]]) -> TeamOut:
    entry = team_data.get(name) or {}
    return TeamOut(
        name=name,
        abbr=entry.get("abbr") or name[:4].upper(),
        logo=entry.get("logo") or "",
    )


def format_final(record: GameRecord) -> str:
    return f"{record.home_score}{SCORE_SEPARATOR}{record.away_score}"


def map_to_schema(
    record: GameRecord,
    team_data: Mapping[str, Mapping[str, str]] | None = None,
) -> PublishedGame:
    """Project a synthesized record into the published game shape."""
    lookup = team_data or {}
    return PublishedGame(
        home=_team_out(record.home_team, lookup),
        away=_team_out(record.away_team, lookup),
        final=format_final(record),
        recap=record.recap or "",
        one_stat=record.one_stat or "",
        why_it_mattered=record.why_it_mattered or "",
        tags=tuple(record.tags),
        ids=GameIds(
            home_id=record.home_id or 0,
            away_id=record.away_id or 0,
            game_id=record.id or "",
        ),
    )
