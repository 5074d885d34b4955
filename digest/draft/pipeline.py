"""Fetch, rank, write up and assemble one weekly draft."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping

from digest.draft.assembler import assemble_draft
from digest.draft.commentary import generate_opinions, generate_whats_next
from digest.draft.mapper import map_to_schema
from digest.draft.ranker import rank_games
from digest.draft.recap import synthesize_recap
from digest.draft.writer import write_draft
from digest.ingestion.cfbd_client import UpstreamFetchError, fetch_games_async
from digest.ingestion.normalizer import normalize_games
from digest.ingestion.scopes import get_scope
from digest.ingestion.stub import stub_games
from digest.schemas import DraftDocument
from digest.settings import DraftSettings
from digest.team_logos import team_metadata

logger = logging.getLogger(__name__)

GameFetcher = Callable[..., Awaitable[list[dict[str, Any]]]]


class DraftGenerationError(RuntimeError):
    pass


class EmptyUpstreamData(DraftGenerationError):
    pass


class NoEligibleGames(DraftGenerationError):
    pass


@dataclass(frozen=True)
class GenerationResult:
    document: DraftDocument
    path: Path
    used_stub: bool


async def load_payloads(
    settings: DraftSettings,
    fetcher: GameFetcher = fetch_games_async,
) -> tuple[list[dict[str, Any]], bool]:
    """Return upstream payloads, or the stub dataset when the fetch fails."""
    try:
        payloads = await fetcher(
            settings.season,
            settings.week,
            settings.scope,
            api_key=settings.cfbd_api_key,
            base_url=settings.cfbd_base_url,
            timeout_seconds=settings.cfbd_timeout_seconds,
        )
        return payloads, False
    except UpstreamFetchError as exc:
        logger.warning("Upstream fetch failed (%s); using stub data.", exc)
        return stub_games(), True


def build_draft(
    payloads: list[dict[str, Any]],
    settings: DraftSettings,
    *,
    team_data: Mapping[str, Mapping[str, str]] | None = None,
    rng: random.Random | None = None,
    generated_at: datetime | None = None,
) -> DraftDocument:
    """Run the synchronous stages over already-fetched payloads."""
    scope = get_scope(settings.scope)
    if scope is None:
        raise ValueError(f"Unsupported scope: {settings.scope}")
    if not payloads:
        raise EmptyUpstreamData(
            f"No games returned for season={settings.season} week={settings.week} scope={settings.scope}"
        )

    records = normalize_games(payloads, settings.season, settings.week, scope.key)
    ranked = rank_games(records)
    if not ranked:
        raise NoEligibleGames(
            f"None of {len(records)} games are completed with final scores "
            f"(season={settings.season} week={settings.week} scope={settings.scope})"
        )
    logger.info(
        "Ranked %s of %s games: %s",
        len(ranked),
        len(records),
        ", ".join(f"{game.home_team} vs {game.away_team} ({game.rank_score})" for game in ranked),
    )

    lookup = team_metadata(scope.key) if team_data is None else team_data
    published = [map_to_schema(synthesize_recap(game, rng), lookup) for game in ranked]

    return assemble_draft(
        published,
        generate_opinions(published),
        generate_whats_next(settings.week),
        season=settings.season,
        week=settings.week,
        scope=scope.key,
        sources=scope.sources,
        generated_at=generated_at,
    )


async def generate_draft(
    settings: DraftSettings,
    *,
    fetcher: GameFetcher = fetch_games_async,
    rng: random.Random | None = None,
    generated_at: datetime | None = None,
) -> GenerationResult:
    """Produce and persist the draft for ``settings``.

    Raises EmptyUpstreamData or NoEligibleGames without writing anything.
    """

    logger.info(
        "Generating draft for %s Week %s, %s...",
        settings.scope.upper(),
        settings.week,
        settings.season,
    )
    payloads, used_stub = await load_payloads(settings, fetcher)
    document = build_draft(payloads, settings, rng=rng, generated_at=generated_at)
    path = write_draft(document, settings.data_dir)
    return GenerationResult(document=document, path=path, used_stub=used_stub)
