"""CollegeFootballData HTTP client for weekly game results."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests

from digest.ingestion.scopes import get_scope

logger = logging.getLogger(__name__)

GAMES_PATH = "/games"
SEASON_TYPE = "regular"
MAX_ERROR_SNIPPET = 300
DEFAULT_USER_AGENT = "weekly-digest/1.0 (+https://example.local)"


class UpstreamFetchError(RuntimeError):
    pass


def _truncate(value: str, limit: int = MAX_ERROR_SNIPPET) -> str:
    if len(value) <= limit:
        return value
    return value[:limit] + "...<truncated>"


def build_games_params(season: int, week: int, scope: str) -> dict[str, str]:
    scope_config = get_scope(scope)
    if scope_config is None:
        raise ValueError(f"Unsupported scope: {scope}")
    return {
        "year": str(season),
        "week": str(week),
        "seasonType": SEASON_TYPE,
        "division": scope_config.division,
    }


def fetch_games(
    season: int,
    week: int,
    scope: str,
    *,
    api_key: str | None,
    base_url: str,
    timeout_seconds: int = 15,
) -> list[dict[str, Any]]:
    """Fetch one week of regular-season games.

    Makes a single attempt. Any failure raises UpstreamFetchError.
    """

    if not api_key:
        raise UpstreamFetchError("Missing CFBD API key")

    url = f"{base_url.rstrip('/')}{GAMES_PATH}"
    params = build_games_params(season, week, scope)
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
        "User-Agent": DEFAULT_USER_AGENT,
    }

    try:
        response = requests.get(url, params=params, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise UpstreamFetchError(f"CFBD request failed: {exc}") from exc

    if response.status_code >= 400:
        raise UpstreamFetchError(
            f"CFBD API error {response.status_code}: {_truncate(response.text or '')}"
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise UpstreamFetchError(
            "CFBD returned non-JSON response: " + _truncate(response.text or "")
        ) from exc

    if not isinstance(payload, list):
        raise UpstreamFetchError(
            f"CFBD returned {type(payload).__name__}, expected a list of games"
        )

    logger.info(
        "Fetched %s games season=%s week=%s scope=%s",
        len(payload),
        season,
        week,
        scope,
    )
    return payload


async def fetch_games_async(season: int, week: int, scope: str, **kwargs) -> list[dict[str, Any]]:
    return await asyncio.to_thread(fetch_games, season, week, scope, **kwargs)
