from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from datetime import date
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = "cfb"
DEFAULT_CFBD_BASE_URL = "https://api.collegefootballdata.com"
DEFAULT_TIMEOUT_SECONDS = 15
DEFAULT_DATA_DIR = "data"


@dataclass(frozen=True)
class DraftSettings:
    season: int
    week: int
    scope: str
    cfbd_api_key: str | None
    cfbd_base_url: str
    cfbd_timeout_seconds: int
    data_dir: str

    def with_overrides(self, **changes) -> "DraftSettings":
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def load_settings(environ: Mapping[str, str] | None = None) -> DraftSettings:
    env = os.environ if environ is None else environ
    api_key = (env.get("CFBD_API_KEY") or "").strip() or None
    return DraftSettings(
        season=_int_env(env, "SEASON", date.today().year),
        week=_int_env(env, "WEEK", 1),
        scope=(env.get("SCOPE") or DEFAULT_SCOPE).strip().lower(),
        cfbd_api_key=api_key,
        cfbd_base_url=(env.get("CFBD_BASE_URL") or DEFAULT_CFBD_BASE_URL).rstrip("/"),
        cfbd_timeout_seconds=_int_env(env, "CFBD_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        data_dir=env.get("DRAFT_DATA_DIR") or DEFAULT_DATA_DIR,
    )
