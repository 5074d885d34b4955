from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence

from digest.schemas import DraftDocument, DraftMeta, PublishedGame, WhatsNextItem


def assemble_draft(
    games: Sequence[PublishedGame],
    opinions: Iterable[str],
    whats_next: Iterable[WhatsNextItem],
    *,
    season: int,
    week: int,
    scope: str,
    sources: Iterable[str],
    generated_at: datetime | None = None,
) -> DraftDocument:
    timestamp = generated_at or datetime.now(timezone.utc)
    return DraftDocument(
        meta=DraftMeta(
            season=season,
            week=week,
            scope=scope,
            generated_at=timestamp.isoformat(),
            sources=tuple(sources),
        ),
        top_games=tuple(games),
        quick_opinions=tuple(opinions),
        whats_next=tuple(whats_next),
    )
