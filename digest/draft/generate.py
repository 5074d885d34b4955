"""CLI entrypoint for weekly draft generation."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random

from digest.draft.pipeline import DraftGenerationError, generate_draft
from digest.ingestion.scopes import SCOPES
from digest.settings import DraftSettings, load_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate the weekly draft JSON (top games, opinions, what's next).",
    )
    parser.add_argument("--season", type=int, help="Season year (default: $SEASON or current year).")
    parser.add_argument("--week", type=int, help="Week number (default: $WEEK or 1).")
    parser.add_argument(
        "--scope",
        type=str,
        help=f"Scope key, one of {', '.join(sorted(SCOPES))} (default: $SCOPE or cfb).",
    )
    parser.add_argument("--data-dir", type=str, help="Output root (default: $DRAFT_DATA_DIR or data).")
    parser.add_argument("--seed", type=int, help="Seed for the rationale draw.")
    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> DraftSettings:
    settings = load_settings().with_overrides(
        season=args.season,
        week=args.week,
        scope=args.scope.strip().lower() if args.scope else None,
        data_dir=args.data_dir,
    )
    if settings.scope not in SCOPES:
        supported = ", ".join(sorted(SCOPES))
        raise SystemExit(f"Unsupported scope: {settings.scope}. Supported: {supported}")
    if settings.week < 1:
        raise SystemExit("Week must be >= 1.")
    return settings


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    args = _parse_args(argv)
    settings = _resolve_settings(args)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        result = asyncio.run(generate_draft(settings, rng=rng))
    except DraftGenerationError as exc:
        logging.error("Generation failed: %s", exc)
        raise SystemExit(1) from exc

    logging.info(
        "Done: path=%s top_games=%s stub=%s",
        result.path,
        len(result.document.top_games),
        result.used_stub,
    )


if __name__ == "__main__":
    main()
