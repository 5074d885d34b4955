"""Read and write draft JSON files under ``<data_dir>/<scope>/week_<NN>.json``."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from digest.schemas import DraftDocument

logger = logging.getLogger(__name__)

_WEEK_FILE_RE = re.compile(r"^week_(\d{2,})\.json$")


def draft_path(data_dir: str | Path, scope: str, week: int) -> Path:
    return Path(data_dir) / scope / f"week_{week:02d}.json"


def write_draft(document: DraftDocument, data_dir: str | Path) -> Path:
    path = draft_path(data_dir, document.meta.scope, document.meta.week)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(document.to_json_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Draft saved to %s", path)
    return path


def read_draft(data_dir: str | Path, scope: str, week: int) -> DraftDocument | None:
    path = draft_path(data_dir, scope, week)
    if not path.is_file():
        return None
    return DraftDocument.model_validate(json.loads(path.read_text(encoding="utf-8")))


def list_draft_weeks(data_dir: str | Path, scope: str) -> list[int]:
    scope_dir = Path(data_dir) / scope
    if not scope_dir.is_dir():
        return []
    weeks: list[int] = []
    for entry in scope_dir.iterdir():
        match = _WEEK_FILE_RE.match(entry.name)
        if match and entry.is_file():
            weeks.append(int(match.group(1)))
    return sorted(weeks)
