from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from digest.draft.pipeline import DraftGenerationError, generate_draft
from digest.draft.writer import list_draft_weeks, read_draft
from digest.ingestion.scopes import SCOPES, Scope, get_scope
from digest.log_buffer import get_buffer_handler, install_buffer_handler
from digest.schemas import DraftDocument, DraftWeeksResponse
from digest.settings import load_settings

app = FastAPI(title="Weekly Digest Drafts")
logger = logging.getLogger(__name__)


def _require_scope(scope: str) -> Scope:
    scope_config = get_scope(scope)
    if scope_config is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unsupported scope: {scope}. Supported: {', '.join(sorted(SCOPES))}",
        )
    return scope_config


@app.on_event("startup")
async def start_log_buffer() -> None:
    install_buffer_handler()
    logger.info("Draft API starting up")


@app.get("/health")
def health() -> dict:
    return {"ok": True}


@app.get("/api/scopes")
def api_scopes() -> list[dict]:
    return [
        {"key": scope.key, "label": scope.label, "sources": list(scope.sources)}
        for scope in SCOPES.values()
    ]


@app.get("/api/drafts/{scope}", response_model=DraftWeeksResponse)
def api_draft_weeks(scope: str):
    scope_config = _require_scope(scope)
    weeks = list_draft_weeks(load_settings().data_dir, scope_config.key)
    return DraftWeeksResponse(scope=scope_config.key, weeks=weeks, count=len(weeks))


@app.get("/api/drafts/{scope}/week/{week}", response_model=DraftDocument)
def api_get_draft(scope: str, week: int):
    scope_config = _require_scope(scope)
    document = read_draft(load_settings().data_dir, scope_config.key, week)
    if document is None:
        raise HTTPException(status_code=404, detail="Draft not found")
    return document


@app.post("/api/drafts/{scope}/week/{week}", response_model=DraftDocument)
async def api_generate_draft(scope: str, week: int, season: int | None = None):
    scope_config = _require_scope(scope)
    if week < 1:
        raise HTTPException(status_code=422, detail="week must be >= 1")
    settings = load_settings().with_overrides(scope=scope_config.key, week=week, season=season)
    try:
        result = await generate_draft(settings)
    except DraftGenerationError as exc:
        logger.error("Draft generation failed: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.info("Draft generated path=%s stub=%s", result.path, result.used_stub)
    return result.document


@app.get("/api/logs")
def api_logs(limit: int = 100) -> dict:
    handler = get_buffer_handler()
    return {"entries": handler.entries(limit=max(0, min(limit, 200)))}
