"""FastAPI application exposing the hadith collections read-only."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from sunnah.config import AppConfig
from sunnah.errors import (
    ChapterUnavailable,
    CollectionNotFound,
    CollectionUnavailable,
    RecordNotFound,
    ReferenceFormatError,
    SunnahError,
)
from sunnah.index.store import CollectionStore, get_default_store
from sunnah.ingestion.json_source import JsonRecordSource
from sunnah.library import HadithLibrary
from sunnah.models import Chapter, CollectionInfo, Hadith, SearchHit

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Sunnah API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

_library: HadithLibrary | None = None


class SearchPayload(BaseModel):
    query: str
    collection: str | None = None
    chapter: int | None = None
    mode: str = "english"
    limit: int = 50


def _get_library() -> HadithLibrary:
    global _library
    if _library is None:
        data_dir = AppConfig().resolve_data_dir()
        store = CollectionStore(JsonRecordSource(data_dir)) if data_dir else get_default_store()
        _library = HadithLibrary(store)
    return _library


def _to_http_error(exc: SunnahError) -> HTTPException:
    if isinstance(exc, ReferenceFormatError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, (CollectionNotFound, CollectionUnavailable, ChapterUnavailable, RecordNotFound)):
        return HTTPException(status_code=404, detail=str(exc))
    LOGGER.error("Unexpected library error: %s", exc)
    return HTTPException(status_code=500, detail=str(exc))


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/collections")
async def list_collections() -> dict[str, Any]:
    library = _get_library()
    return {
        "collections": [
            {"info": info, "loaded": library.hadith_count(info.id)}
            for info in library.all_collections()
        ]
    }


@app.get("/collections/{collection_id}")
async def get_collection(collection_id: str) -> dict[str, Any]:
    library = _get_library()
    try:
        info: CollectionInfo = library.get_collection(collection_id)
    except SunnahError as exc:
        raise _to_http_error(exc) from exc
    return {
        "info": info,
        "loaded": library.hadith_count(collection_id),
        "grades": {grade.value: count for grade, count in library.grade_distribution(collection_id).items()},
    }


@app.get("/collections/{collection_id}/chapters")
async def list_chapters(collection_id: str) -> dict[str, List[Chapter]]:
    library = _get_library()
    try:
        library.get_collection(collection_id)
    except SunnahError as exc:
        raise _to_http_error(exc) from exc
    return {"chapters": library.chapters(collection_id)}


@app.get("/collections/{collection_id}/hadith/{number}")
async def get_hadith(collection_id: str, number: int) -> Hadith:
    try:
        return _get_library().get_hadith(collection_id, number)
    except SunnahError as exc:
        raise _to_http_error(exc) from exc


@app.get("/collections/{collection_id}/daily")
async def hadith_of_the_day(collection_id: str, day: date | None = None) -> Hadith:
    try:
        return _get_library().hadith_of_the_day(collection_id, day)
    except SunnahError as exc:
        raise _to_http_error(exc) from exc


@app.get("/reference/{reference}")
async def get_by_reference(reference: str) -> dict[str, List[Hadith]]:
    try:
        return {"hadith": _get_library().get_range_by_reference(reference)}
    except SunnahError as exc:
        raise _to_http_error(exc) from exc


@app.get("/random")
async def random_hadith(collection: str | None = None, chapter: int | None = None) -> Hadith:
    if chapter is not None and collection is None:
        raise HTTPException(status_code=400, detail="chapter requires collection")
    try:
        return _get_library().random_hadith(collection, chapter)
    except SunnahError as exc:
        raise _to_http_error(exc) from exc


@app.post("/search")
async def search_hadith(payload: SearchPayload) -> dict[str, Any]:
    query = payload.query
    if not query.strip():
        raise HTTPException(status_code=400, detail="Empty query")
    if payload.mode not in {"english", "arabic", "preprocessed"}:
        raise HTTPException(status_code=400, detail=f"Unknown search mode: {payload.mode}")

    limit = max(1, min(payload.limit, AppConfig().search_limit))
    library = _get_library()

    if payload.collection is not None and library.get_collection_or_none(payload.collection) is None:
        raise HTTPException(status_code=404, detail=f"Collection '{payload.collection}' was not found.")

    hits: List[SearchHit]
    if payload.collection is None:
        if payload.mode == "arabic":
            hits = library.search_all_arabic(query)
        elif payload.mode == "preprocessed":
            hits = library.search_all_preprocessed(query)
        else:
            hits = library.search_all(query)
    elif payload.mode == "arabic":
        hits = library.search_arabic(query, payload.collection)
    elif payload.mode == "preprocessed":
        hits = library.search_preprocessed(query, payload.collection)
    else:
        hits = library.search(query, payload.collection, payload.chapter)

    return {"total": len(hits), "results": hits[:limit]}
