"""Búsqueda en lenguaje natural sobre los deals admitidos.

Routes
------
POST /search    Body: {"query": "..."}    → {"message", "ids"}
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from dealhunter.api.dependencies import get_deal_service, get_search_assistant
from dealhunter.deals import DealService
from dealhunter.search import SearchAssistant

router = APIRouter()


class SearchRequest(BaseModel):
    query: str = ""


@router.post("")
async def search_deals(
    body: SearchRequest,
    assistant: SearchAssistant = Depends(get_search_assistant),
    service: DealService = Depends(get_deal_service),
) -> dict[str, Any]:
    if not body.query.strip():
        raise HTTPException(status_code=400, detail="Missing query or deals")

    catalog = await run_in_threadpool(service.catalog)
    try:
        answer = await assistant.search(
            body.query,
            catalog.result.accepted,
            amenities_by_id=catalog.amenities_by_id(),
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=502, detail="AI search failed") from exc

    return {"message": answer.message, "ids": answer.ids}
