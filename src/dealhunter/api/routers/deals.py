"""Endpoints de deals.

Routes
------
GET    /deals              Deals admitidos (semilla + base)
GET    /deals/report       Conteos y motivos de rechazo de la admisión
GET    /deals/mine         Deals publicados por el usuario (auth)
POST   /deals              Publica un deal (auth)
PUT    /deals/{deal_id}    Edita un deal propio (auth)
DELETE /deals/{deal_id}    Borra un deal propio (auth)
POST   /deals/image        Sube una foto y devuelve su URL pública (auth)
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from dealhunter.api.dependencies import (
    get_deal_service,
    get_object_storage,
    get_owner_id,
)
from dealhunter.deals import Catalog, DealNotFoundError, DealService, SubmissionError
from dealhunter.imagery import ObjectStorage, build_object_path
from dealhunter.models import Listing

logger = structlog.get_logger()

router = APIRouter()

MAX_IMAGE_BYTES = 5 * 1024 * 1024


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _listing_response(listing: Listing, catalog: Catalog) -> dict[str, Any]:
    deal = catalog.stored.get(listing.id)
    return {
        **listing.model_dump(mode="json"),
        "image_url": catalog.image_for(listing),
        "amenities": deal.amenities if deal is not None else [],
        "host_name": deal.host_name if deal is not None else "",
        "host_phone": deal.host_phone if deal is not None else "",
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("")
def list_deals(service: DealService = Depends(get_deal_service)) -> dict[str, Any]:
    """Solo los deals que pasan la admisión."""
    catalog = service.catalog()
    return {
        "deals": [_listing_response(listing, catalog) for listing in catalog.result.accepted]
    }


@router.get("/report")
def admission_report(service: DealService = Depends(get_deal_service)) -> dict[str, Any]:
    result = service.admitted()
    return {
        "accepted": len(result.accepted),
        "rejected_count": result.rejected_count,
        "rejected_by_location": result.rejected_by_location,
        "rejected_by_budget": result.rejected_by_budget,
        "rejected_by_url": result.rejected_by_url,
        "rejections": [r.model_dump(mode="json") for r in result.rejections],
    }


@router.get("/mine")
def my_deals(
    owner_id: str = Depends(get_owner_id),
    service: DealService = Depends(get_deal_service),
) -> dict[str, Any]:
    deals = service.owned_by(owner_id)
    return {"deals": [deal.model_dump(mode="json") for deal in deals]}


@router.post("", status_code=201)
async def publish_deal(
    payload: dict[str, Any] = Body(...),
    owner_id: str = Depends(get_owner_id),
    service: DealService = Depends(get_deal_service),
) -> dict[str, Any]:
    """Publica un deal; si no trae foto se genera una con IA."""
    try:
        deal = await service.publish(owner_id, payload)
    except SubmissionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"deal": deal.model_dump(mode="json")}


@router.put("/{deal_id}")
def update_deal(
    deal_id: int,
    payload: dict[str, Any] = Body(...),
    owner_id: str = Depends(get_owner_id),
    service: DealService = Depends(get_deal_service),
) -> dict[str, Any]:
    try:
        deal = service.update(owner_id, deal_id, payload)
    except SubmissionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DealNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Deal not found") from exc
    return {"deal": deal.model_dump(mode="json")}


@router.delete("/{deal_id}")
def delete_deal(
    deal_id: int,
    owner_id: str = Depends(get_owner_id),
    service: DealService = Depends(get_deal_service),
) -> dict[str, Any]:
    try:
        service.delete(owner_id, deal_id)
    except DealNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Deal not found") from exc
    return {"ok": True}


@router.post("/image")
async def upload_deal_image(
    file: UploadFile,
    owner_id: str = Depends(get_owner_id),
    storage: ObjectStorage = Depends(get_object_storage),
) -> dict[str, str]:
    """Sube una foto del dueño al bucket público."""
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="File must be an image")

    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="No file provided")
    if len(data) > MAX_IMAGE_BYTES:
        raise HTTPException(status_code=400, detail="Image too large (max 5MB)")

    _, dot, extension = (file.filename or "").rpartition(".")
    path = build_object_path(extension if dot else "jpg")
    try:
        url = await run_in_threadpool(storage.upload, path, data, content_type)
    except Exception as exc:
        raise HTTPException(status_code=502, detail=f"Upload failed: {exc}") from exc

    logger.info("Foto de deal subida", owner_id=owner_id, path=path)
    return {"url": url}
