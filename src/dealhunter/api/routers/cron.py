"""Tareas programadas.

Routes
------
GET /cron/validate-deals    Chequeo de links de los deals admitidos (bearer CRON_SECRET)
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from dealhunter.api.dependencies import (
    get_deal_service,
    get_liveness_checker,
    require_cron_secret,
)
from dealhunter.deals import DealService
from dealhunter.liveness import LivenessChecker

router = APIRouter()


@router.get("/validate-deals", dependencies=[Depends(require_cron_secret)])
async def validate_deals(
    service: DealService = Depends(get_deal_service),
    checker: LivenessChecker = Depends(get_liveness_checker),
) -> dict[str, Any]:
    """Solo reporta; el set admitido no cambia."""
    result = await run_in_threadpool(service.admitted)
    report = await checker.run(result.accepted)
    return {"status": "success", **report.to_dict()}
