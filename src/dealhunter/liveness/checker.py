"""
Chequeo de salud de links (best-effort).

Para cada deal admitido hace un request liviano a su URL y lo marca
como roto si hay timeout, status no exitoso o error de red, o si el
sitio redirige a una página genérica del mismo host (señal típica de
un deal de Booking/Airbnb expirado).

Es solo un reporte: nunca modifica el set admitido. No hay reintentos.
"""

import asyncio
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Optional, Sequence
from urllib.parse import urlsplit

import httpx
import structlog

from dealhunter.config import get_settings
from dealhunter.models import Listing

logger = structlog.get_logger()

USER_AGENT = "Mozilla/5.0 (compatible; DealValidator/1.0)"

# Paths a los que redirige un deal expirado
GENERIC_PATHS = {"", "/", "/s"}


@dataclass
class LinkCheckResult:
    """Resultado del chequeo de un link."""

    id: int
    url: str
    ok: bool
    status: int
    reason: str


@dataclass
class LivenessReport:
    """Resumen de una corrida de chequeo."""

    checked: int
    healthy: int
    broken: int
    remaining: int
    timestamp: str
    broken_deals: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def is_generic_redirect(original_url: str, final_url: Optional[str]) -> bool:
    """
    True si un link específico terminó en la home o en una búsqueda
    genérica del mismo host.
    """
    if not final_url or final_url == original_url:
        return False
    try:
        original = urlsplit(original_url)
        final = urlsplit(final_url)
    except ValueError:
        return False
    return original.hostname == final.hostname and final.path in GENERIC_PATHS


class LivenessChecker:
    """
    Chequea links en batches de tamaño fijo.

    Cada batch se espera completo antes de empezar el siguiente.
    Cada request tiene su propio timeout y su falla no aborta el batch.
    """

    def __init__(
        self,
        batch_size: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.batch_size = batch_size or settings.liveness_batch_size
        self.timeout = timeout or settings.liveness_timeout
        self._transport = transport

    async def _request(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        # Cada request (HEAD y el GET de respaldo) tiene su propio timeout
        response = await asyncio.wait_for(client.head(url), timeout=self.timeout)
        # Algunos servidores bloquean HEAD
        if response.status_code in (405, 501):
            response = await asyncio.wait_for(client.get(url), timeout=self.timeout)
        return response

    async def check_url(
        self, client: httpx.AsyncClient, deal_id: int, url: str
    ) -> LinkCheckResult:
        """Chequea un link. Nunca lanza: toda falla queda en el resultado."""
        try:
            response = await self._request(client, url)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            return LinkCheckResult(
                id=deal_id,
                url=url,
                ok=False,
                status=0,
                reason=f"Timeout after {self.timeout:g}s",
            )
        except httpx.HTTPError as e:
            return LinkCheckResult(
                id=deal_id, url=url, ok=False, status=0, reason=str(e) or "Network error"
            )

        status = response.status_code
        if not response.is_success:
            return LinkCheckResult(
                id=deal_id, url=url, ok=False, status=status, reason=f"HTTP {status}"
            )

        if is_generic_redirect(url, str(response.url)):
            return LinkCheckResult(
                id=deal_id,
                url=url,
                ok=False,
                status=status,
                reason="Redirected to homepage (deal expired)",
            )

        return LinkCheckResult(id=deal_id, url=url, ok=True, status=status, reason="OK")

    async def check_all(self, listings: Sequence[Listing]) -> list[LinkCheckResult]:
        """Chequea todos los deals, batch por batch, en orden."""
        results: list[LinkCheckResult] = []

        async with httpx.AsyncClient(
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            for start in range(0, len(listings), self.batch_size):
                batch = listings[start:start + self.batch_size]
                outcomes = await asyncio.gather(
                    *(self.check_url(client, deal.id, deal.url) for deal in batch),
                    return_exceptions=True,
                )
                for deal, outcome in zip(batch, outcomes):
                    if isinstance(outcome, BaseException):
                        logger.warning(
                            "Chequeo de link falló inesperadamente",
                            deal_id=deal.id,
                            error=str(outcome),
                        )
                        outcome = LinkCheckResult(
                            id=deal.id,
                            url=deal.url,
                            ok=False,
                            status=0,
                            reason=str(outcome) or "Network error",
                        )
                    results.append(outcome)

        return results

    async def run(self, listings: Sequence[Listing]) -> LivenessReport:
        """Chequea los deals y arma el reporte."""
        results = await self.check_all(listings)
        broken = [r for r in results if not r.ok]
        healthy = [r for r in results if r.ok]

        report = LivenessReport(
            checked=len(results),
            healthy=len(healthy),
            broken=len(broken),
            remaining=len(healthy),
            timestamp=datetime.now(timezone.utc).isoformat(),
            broken_deals=[
                {"id": r.id, "url": r.url, "status": r.status, "reason": r.reason}
                for r in broken
            ],
        )

        if broken:
            logger.warning(
                "Deals con links rotos",
                broken=len(broken),
                deals=report.broken_deals,
            )
        else:
            logger.info("Todos los deals están sanos", healthy=len(healthy))

        return report
