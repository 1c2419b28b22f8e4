"""
Script para chequear los links de los deals admitidos.

Equivale al cron `/cron/validate-deals`, pero desde la terminal.

Uso:
    python -m dealhunter.scripts.run_liveness
    python -m dealhunter.scripts.run_liveness --batch-size 4 --timeout 5
"""

import argparse
import asyncio
import json
import sys
import warnings
from typing import Optional

import structlog

# Suprimir warnings de cleanup de asyncio en Windows
warnings.filterwarnings("ignore", category=ResourceWarning, message=".*unclosed transport.*")

from dealhunter.config import get_settings
from dealhunter.database import DealRepository
from dealhunter.deals import DealService
from dealhunter.liveness import LivenessChecker, LivenessReport
from dealhunter.logging_config import configure_logging

logger = structlog.get_logger()


async def run_liveness(
    batch_size: Optional[int] = None, timeout: Optional[float] = None
) -> LivenessReport:
    """Admite el catálogo y chequea los links del set admitido."""
    service = DealService(DealRepository())
    accepted = service.admitted().accepted
    logger.info("Chequeando links", deals=len(accepted))

    checker = LivenessChecker(batch_size=batch_size, timeout=timeout)
    return await checker.run(accepted)


def main():
    """Entry point del script."""
    parser = argparse.ArgumentParser(
        description="Chequea si los links de los deals admitidos siguen vivos"
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Requests concurrentes por batch",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout por request en segundos",
    )

    args = parser.parse_args()
    configure_logging(get_settings().log_level)

    try:
        report = asyncio.run(run_liveness(batch_size=args.batch_size, timeout=args.timeout))
    except KeyboardInterrupt:
        logger.info("Chequeo interrumpido por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en chequeo de links", error=str(e))
        sys.exit(1)

    print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    sys.exit(0 if report.broken == 0 else 1)


if __name__ == "__main__":
    main()
