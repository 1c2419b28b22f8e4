"""
Script para correr la admisión sobre el catálogo actual.

Muestra qué deals se publican y por qué se rechaza el resto.

Uso:
    python -m dealhunter.scripts.run_admission
    python -m dealhunter.scripts.run_admission --json
    python -m dealhunter.scripts.run_admission --seeds-only --seeds otros.json
"""

import argparse
import json
import sys
from typing import Optional

import structlog

from dealhunter.admission import admit
from dealhunter.config import get_settings
from dealhunter.database import DealRepository
from dealhunter.deals import DealService, load_seed_deals
from dealhunter.logging_config import configure_logging
from dealhunter.models import AdmissionResult

logger = structlog.get_logger()


def run_admission(seeds_path: Optional[str] = None, seeds_only: bool = False) -> AdmissionResult:
    """Carga los candidatos y corre la admisión."""
    seeds = load_seed_deals(seeds_path)
    if seeds_only:
        return admit(seeds)

    service = DealService(DealRepository(), seed_deals=seeds)
    return admit(service.load_candidates())


def print_result(result: AdmissionResult):
    """Imprime el resultado en formato legible."""
    print(f"\n{'=' * 60}")
    print(f"Admitidos: {len(result.accepted)}  |  Rechazados: {result.rejected_count}")
    print(
        f"  ubicación: {result.rejected_by_location}  "
        f"presupuesto: {result.rejected_by_budget}  "
        f"link: {result.rejected_by_url}"
    )
    print("=" * 60)

    for listing in result.accepted:
        print(f"  ✓ [{listing.category.value}] {listing.property_name} ({listing.location}) ₪{listing.price_per_night}")

    if result.rejections:
        print()
    for rejection in result.rejections:
        print(f"  ✗ [{rejection.type.value}] {rejection.name}: {rejection.reason}")
    print()


def main():
    """Entry point del script."""
    parser = argparse.ArgumentParser(
        description="Corre la admisión de deals (ubicación, presupuesto, link)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprime el resultado como JSON",
    )
    parser.add_argument(
        "--seeds",
        default=None,
        help="JSON de deals semilla alternativo",
    )
    parser.add_argument(
        "--seeds-only",
        action="store_true",
        help="No consulta la base, solo el catálogo semilla",
    )

    args = parser.parse_args()

    if args.seeds_only:
        configure_logging()
    else:
        configure_logging(get_settings().log_level)

    try:
        result = run_admission(seeds_path=args.seeds, seeds_only=args.seeds_only)
    except KeyboardInterrupt:
        logger.info("Admisión interrumpida por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en admisión", error=str(e))
        sys.exit(1)

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print_result(result)


if __name__ == "__main__":
    main()
