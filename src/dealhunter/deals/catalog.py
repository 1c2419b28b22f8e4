"""
Catálogo semilla de deals curados.

Se distribuye con el paquete y se admite en cada request junto con
los deals publicados por usuarios.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from dealhunter.models import RawListing


def load_seed_deals(path: Optional[Union[str, Path]] = None) -> list[RawListing]:
    """
    Carga los candidatos semilla.

    Args:
        path: JSON alternativo (por defecto, el que trae el paquete)

    Returns:
        Lista de RawListing en el orden del archivo
    """
    if path is None:
        text = (
            resources.files("dealhunter.data")
            .joinpath("seed_deals.json")
            .read_text(encoding="utf-8")
        )
    else:
        text = Path(path).read_text(encoding="utf-8")

    return [RawListing.from_record(record) for record in json.loads(text)]
