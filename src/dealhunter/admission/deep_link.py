"""
Validador sintáctico de deep links.

No resuelve la URL ni verifica que responda; eso lo hace el
chequeo de links (`dealhunter.liveness`), que es independiente.
"""

from typing import Any

SECURE_SCHEME_PREFIX = "https://"


def is_valid_deep_link(url: Any) -> bool:
    """
    True solo para un string no vacío que empieza con https://.

    Rechaza vacíos, rutas relativas, http:// y fragmentos sueltos (#...).
    """
    return isinstance(url, str) and url.startswith(SECURE_SCHEME_PREFIX)
