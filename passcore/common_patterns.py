# --------------------------------------------------------------
# File: common_patterns.py
# Description: Consulta de contraseñas comunes contra una denylist estática.
# --------------------------------------------------------------
"""Denylist de contraseñas conocidas como débiles."""

from __future__ import annotations

import json
import logging
import os
import threading
from typing import FrozenSet, Iterable, Optional

from passcore.errors import DenylistLoadError

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
DEFAULT_COMMON_PASSWORDS_PATH = os.path.join(DATA_DIR, "common_passwords.json")


def load_common_passwords(path: str) -> FrozenSet[str]:
    """Lee un array JSON de contraseñas y lo deduplica.

    Args:
        path (str): Ruta del fichero JSON.

    Returns:
        FrozenSet[str]: Conjunto inmutable de contraseñas comunes.

    Raises:
        DenylistLoadError: Si el fichero no existe, no es JSON válido o no
            contiene una lista de cadenas.

    """

    try:
        with open(path, "r", encoding="utf-8") as handler:
            data = json.load(handler)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DenylistLoadError(f"No se pudo cargar la denylist desde {path}.") from exc

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise DenylistLoadError(f"La denylist de {path} debe ser una lista de cadenas.")
    return frozenset(data)


class Denylist:
    """Conjunto inmutable de contraseñas comunes, cargado una sola vez.

    Puede construirse con las entradas ya conocidas (`entries`) o con una ruta
    que se leerá de forma perezosa en la primera consulta.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        entries: Optional[Iterable[str]] = None,
    ) -> None:
        self._path = path or DEFAULT_COMMON_PASSWORDS_PATH
        self._entries: Optional[FrozenSet[str]] = (
            frozenset(entries) if entries is not None else None
        )
        self._lock = threading.Lock()

    @property
    def entries(self) -> FrozenSet[str]:
        """Entradas de la denylist; las carga en el primer acceso."""

        if self._entries is None:
            with self._lock:
                if self._entries is None:
                    self._entries = load_common_passwords(self._path)
                    logger.info("Denylist cargada con %d entradas.", len(self._entries))
        return self._entries

    def __len__(self) -> int:
        return len(self.entries)

    def is_denylisted(self, password: str) -> bool:
        """Comprueba si la contraseña figura exactamente en la denylist.

        No se normaliza nada: ni espacios ni mayúsculas. Las cadenas vacías o
        formadas solo por espacios devuelven False.

        Raises:
            DenylistLoadError: Si la denylist no se pudo cargar.

        """

        if not isinstance(password, str) or not password.strip():
            return False

        hit = password in self.entries
        if hit:
            logger.warning("La contraseña figura en la lista de contraseñas comunes.")
        return hit


def is_common_password(password: str) -> bool:
    """Consulta la denylist por defecto del proceso."""

    from passcore.runtime import get_denylist

    return get_denylist().is_denylisted(password)
