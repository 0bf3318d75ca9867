# --------------------------------------------------------------
# File: runtime.py
# Description: Instancias compartidas del proceso, construidas una sola vez.
# --------------------------------------------------------------
"""Fábricas cacheadas de los componentes de `passcore`.

Cada instancia es inmutable tras su creación y se inyecta en los servicios
como dependencia de solo lectura.
"""

from functools import lru_cache

from passcore.common_patterns import Denylist
from passcore.config import get_settings
from passcore.crypto_sym import SymmetricCipher
from passcore.hashing import KeyedHasher
from passcore.strength import StrengthEvaluator


@lru_cache(maxsize=1)
def get_denylist() -> Denylist:
    return Denylist(path=get_settings().common_passwords_path)


@lru_cache(maxsize=1)
def get_evaluator() -> StrengthEvaluator:
    return StrengthEvaluator(get_denylist(), strict=get_settings().denylist_strict)


@lru_cache(maxsize=1)
def get_cipher() -> SymmetricCipher:
    """Construye el cifrador; lanza `ConfigurationError` si la clave no es válida."""

    return SymmetricCipher(get_settings().secret_key)


@lru_cache(maxsize=1)
def get_hasher() -> KeyedHasher:
    settings = get_settings()
    return KeyedHasher(
        fixed_salt=settings.fixed_salt,
        iterations=settings.hash_iterations,
        algorithm=settings.hash_algorithm,
    )


def init_runtime() -> None:
    """Inicializa todo lo necesario al arrancar; falla rápido ante errores de configuración."""

    from passcore.logger import configure_logging

    configure_logging(get_settings())
    get_cipher()
    get_hasher()
    get_evaluator()


def reset_runtime() -> None:
    """Descarta las instancias cacheadas (uso en pruebas)."""

    for factory in (get_settings, get_denylist, get_evaluator, get_cipher, get_hasher):
        factory.cache_clear()
