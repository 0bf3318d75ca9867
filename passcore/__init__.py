# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del subsistema de seguridad de credenciales.
# --------------------------------------------------------------
"""Inicializa el paquete `passcore` y documenta sus módulos principales."""

__all__ = [
    "common_patterns",
    "config",
    "crypto_kdf",
    "crypto_sym",
    "entropy_check",
    "errors",
    "generator",
    "hashing",
    "length_check",
    "logger",
    "models",
    "runtime",
    "strength",
    "strength_criteria",
]
