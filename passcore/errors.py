# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del subsistema de credenciales.
# --------------------------------------------------------------
"""Excepciones propias de `passcore`."""


class PassCoreError(Exception):
    """Error base del subsistema de seguridad de credenciales."""


class InvalidInputError(PassCoreError):
    """Entrada no válida para el evaluador de fortaleza.

    Se recupera internamente: el evaluador la convierte en un resultado
    VULNERABLE con puntuación 0.
    """


class ConfigurationError(PassCoreError):
    """Configuración ausente o mal formada detectada durante el arranque."""


class DecryptionError(PassCoreError):
    """No se ha podido recuperar el texto en claro de un secreto cifrado."""


class DenylistLoadError(PassCoreError):
    """La lista de contraseñas comunes no está disponible."""
