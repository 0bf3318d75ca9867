# --------------------------------------------------------------
# File: length_check.py
# Description: Puntuación de contraseñas según su longitud.
# --------------------------------------------------------------
"""Puntuación basada en el número de caracteres."""

import logging

logger = logging.getLogger(__name__)

# (longitud mínima, puntuación), de mayor a menor.
LENGTH_BUCKETS = ((12, 30), (8, 20), (6, 10))


def check_length(password: str) -> int:
    """Asigna una puntuación a la contraseña según su longitud.

    Cuenta caracteres, no bytes, y los espacios también cuentan. Una entrada
    que no sea una cadena puntúa 0.

    Args:
        password (str): Contraseña a evaluar.

    Returns:
        int: 0, 10, 20 o 30.

    """

    if not isinstance(password, str):
        logger.error("Entrada no válida para la comprobación de longitud.")
        return 0

    length = len(password)
    for minimum, score in LENGTH_BUCKETS:
        if length >= minimum:
            return score
    return 0
