# --------------------------------------------------------------
# File: entropy_check.py
# Description: Puntuación de diversidad de clases de caracteres.
# --------------------------------------------------------------
"""Puntuación de entropía basada en la presencia de clases de caracteres."""

import logging
import re

logger = logging.getLogger(__name__)

LOWER = re.compile(r"[a-z]")
UPPER = re.compile(r"[A-Z]")
DIGIT = re.compile(r"[0-9]")
SYMBOL = re.compile(r"[^a-zA-Z0-9\s]")

# Cada clase puntúa una sola vez, independientemente de las repeticiones.
CLASS_SCORES = ((LOWER, 10), (UPPER, 10), (DIGIT, 20), (SYMBOL, 20))


def calculate_entropy(password: str) -> int:
    """Calcula la puntuación de diversidad de la contraseña.

    Args:
        password (str): Contraseña a evaluar.

    Returns:
        int: Puntuación entre 0 y 60.

    """

    if not isinstance(password, str):
        logger.error("Entrada no válida para el cálculo de entropía.")
        return 0

    return sum(score for pattern, score in CLASS_SCORES if pattern.search(password))
