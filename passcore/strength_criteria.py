# --------------------------------------------------------------
# File: strength_criteria.py
# Description: Umbrales y clasificaciones de fortaleza de contraseñas.
# --------------------------------------------------------------
"""Criterios de fortaleza inspirados en las recomendaciones del NIST."""

from enum import Enum

MIN_LENGTH = 8
RECOMMENDED_LENGTH = 15
MAX_LENGTH = 64


class StrengthRating(str, Enum):
    """Clasificaciones posibles, de más débil a más fuerte."""

    VULNERABLE = "Vulnerable"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"


# Ordenados de mayor a menor: el primer umbral alcanzado decide la clasificación.
SCORE_THRESHOLDS = (
    (80, StrengthRating.STRONG),
    (60, StrengthRating.MODERATE),
    (30, StrengthRating.WEAK),
)


def rating_for_score(score: int) -> StrengthRating:
    """Traduce una puntuación numérica a su clasificación discreta."""

    for threshold, rating in SCORE_THRESHOLDS:
        if score >= threshold:
            return rating
    return StrengthRating.VULNERABLE
