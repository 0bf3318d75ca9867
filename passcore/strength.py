# --------------------------------------------------------------
# File: strength.py
# Description: Evaluación global de la fortaleza de una contraseña.
# --------------------------------------------------------------
"""Capa de política que combina longitud, entropía y denylist."""

from __future__ import annotations

import logging
from typing import Optional

from passcore.common_patterns import Denylist
from passcore.entropy_check import calculate_entropy
from passcore.errors import DenylistLoadError, InvalidInputError
from passcore.length_check import check_length
from passcore.models import StrengthResult
from passcore.strength_criteria import StrengthRating, rating_for_score

logger = logging.getLogger(__name__)

VULNERABLE_RESULT = StrengthResult(score=0, rating=StrengthRating.VULNERABLE)


def _validate(password: object) -> str:
    if not isinstance(password, str) or password.strip() == "":
        raise InvalidInputError("La contraseña debe ser una cadena no vacía.")
    return password


class StrengthEvaluator:
    """Clasifica contraseñas combinando las puntuaciones parciales.

    La pertenencia a la denylist es un veto absoluto. Si la denylist no se
    puede cargar, el modo estricto devuelve VULNERABLE; en otro caso se omite
    el veto y el resultado lo indica con `denylist_checked=False`.

    Args:
        denylist (Denylist): Denylist compartida de solo lectura.
        strict (bool): Falla cerrado si la denylist no está disponible.

    """

    def __init__(self, denylist: Denylist, strict: bool = False) -> None:
        self._denylist = denylist
        self._strict = strict

    def _check_denylist(self, password: str) -> Optional[bool]:
        try:
            return self._denylist.is_denylisted(password)
        except DenylistLoadError:
            logger.exception("Denylist no disponible durante la evaluación.")
            return None

    def evaluate(self, password: str) -> StrengthResult:
        """Evalúa la fortaleza de la contraseña.

        Nunca lanza excepciones: cualquier error se resuelve como VULNERABLE
        con puntuación 0.

        Args:
            password (str): Contraseña a evaluar.

        Returns:
            StrengthResult: Puntuación total y clasificación.

        """

        logger.debug("Iniciando análisis de fortaleza de la contraseña: ****")
        try:
            password = _validate(password)

            length_score = check_length(password)
            entropy_score = calculate_entropy(password)
            score = length_score + entropy_score
            logger.debug("Puntuación de longitud=%d entropía=%d", length_score, entropy_score)

            common = self._check_denylist(password)
            if common:
                return VULNERABLE_RESULT
            if common is None and self._strict:
                return StrengthResult(
                    score=0, rating=StrengthRating.VULNERABLE, denylist_checked=False
                )

            rating = rating_for_score(score)
            logger.info("Análisis completado. Puntuación: %d, Clasificación: %s", score, rating.value)
            return StrengthResult(score=score, rating=rating, denylist_checked=common is not None)
        except InvalidInputError:
            logger.error("Entrada no válida para el análisis de fortaleza.")
            return VULNERABLE_RESULT
        except Exception:
            logger.exception("Error inesperado durante el análisis de fortaleza.")
            return VULNERABLE_RESULT


def evaluate_password_strength(password: str) -> StrengthResult:
    """Evalúa la contraseña con el evaluador por defecto del proceso."""

    from passcore.runtime import get_evaluator

    return get_evaluator().evaluate(password)
