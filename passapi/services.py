# --------------------------------------------------------------
# File: services.py
# Description: Servicios de la capa de peticiones sobre el núcleo de credenciales.
# --------------------------------------------------------------
"""Funciones de la capa de servicios para analizar, guardar y generar contraseñas.

Cada servicio devuelve una tupla `(status, body)` con la misma forma que
devolvería la ruta HTTP correspondiente. Los errores criptográficos se
presentan siempre como un error interno genérico.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic import ValidationError

from passapi.schemas import (
    PassphraseGenerateRequest,
    PasswordCreate,
    PasswordEntry,
    PasswordGenerateRequest,
    StrengthRequest,
)
from passcore.config import get_settings
from passcore.crypto_sym import SymmetricCipher
from passcore.errors import ConfigurationError, DecryptionError
from passcore.generator import PasswordOptions, generate_random_password
from passcore.generator import generate_passphrase as make_passphrase
from passcore.hashing import KeyedHasher
from passcore.runtime import get_cipher, get_evaluator, get_hasher
from passcore.strength import StrengthEvaluator
from passcore.strength_criteria import StrengthRating

logger = logging.getLogger(__name__)

Response = Tuple[int, Dict[str, Any]]

INTERNAL_ERROR: Dict[str, Any] = {"success": False, "message": "Internal Server Error"}


def _invalid(exc: ValidationError) -> Response:
    return 400, {
        "success": False,
        "message": "Invalid input",
        "errors": exc.errors(include_url=False, include_input=False),
    }


def analyze_strength(
    payload: Dict[str, Any], *, evaluator: Optional[StrengthEvaluator] = None
) -> Response:
    """Analiza la fortaleza de la contraseña recibida.

    Args:
        payload (Dict[str, Any]): Cuerpo con la clave `password`.
        evaluator (Optional[StrengthEvaluator]): Evaluador a utilizar.

    Returns:
        Response: 200 con clasificación y puntuación, o 400 si la entrada no es válida.

    """

    try:
        request = StrengthRequest.model_validate(payload)
    except ValidationError as exc:
        return _invalid(exc)
    if not request.password.strip():
        return 400, {
            "success": False,
            "message": "Invalid input: password must be a non-empty string.",
        }

    result = (evaluator or get_evaluator()).evaluate(request.password)
    return 200, {
        "success": True,
        "PasswordStrength": result.rating.value,
        "score": result.score,
        "denylistChecked": result.denylist_checked,
    }


def prepare_password_entry(
    payload: Dict[str, Any],
    existing: Sequence[PasswordEntry] = (),
    *,
    reject_vulnerable: bool = False,
    evaluator: Optional[StrengthEvaluator] = None,
    cipher: Optional[SymmetricCipher] = None,
    hasher: Optional[KeyedHasher] = None,
) -> Response:
    """Valida, clasifica, cifra y deriva el token de una nueva contraseña.

    Args:
        payload (Dict[str, Any]): Cuerpo con `site_name`, `site_url`, `password`
            y opcionalmente `category`.
        existing (Sequence[PasswordEntry]): Registros previos del mismo usuario.
        reject_vulnerable (bool): Rechaza con 422 las contraseñas VULNERABLE.
        evaluator (Optional[StrengthEvaluator]): Evaluador a utilizar.
        cipher (Optional[SymmetricCipher]): Cifrador a utilizar.
        hasher (Optional[KeyedHasher]): Hasher de comparación a utilizar.

    Returns:
        Response: 201 con el registro y el indicador `duplicate`, 400/422 si la
        entrada se rechaza o 500 si falla la capa criptográfica.

    """

    try:
        request = PasswordCreate.model_validate(payload)
    except ValidationError as exc:
        return _invalid(exc)

    result = (evaluator or get_evaluator()).evaluate(request.password)
    if reject_vulnerable and result.rating is StrengthRating.VULNERABLE:
        return 422, {
            "success": False,
            "message": "Password is too weak.",
            "PasswordStrength": result.rating.value,
            "score": result.score,
        }

    try:
        cipher = cipher or get_cipher()
        hasher = hasher or get_hasher()
        secret = cipher.encrypt(request.password)
        token = hasher.hash(request.password)
        duplicates = hasher.find_duplicates(
            request.password, [entry.token for entry in existing], own_token=token
        )
    except ConfigurationError:
        logger.exception("Configuración criptográfica no válida al guardar una contraseña.")
        return 500, dict(INTERNAL_ERROR)

    entry = PasswordEntry(
        site_name=request.site_name,
        site_url=str(request.site_url),
        category=request.category,
        secret=secret,
        token=token,
        strength=result.rating,
        score=result.score,
    )
    if duplicates:
        logger.info("Contraseña reutilizada en %d registro(s) existentes.", len(duplicates))
    return 201, {
        "success": True,
        "message": "Password stored successfully!",
        "entry": entry,
        "duplicate": bool(duplicates),
        "duplicateOf": [existing[index].site_name for index in duplicates],
    }


def reveal_password(
    entry: PasswordEntry, *, cipher: Optional[SymmetricCipher] = None
) -> Response:
    """Descifra la contraseña de un registro para mostrársela a su propietario."""

    try:
        password = (cipher or get_cipher()).decrypt(entry.secret)
    except (DecryptionError, ConfigurationError):
        logger.exception("No se pudo descifrar la contraseña de %s.", entry.site_name)
        return 500, dict(INTERNAL_ERROR)
    return 200, {"success": True, "password": password}


def generate_password(
    payload: Dict[str, Any], *, evaluator: Optional[StrengthEvaluator] = None
) -> Response:
    """Genera una contraseña aleatoria y devuelve también su fortaleza."""

    try:
        request = PasswordGenerateRequest.model_validate(payload)
    except ValidationError as exc:
        return _invalid(exc)

    try:
        password = generate_random_password(PasswordOptions(**request.model_dump()))
    except ValueError as exc:
        return 400, {"success": False, "message": str(exc)}

    result = (evaluator or get_evaluator()).evaluate(password)
    return 200, {
        "success": True,
        "password": password,
        "PasswordStrength": result.rating.value,
        "score": result.score,
    }


def generate_passphrase(
    payload: Dict[str, Any], *, evaluator: Optional[StrengthEvaluator] = None
) -> Response:
    """Genera una passphrase y devuelve también su fortaleza."""

    try:
        request = PassphraseGenerateRequest.model_validate(payload)
    except ValidationError as exc:
        return _invalid(exc)

    try:
        passphrase = make_passphrase(
            request.word_count,
            include_numbers=request.include_numbers,
            include_symbols=request.include_symbols,
            separator=request.separator,
            wordlist_path=get_settings().wordlist_path,
        )
    except (OSError, ValueError):
        logger.exception("No se pudo generar la passphrase.")
        return 500, dict(INTERNAL_ERROR)

    result = (evaluator or get_evaluator()).evaluate(passphrase)
    return 200, {
        "success": True,
        "passphrase": passphrase,
        "PasswordStrength": result.rating.value,
        "score": result.score,
    }
