# --------------------------------------------------------------
# File: generator.py
# Description: Generación segura de contraseñas y passphrases.
# --------------------------------------------------------------
"""Generadores de contraseñas aleatorias y passphrases tipo Diceware."""

from __future__ import annotations

import json
import logging
import os
import secrets
from functools import lru_cache
from typing import Optional, Tuple

from pydantic import BaseModel

from passcore.strength_criteria import MAX_LENGTH, MIN_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST_PATH = os.path.join(os.path.dirname(__file__), "data", "wordlist.json")

UPPERCASE = "ABCDEFGHJKLMNPQRSTUVWXYZ"  # sin I ni O
LOWERCASE = "abcdefghjkmnpqrstuvwxyz"  # sin i ni o
NUMBERS = "1234567890"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;':\",./<>?"
SIMILAR = set("1lI0Oo")

PASSPHRASE_SYMBOLS = "!@#$%^&*()_+-={}[]<>?"
PASSPHRASE_SEPARATORS = (" ", "-", "_", ".")
MIN_WORDS = 4
MAX_WORDS = 12


class PasswordOptions(BaseModel):
    """Preferencias para generar una contraseña aleatoria."""

    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False


def build_char_pool(options: PasswordOptions) -> str:
    """Construye el conjunto de caracteres permitido por las opciones."""

    pool = ""
    if options.include_uppercase:
        pool += UPPERCASE
    if options.include_lowercase:
        pool += LOWERCASE
    if options.include_numbers:
        pool += NUMBERS
    if options.include_symbols:
        pool += SYMBOLS
    if options.exclude_similar:
        pool = "".join(char for char in pool if char not in SIMILAR)
    return pool


def generate_random_password(options: PasswordOptions) -> str:
    """Genera una contraseña aleatoria según las preferencias del usuario.

    Args:
        options (PasswordOptions): Opciones de generación.

    Returns:
        str: Contraseña generada con `secrets`.

    Raises:
        ValueError: Si la longitud está fuera de 8-64 o no hay ningún tipo de
            carácter seleccionado.

    """

    if options.length < MIN_LENGTH or options.length > MAX_LENGTH:
        raise ValueError(
            f"La longitud debe estar entre {MIN_LENGTH} y {MAX_LENGTH} caracteres."
        )

    pool = build_char_pool(options)
    if not pool:
        raise ValueError("Debe seleccionarse al menos un tipo de carácter.")

    return "".join(secrets.choice(pool) for _ in range(options.length))


@lru_cache(maxsize=4)
def load_wordlist(path: Optional[str] = None) -> Tuple[str, ...]:
    """Carga la lista de palabras una sola vez por ruta."""

    with open(path or DEFAULT_WORDLIST_PATH, "r", encoding="utf-8") as handler:
        words = json.load(handler)
    if not isinstance(words, list) or not words:
        raise ValueError("La lista de palabras debe ser un array JSON no vacío.")
    logger.info("Lista de palabras cargada con %d entradas.", len(words))
    return tuple(str(word) for word in words)


def generate_passphrase(
    word_count: int,
    include_numbers: bool = False,
    include_symbols: bool = False,
    separator: str = "-",
    wordlist_path: Optional[str] = None,
) -> str:
    """Genera una passphrase al estilo Diceware.

    Args:
        word_count (int): Número de palabras (4-12).
        include_numbers (bool): Añade un dígito aleatorio al final.
        include_symbols (bool): Añade un símbolo aleatorio al final.
        separator (str): Separador entre palabras: espacio, guion, guion bajo o punto.
        wordlist_path (Optional[str]): Ruta alternativa de la lista de palabras.

    Returns:
        str: Passphrase generada.

    Raises:
        ValueError: Si el número de palabras o el separador no son válidos.

    """

    if word_count < MIN_WORDS or word_count > MAX_WORDS:
        raise ValueError(f"El número de palabras debe estar entre {MIN_WORDS} y {MAX_WORDS}.")
    if separator not in PASSPHRASE_SEPARATORS:
        raise ValueError("Separador no permitido.")

    words = load_wordlist(wordlist_path)
    parts = [secrets.choice(words) for _ in range(word_count)]
    if include_numbers:
        parts.append(str(secrets.randbelow(10)))
    if include_symbols:
        parts.append(secrets.choice(PASSPHRASE_SYMBOLS))
    return separator.join(parts)
