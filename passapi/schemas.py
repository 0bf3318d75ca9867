# --------------------------------------------------------------
# File: schemas.py
# Description: Esquemas de validación de las peticiones y registros de la API.
# --------------------------------------------------------------
"""Modelos Pydantic que validan la entrada antes de llegar al núcleo."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from passcore.generator import MAX_WORDS, MIN_WORDS
from passcore.models import ComparisonToken, EncryptedSecret
from passcore.strength_criteria import MAX_LENGTH, MIN_LENGTH, StrengthRating

Category = Literal["personal", "work", "finance"]


class StrengthRequest(BaseModel):
    password: str = Field(min_length=1)


class PasswordCreate(BaseModel):
    """Datos necesarios para guardar una nueva contraseña."""

    site_name: str = Field(min_length=3)
    site_url: HttpUrl
    password: str = Field(min_length=MIN_LENGTH, max_length=MAX_LENGTH)
    category: Optional[Category] = None


class PasswordEntry(BaseModel):
    """Registro listo para entregar a la capa de persistencia.

    Attributes:
        site_name (str): Nombre del sitio.
        site_url (str): URL del sitio.
        category (Optional[str]): Categoría elegida por el usuario.
        secret (EncryptedSecret): Contraseña cifrada con AES-256-GCM.
        token (ComparisonToken): Token para detectar duplicados.
        strength (StrengthRating): Clasificación en el momento del alta.
        score (int): Puntuación en el momento del alta.
        created_at (str): Marca temporal ISO 8601 en UTC.

    """

    model_config = ConfigDict(frozen=True)

    site_name: str
    site_url: str
    category: Optional[Category] = None
    secret: EncryptedSecret
    token: ComparisonToken
    strength: StrengthRating
    score: int
    created_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())


class PasswordGenerateRequest(BaseModel):
    length: int = Field(default=16, ge=MIN_LENGTH, le=MAX_LENGTH)
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False


class PassphraseGenerateRequest(BaseModel):
    word_count: int = Field(ge=MIN_WORDS, le=MAX_WORDS)
    include_numbers: bool = False
    include_symbols: bool = False
    separator: Literal[" ", "-", "_", "."] = " "
