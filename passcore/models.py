# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan los artefactos almacenables del núcleo."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from passcore.strength_criteria import StrengthRating

DEFAULT_KDF = "pbkdf2-sha512"


class EncryptedSecret(BaseModel):
    """Representa el resultado de una operación AES-GCM lista para persistir.

    Attributes:
        ciphertext (str): Datos cifrados sin etiqueta, en Base64.
        nonce (str): Nonce de 96 bits utilizado durante el cifrado, en Base64.
        auth_tag (str): Etiqueta de autenticación de 128 bits, en Base64.

    """

    model_config = ConfigDict(frozen=True)

    ciphertext: str
    nonce: str
    auth_tag: str


class ComparisonToken(BaseModel):
    """Derivación unidireccional de una contraseña para detectar duplicados.

    Attributes:
        salt (str): Salt en texto; la KDF recibe sus bytes UTF-8.
        derived_key (str): Clave derivada en hexadecimal.
        kdf (str): Nombre de la función de derivación empleada.

    """

    model_config = ConfigDict(frozen=True)

    salt: str
    derived_key: str
    kdf: str = DEFAULT_KDF

    def to_storage(self) -> str:
        """Serializa el token en el formato compacto `salt:hash`."""

        return f"{self.salt}:{self.derived_key}"

    @classmethod
    def from_storage(cls, value: str, kdf: str = DEFAULT_KDF) -> "ComparisonToken":
        """Reconstruye un token a partir de su forma `salt:hash`.

        Raises:
            ValueError: Si el valor no contiene exactamente dos partes no vacías.

        """

        salt, sep, derived_key = value.partition(":")
        if not sep or not salt or not derived_key or ":" in derived_key:
            raise ValueError("Formato de token no válido; se esperaba 'salt:hash'.")
        return cls(salt=salt, derived_key=derived_key, kdf=kdf)


class StrengthResult(BaseModel):
    """Puntuación y clasificación discreta de una contraseña.

    Attributes:
        score (int): Suma de las puntuaciones de longitud y entropía.
        rating (StrengthRating): Clasificación derivada de la puntuación.
        denylist_checked (bool): Falso si la denylist no pudo consultarse.

    """

    model_config = ConfigDict(frozen=True)

    score: int
    rating: StrengthRating
    denylist_checked: bool = True
