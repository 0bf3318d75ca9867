# --------------------------------------------------------------
# File: hashing.py
# Description: Hash con salt e iteraciones para detectar contraseñas duplicadas.
# --------------------------------------------------------------
"""Tokens de comparación para la detección de duplicados.

El token no protege el secreto (la contraseña ya se guarda cifrada y es
recuperable); solo permite saber si un usuario repite una contraseña sin
descifrar todos sus registros.

La salt se guarda como texto y la KDF recibe sus bytes UTF-8: una salt
aleatoria es el hexadecimal de 16 bytes y una salt fija es el texto de
`FIXED_SALT` tal cual. Así los tokens `salt:hash` ya almacenados siguen
siendo verificables.
"""

from __future__ import annotations

import hmac
import logging
import os
from typing import Dict, List, Optional, Sequence, Tuple

from passcore.config import DEFAULT_ITERATIONS, MIN_ITERATIONS, SUPPORTED_KDFS
from passcore.crypto_kdf import KEY_LENGTH, derive_argon2id, derive_pbkdf2_sha512
from passcore.errors import ConfigurationError
from passcore.models import ComparisonToken

logger = logging.getLogger(__name__)

SALT_LENGTH = 16
ARGON2_MIN_SALT = 8


class KeyedHasher:
    """Deriva y compara tokens con una política de salt fija para su vida útil.

    Args:
        fixed_salt (Optional[str]): Salt compartida por todos los tokens. Si es
            None cada token recibe una salt aleatoria de 16 bytes en hexadecimal.
        iterations (int): Iteraciones de PBKDF2.
        algorithm (str): `pbkdf2-sha512` o `argon2id`.

    """

    def __init__(
        self,
        fixed_salt: Optional[str] = None,
        iterations: int = DEFAULT_ITERATIONS,
        algorithm: str = "pbkdf2-sha512",
    ) -> None:
        if algorithm not in SUPPORTED_KDFS:
            raise ConfigurationError(f"KDF no soportada: {algorithm!r}.")
        if iterations < MIN_ITERATIONS:
            raise ConfigurationError(f"Se requieren al menos {MIN_ITERATIONS} iteraciones.")
        if fixed_salt is not None:
            if not fixed_salt:
                raise ConfigurationError("La salt fija no puede estar vacía.")
            if ":" in fixed_salt:
                raise ConfigurationError("La salt fija no puede contener ':'.")
            if algorithm == "argon2id" and len(fixed_salt.encode("utf-8")) < ARGON2_MIN_SALT:
                raise ConfigurationError("Argon2id requiere una salt de al menos 8 bytes.")

        self._fixed_salt = fixed_salt
        self._iterations = iterations
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def uses_fixed_salt(self) -> bool:
        return self._fixed_salt is not None

    def _derive(self, plaintext: str, salt: str, kdf: str) -> bytes:
        salt_bytes = salt.encode("utf-8")
        if kdf == "argon2id":
            return derive_argon2id(plaintext, salt_bytes, outlen=KEY_LENGTH)
        return derive_pbkdf2_sha512(
            plaintext, salt_bytes, iterations=self._iterations, outlen=KEY_LENGTH
        )

    def _candidate(self, plaintext: str, token: ComparisonToken) -> Optional[bytes]:
        # Hexadecimal de la rederivación, o None si el token no es verificable.
        if token.kdf not in SUPPORTED_KDFS:
            logger.warning("Token de comparación con KDF desconocida: %s", token.kdf)
            return None
        if not token.salt:
            logger.warning("Token de comparación sin salt.")
            return None
        if token.kdf == "argon2id" and len(token.salt.encode("utf-8")) < ARGON2_MIN_SALT:
            logger.warning("Token Argon2id con una salt demasiado corta.")
            return None
        return self._derive(plaintext, token.salt, token.kdf).hex().encode("ascii")

    def hash(self, plaintext: str) -> ComparisonToken:
        """Deriva el token de comparación de una contraseña.

        Args:
            plaintext (str): Contraseña en claro.

        Returns:
            ComparisonToken: Salt en texto y clave derivada en hexadecimal.

        """

        salt = self._fixed_salt if self._fixed_salt is not None else os.urandom(SALT_LENGTH).hex()
        derived = self._derive(plaintext, salt, self._algorithm)
        return ComparisonToken(salt=salt, derived_key=derived.hex(), kdf=self._algorithm)

    def matches(self, plaintext: str, token: ComparisonToken) -> bool:
        """Rederiva con la salt del token y compara en tiempo constante.

        Un token mal formado nunca coincide.
        """

        candidate = self._candidate(plaintext, token)
        if candidate is None:
            return False
        return hmac.compare_digest(candidate, token.derived_key.lower().encode("utf-8"))

    def find_duplicates(
        self,
        plaintext: str,
        tokens: Sequence[ComparisonToken],
        own_token: Optional[ComparisonToken] = None,
    ) -> List[int]:
        """Devuelve los índices de los tokens que corresponden a `plaintext`.

        La derivación se hace una sola vez por cada par (salt, KDF) distinto.

        Args:
            plaintext (str): Contraseña en claro.
            tokens (Sequence[ComparisonToken]): Tokens ya almacenados.
            own_token (Optional[ComparisonToken]): Token recién derivado de
                `plaintext`; se reutiliza para los tokens con su misma salt y KDF.

        Returns:
            List[int]: Índices coincidentes en orden.

        """

        derived: Dict[Tuple[str, str], Optional[bytes]] = {}
        if own_token is not None:
            derived[(own_token.salt, own_token.kdf)] = own_token.derived_key.lower().encode("utf-8")

        duplicates = []
        for index, token in enumerate(tokens):
            key = (token.salt, token.kdf)
            if key not in derived:
                derived[key] = self._candidate(plaintext, token)
            candidate = derived[key]
            if candidate is not None and hmac.compare_digest(
                candidate, token.derived_key.lower().encode("utf-8")
            ):
                duplicates.append(index)
        return duplicates
