# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para proteger las contraseñas almacenadas."""

from __future__ import annotations

import base64
import binascii
import logging
import os
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from passcore.config import AES_KEY_BYTES
from passcore.errors import ConfigurationError, DecryptionError
from passcore.models import EncryptedSecret

logger = logging.getLogger(__name__)

NONCE_SIZE = 12  # 96 bits
TAG_SIZE = 16  # 128 bits


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, aad: Optional[bytes] = None
) -> Tuple[bytes, bytes, bytes]:
    """Sella `plaintext` con AES-GCM y un nonce nuevo de 96 bits.

    Args:
        key (bytes): Clave AES del servidor.
        plaintext (bytes): Contraseña ya codificada.
        aad (Optional[bytes]): Datos autenticados pero no cifrados.

    Returns:
        Tuple[bytes, bytes, bytes]: `(ciphertext, nonce, tag)` por separado, tal
        y como se persisten.

    """

    nonce = os.urandom(NONCE_SIZE)
    sealed = AESGCM(key).encrypt(nonce, plaintext, aad)
    # AESGCM concatena el tag al final del ciphertext.
    return sealed[:-TAG_SIZE], nonce, sealed[-TAG_SIZE:]


def aes_gcm_decrypt_with_key(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Reúne ciphertext y tag y verifica el sello AES-GCM.

    Raises:
        cryptography.exceptions.InvalidTag: Si la clave, el nonce, el tag o
            `aad` no corresponden al sello.

    """

    return AESGCM(key).decrypt(nonce, ciphertext + tag, aad)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _unb64(value: str) -> bytes:
    return base64.b64decode(value.encode("ascii"), validate=True)


class SymmetricCipher:
    """Cifrado autenticado AES-256-GCM con una clave fija del servidor.

    La clave se valida al construir la instancia; una clave ausente o con una
    longitud distinta de 32 bytes aborta la inicialización.
    """

    def __init__(self, key: bytes) -> None:
        if not isinstance(key, (bytes, bytearray)) or len(key) != AES_KEY_BYTES:
            raise ConfigurationError("La clave AES debe medir exactamente 32 bytes.")
        self._key = bytes(key)

    def __repr__(self) -> str:
        return "SymmetricCipher(key=<redacted>)"

    def encrypt(self, plaintext: str) -> EncryptedSecret:
        """Cifra un texto con un nonce aleatorio nuevo.

        Args:
            plaintext (str): Texto en claro (se codifica en UTF-8).

        Returns:
            EncryptedSecret: Ciphertext, nonce y tag codificados en Base64.

        """

        ciphertext, nonce, tag = aes_gcm_encrypt_with_key(self._key, plaintext.encode("utf-8"))
        return EncryptedSecret(
            ciphertext=_b64(ciphertext), nonce=_b64(nonce), auth_tag=_b64(tag)
        )

    def decrypt(self, secret: EncryptedSecret) -> str:
        """Verifica la etiqueta y devuelve el texto en claro.

        Raises:
            DecryptionError: Si el nonce o el tag tienen una longitud incorrecta,
                si el Base64 está corrupto o si la autenticación falla.

        """

        try:
            nonce = _unb64(secret.nonce)
            tag = _unb64(secret.auth_tag)
            ciphertext = _unb64(secret.ciphertext)
        except (binascii.Error, ValueError) as exc:
            logger.error("Secreto cifrado con codificación no válida.")
            raise DecryptionError("Descifrado fallido: datos corruptos.") from exc

        if len(nonce) != NONCE_SIZE:
            raise DecryptionError("Descifrado fallido: nonce no válido.")
        if len(tag) != TAG_SIZE:
            raise DecryptionError("Descifrado fallido: tag no válido.")

        try:
            plaintext = aes_gcm_decrypt_with_key(self._key, nonce, ciphertext, tag)
            return plaintext.decode("utf-8")
        except (InvalidTag, UnicodeDecodeError) as exc:
            logger.error("Fallo de autenticación al descifrar un secreto.")
            raise DecryptionError(
                "Descifrado fallido: clave incorrecta o datos manipulados."
            ) from exc
