# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Funciones de derivación lenta para los tokens de comparación.
# --------------------------------------------------------------
"""Derivación de claves PBKDF2-SHA512 y Argon2id."""

from argon2.low_level import Type, hash_secret_raw
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

KEY_LENGTH = 64  # 512 bits
PBKDF2_ITERATIONS = 100_000

# Parámetros Argon2id para el modo alternativo.
ARGON2_TIME_COST = 3
ARGON2_MEMORY_COST = 64 * 1024
ARGON2_PARALLELISM = 1


def derive_pbkdf2_sha512(
    password: str,
    salt: bytes,
    *,
    iterations: int = PBKDF2_ITERATIONS,
    outlen: int = KEY_LENGTH,
) -> bytes:
    """Deriva una clave con PBKDF2-HMAC-SHA512.

    Args:
        password (str): Contraseña en claro.
        salt (bytes): Salt asociada a la derivación.
        iterations (int): Número de iteraciones.
        outlen (int): Longitud en bytes de la clave resultante.

    Returns:
        bytes: Clave derivada.

    """

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA512(),
        length=outlen,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password.encode("utf-8"))


def derive_argon2id(
    password: str,
    salt: bytes,
    *,
    t: int = ARGON2_TIME_COST,
    m: int = ARGON2_MEMORY_COST,
    p: int = ARGON2_PARALLELISM,
    outlen: int = KEY_LENGTH,
) -> bytes:
    """Deriva una clave usando Argon2id.

    Args:
        password (str): Contraseña en claro.
        salt (bytes): Salt asociada a la derivación (mínimo 8 bytes).
        t (int): Coste temporal en iteraciones Argon2id.
        m (int): Memoria en KiB consumida durante la derivación.
        p (int): Paralelismo configurado para Argon2id.
        outlen (int): Longitud en bytes de la clave resultante.

    Returns:
        bytes: Clave derivada.

    """

    return hash_secret_raw(
        password.encode("utf-8"),
        salt,
        time_cost=t,
        memory_cost=m,
        parallelism=p,
        hash_len=outlen,
        type=Type.ID,
    )
