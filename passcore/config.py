# --------------------------------------------------------------
# File: config.py
# Description: Carga y validación de la configuración del proceso.
# --------------------------------------------------------------
"""Configuración de `passcore` a partir de variables de entorno y `.env`."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from passcore.errors import ConfigurationError

load_dotenv()

AES_KEY_BYTES = 32
DEFAULT_ITERATIONS = 100_000
MIN_ITERATIONS = 10_000
SUPPORTED_KDFS = ("pbkdf2-sha512", "argon2id")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def parse_secret_key(value: Optional[str]) -> bytes:
    """Valida la clave AES-256 codificada en hexadecimal.

    Args:
        value (Optional[str]): Clave en hexadecimal (64 caracteres).

    Returns:
        bytes: Clave de 32 bytes lista para AES-GCM.

    Raises:
        ConfigurationError: Si la clave falta, no es hexadecimal o no mide 32 bytes.

    """

    if not value:
        raise ConfigurationError("Falta AES_SECRET_KEY.")
    try:
        key = bytes.fromhex(value.strip())
    except ValueError as exc:
        raise ConfigurationError("AES_SECRET_KEY debe ser una cadena hexadecimal.") from exc
    if len(key) != AES_KEY_BYTES:
        raise ConfigurationError("AES_SECRET_KEY debe codificar exactamente 32 bytes.")
    return key


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} debe ser un entero.") from exc


class Settings(BaseModel):
    """Parámetros inmutables del proceso.

    Attributes:
        secret_key_hex (Optional[str]): Clave AES-256 en hexadecimal.
        fixed_salt (Optional[str]): Salt fija para los tokens de comparación.
        hash_iterations (int): Iteraciones de PBKDF2.
        hash_algorithm (str): KDF usada por el hasher de comparación.
        common_passwords_path (Optional[str]): Ruta alternativa de la denylist.
        wordlist_path (Optional[str]): Ruta alternativa de la lista de palabras.
        denylist_strict (bool): Falla cerrado si la denylist no se puede cargar.
        log_level (str): Nivel de logging.
        log_dir (Optional[str]): Carpeta para los ficheros rotativos de log.
        app_env (str): Entorno de ejecución (`development`, `production`...).

    """

    model_config = ConfigDict(frozen=True)

    secret_key_hex: Optional[str] = None
    fixed_salt: Optional[str] = None
    hash_iterations: int = DEFAULT_ITERATIONS
    hash_algorithm: str = "pbkdf2-sha512"
    common_passwords_path: Optional[str] = None
    wordlist_path: Optional[str] = None
    denylist_strict: bool = False
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    app_env: str = "development"

    @classmethod
    def from_env(cls) -> "Settings":
        """Construye la configuración leyendo el entorno actual."""

        settings = cls(
            secret_key_hex=os.getenv("AES_SECRET_KEY"),
            fixed_salt=os.getenv("FIXED_SALT") or None,
            hash_iterations=_env_int("HASH_ITERATIONS", DEFAULT_ITERATIONS),
            hash_algorithm=os.getenv("HASH_ALGORITHM", "pbkdf2-sha512").strip().lower(),
            common_passwords_path=os.getenv("COMMON_PASSWORDS_PATH") or None,
            wordlist_path=os.getenv("WORDLIST_PATH") or None,
            denylist_strict=_env_flag("DENYLIST_STRICT"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("LOG_DIR") or None,
            app_env=os.getenv("APP_ENV", "development").lower(),
        )
        settings.validate_hashing()
        return settings

    @property
    def secret_key(self) -> bytes:
        """Clave AES validada; lanza `ConfigurationError` si no es utilizable."""

        return parse_secret_key(self.secret_key_hex)

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def validate_hashing(self) -> None:
        """Comprueba los parámetros del hasher de comparación."""

        if self.hash_iterations < MIN_ITERATIONS:
            raise ConfigurationError(
                f"HASH_ITERATIONS debe ser al menos {MIN_ITERATIONS}."
            )
        if self.hash_algorithm not in SUPPORTED_KDFS:
            raise ConfigurationError(
                f"HASH_ALGORITHM no soportado: {self.hash_algorithm!r}."
            )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Devuelve la configuración del proceso, cargada una única vez."""

    return Settings.from_env()
