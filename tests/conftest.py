# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y las instancias cacheadas.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from passcore.runtime import reset_runtime

TEST_KEY_HEX = "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
TEST_ITERATIONS = "10000"

_ISOLATED_VARS = (
    "FIXED_SALT",
    "HASH_ALGORITHM",
    "COMMON_PASSWORDS_PATH",
    "WORDLIST_PATH",
    "DENYLIST_STRICT",
    "LOG_DIR",
    "APP_ENV",
)


@pytest.fixture(autouse=True)
def _isolate_runtime(monkeypatch) -> Iterator[None]:
    """Fija una configuración de prueba y descarta las instancias cacheadas.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("AES_SECRET_KEY", TEST_KEY_HEX)
    monkeypatch.setenv("HASH_ITERATIONS", TEST_ITERATIONS)
    for name in _ISOLATED_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_runtime()

    yield

    reset_runtime()
