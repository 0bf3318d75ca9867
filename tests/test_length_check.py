# --------------------------------------------------------------
# File: test_length_check.py
# Description: Pruebas de la puntuación por longitud.
# --------------------------------------------------------------

import pytest

from passcore.length_check import check_length


@pytest.mark.parametrize(
    "password, expected",
    [
        ("", 0),
        ("123", 0),
        ("12345", 0),
        ("123456", 10),
        ("1234567", 10),
        ("12345678", 20),
        ("12345678901", 20),
        ("123456789012", 30),
        ("123456789012345", 30),
    ],
)
def test_length_buckets(password, expected):
    """Comprueba cada umbral de longitud.

    Args:
        password (str): Contraseña candidata.
        expected (int): Puntuación esperada.
    """
    assert check_length(password) == expected


def test_whitespace_counts_as_characters():
    assert check_length("      ") == 10


def test_counts_characters_not_bytes():
    # 6 caracteres, 12 bytes en UTF-8.
    assert check_length("ñáéíóú") == 10


@pytest.mark.parametrize("value", [None, 12345, b"12345678", ["a"] * 12])
def test_non_string_input_scores_zero(value):
    assert check_length(value) == 0
