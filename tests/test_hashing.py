# --------------------------------------------------------------
# File: test_hashing.py
# Description: Pruebas de los tokens de comparación para detectar duplicados.
# --------------------------------------------------------------

import hashlib

import pytest

from passcore.config import MIN_ITERATIONS
from passcore.errors import ConfigurationError
from passcore.hashing import SALT_LENGTH, KeyedHasher
from passcore.models import ComparisonToken
from passcore.runtime import get_hasher


@pytest.fixture
def hasher():
    return KeyedHasher(iterations=MIN_ITERATIONS)


@pytest.fixture
def fixed_hasher():
    return KeyedHasher(fixed_salt="pepper-for-tests", iterations=MIN_ITERATIONS)


def test_token_matches_its_plaintext(hasher):
    token = hasher.hash("Str0ng_P@ssword123!")
    assert hasher.matches("Str0ng_P@ssword123!", token)


def test_token_rejects_other_plaintext(hasher):
    token = hasher.hash("Str0ng_P@ssword123!")
    assert not hasher.matches("Str0ng_P@ssword123?", token)


def test_random_salt_per_token(hasher):
    first = hasher.hash("same")
    second = hasher.hash("same")
    assert first.salt != second.salt
    assert first.derived_key != second.derived_key
    assert len(bytes.fromhex(first.salt)) == SALT_LENGTH
    assert len(bytes.fromhex(first.derived_key)) == 64


def test_fixed_salt_is_deterministic(fixed_hasher):
    assert fixed_hasher.hash("same") == fixed_hasher.hash("same")
    assert fixed_hasher.hash("same") != fixed_hasher.hash("other")
    assert fixed_hasher.uses_fixed_salt


def test_storage_form_roundtrip(hasher):
    token = hasher.hash("Abcdef123$")
    restored = ComparisonToken.from_storage(token.to_storage())
    assert restored == token
    assert hasher.matches("Abcdef123$", restored)


@pytest.mark.parametrize("value", ["", "solo-salt", ":hash", "salt:", "a:b:c"])
def test_malformed_storage_form_is_rejected(value):
    with pytest.raises(ValueError):
        ComparisonToken.from_storage(value)


@pytest.mark.parametrize(
    "token",
    [
        ComparisonToken(salt="zz", derived_key="00"),
        ComparisonToken(salt="00" * 16, derived_key="no-es-hex"),
        ComparisonToken(salt="", derived_key="00"),
        ComparisonToken(salt="00", derived_key="00", kdf="md5"),
        ComparisonToken(salt="00", derived_key="00" * 64, kdf="argon2id"),
    ],
)
def test_malformed_token_never_matches(hasher, token):
    assert not hasher.matches("anything", token)


def test_find_duplicates_skips_malformed_tokens(hasher):
    tokens = [
        ComparisonToken(salt="00", derived_key="00" * 64, kdf="argon2id"),
        hasher.hash("uno"),
    ]
    assert hasher.find_duplicates("uno", tokens) == [1]


def test_find_duplicates_with_random_salts(hasher):
    tokens = [hasher.hash("uno"), hasher.hash("dos"), hasher.hash("uno")]
    assert hasher.find_duplicates("uno", tokens) == [0, 2]
    assert hasher.find_duplicates("tres", tokens) == []


def test_find_duplicates_with_shared_salt(fixed_hasher):
    tokens = [fixed_hasher.hash("uno"), fixed_hasher.hash("dos"), fixed_hasher.hash("dos")]
    assert fixed_hasher.find_duplicates("dos", tokens) == [1, 2]
    assert fixed_hasher.find_duplicates("uno", tokens) == [0]
    assert fixed_hasher.find_duplicates("tres", tokens) == []


def test_find_duplicates_reuses_own_token(fixed_hasher, monkeypatch):
    tokens = [fixed_hasher.hash("uno"), fixed_hasher.hash("dos")]
    own = fixed_hasher.hash("dos")
    calls = []
    original = fixed_hasher._derive
    monkeypatch.setattr(
        fixed_hasher, "_derive", lambda *args: calls.append(args) or original(*args)
    )
    assert fixed_hasher.find_duplicates("dos", tokens, own_token=own) == [1]
    assert calls == []


def test_find_duplicates_on_empty_sequence(hasher):
    assert hasher.find_duplicates("uno", []) == []


def test_argon2id_tokens_match():
    argon = KeyedHasher(fixed_salt="0123456789abcdef", algorithm="argon2id")
    token = argon.hash("Abcdef123$")
    assert token.kdf == "argon2id"
    assert argon.matches("Abcdef123$", token)
    assert not argon.matches("Abcdef123#", token)


def test_tokens_remember_their_kdf(hasher):
    argon = KeyedHasher(algorithm="argon2id")
    token = argon.hash("Abcdef123$")
    # Un hasher PBKDF2 sigue verificando tokens Argon2id ya almacenados.
    assert hasher.matches("Abcdef123$", token)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"iterations": MIN_ITERATIONS - 1},
        {"algorithm": "md5"},
        {"fixed_salt": ""},
        {"fixed_salt": "short", "algorithm": "argon2id"},
        {"fixed_salt": "con:dos-puntos"},
    ],
)
def test_invalid_configuration_is_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        KeyedHasher(**kwargs)


def test_runtime_hasher_applies_fixed_salt(monkeypatch):
    monkeypatch.setenv("FIXED_SALT", "global-salt")
    token = get_hasher().hash("Abcdef123$")
    assert token.salt == "global-salt"
    assert get_hasher().hash("Abcdef123$") == token


def test_legacy_random_salt_token_matches():
    # Tokens `salt:hash` ya guardados: la KDF recibe el texto hexadecimal de la salt.
    salt = "9f86d081884c7d659a2feaa0c55ad015"
    derived = hashlib.pbkdf2_hmac("sha512", b"Abcdef123$", salt.encode(), 100_000, 64)
    token = ComparisonToken.from_storage(f"{salt}:{derived.hex()}")
    assert KeyedHasher().matches("Abcdef123$", token)
    assert not KeyedHasher().matches("Abcdef123#", token)


def test_legacy_fixed_salt_token_matches():
    derived = hashlib.pbkdf2_hmac("sha512", b"Abcdef123$", b"my fixed salt!", 100_000, 64)
    token = ComparisonToken.from_storage(f"my fixed salt!:{derived.hex()}")
    hasher = KeyedHasher(fixed_salt="my fixed salt!")
    assert hasher.matches("Abcdef123$", token)
    assert hasher.hash("Abcdef123$") == token
