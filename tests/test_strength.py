# --------------------------------------------------------------
# File: test_strength.py
# Description: Pruebas del evaluador de fortaleza y su política de clasificación.
# --------------------------------------------------------------

import pytest

from passcore.common_patterns import Denylist
from passcore.strength import StrengthEvaluator, evaluate_password_strength
from passcore.strength_criteria import StrengthRating, rating_for_score


@pytest.fixture
def evaluator():
    """Evaluador con la denylist empaquetada.

    Returns:
        StrengthEvaluator: Instancia lista para evaluar.
    """
    return StrengthEvaluator(Denylist())


def test_common_password_is_vulnerable(evaluator):
    result = evaluator.evaluate("password")
    assert result.score == 0
    assert result.rating is StrengthRating.VULNERABLE


def test_denylist_veto_ignores_raw_score():
    # 14 caracteres y las cuatro clases: 90 puntos sin el veto.
    denied = StrengthEvaluator(Denylist(entries=["Tr0ub4dor&3xyz"]))
    result = denied.evaluate("Tr0ub4dor&3xyz")
    assert result.score == 0
    assert result.rating is StrengthRating.VULNERABLE


def test_minimum_length_low_entropy_is_weak(evaluator):
    result = evaluator.evaluate("Abcdefgh")
    assert result.score == 40
    assert result.rating is StrengthRating.WEAK


def test_high_complexity_is_strong(evaluator):
    result = evaluator.evaluate("Abcdef123$")
    assert result.score == 80
    assert result.rating is StrengthRating.STRONG


def test_spaces_are_ignored_in_entropy(evaluator):
    result = evaluator.evaluate("Abc def1&")
    assert result.score == 80
    assert result.rating is StrengthRating.STRONG


def test_moderate_bucket(evaluator):
    result = evaluator.evaluate("abcdefghijk1")
    assert result.score == 60
    assert result.rating is StrengthRating.MODERATE


def test_low_score_keeps_its_value(evaluator):
    result = evaluator.evaluate("abc")
    assert result.score == 10
    assert result.rating is StrengthRating.VULNERABLE


@pytest.mark.parametrize("value", ["", "    ", None, 12345, b"Abcdef123$"])
def test_invalid_input_is_vulnerable(evaluator, value):
    result = evaluator.evaluate(value)
    assert result.score == 0
    assert result.rating is StrengthRating.VULNERABLE


def test_evaluation_is_idempotent(evaluator):
    assert evaluator.evaluate("Abcdef123$") == evaluator.evaluate("Abcdef123$")


@pytest.mark.parametrize(
    "score, rating",
    [
        (0, StrengthRating.VULNERABLE),
        (29, StrengthRating.VULNERABLE),
        (30, StrengthRating.WEAK),
        (59, StrengthRating.WEAK),
        (60, StrengthRating.MODERATE),
        (79, StrengthRating.MODERATE),
        (80, StrengthRating.STRONG),
        (90, StrengthRating.STRONG),
    ],
)
def test_thresholds_resolve_to_strongest_bucket(score, rating):
    assert rating_for_score(score) is rating


def test_unavailable_denylist_skips_veto(tmp_path):
    lenient = StrengthEvaluator(Denylist(path=str(tmp_path / "missing.json")))
    result = lenient.evaluate("password")
    assert result.score == 30
    assert result.rating is StrengthRating.WEAK
    assert result.denylist_checked is False


def test_undecodable_denylist_skips_veto(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'["\xff\xfe"]')
    result = StrengthEvaluator(Denylist(path=str(path))).evaluate("Abcdef123$")
    assert result.score == 80
    assert result.rating is StrengthRating.STRONG
    assert result.denylist_checked is False


def test_unavailable_denylist_fails_closed_in_strict_mode(tmp_path):
    strict = StrengthEvaluator(Denylist(path=str(tmp_path / "missing.json")), strict=True)
    result = strict.evaluate("Abcdef123$")
    assert result.score == 0
    assert result.rating is StrengthRating.VULNERABLE
    assert result.denylist_checked is False


def test_unexpected_error_fails_closed():
    class BrokenDenylist:
        def is_denylisted(self, password):
            raise RuntimeError("boom")

    result = StrengthEvaluator(BrokenDenylist()).evaluate("Abcdef123$")
    assert result.score == 0
    assert result.rating is StrengthRating.VULNERABLE


def test_default_evaluator_honours_strict_setting(tmp_path, monkeypatch):
    monkeypatch.setenv("COMMON_PASSWORDS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("DENYLIST_STRICT", "true")
    result = evaluate_password_strength("Abcdef123$")
    assert result.rating is StrengthRating.VULNERABLE


def test_default_evaluator_uses_packaged_denylist():
    result = evaluate_password_strength("password")
    assert result.score == 0
    assert result.denylist_checked is True
