"""Testes para normalize_address."""

from __future__ import annotations

import pytest

from api.normalizers.whatsapp import normalize_address


def test_appends_suffix_to_plain_number() -> None:
    assert normalize_address("573001234567") == "573001234567@c.us"


def test_keeps_address_already_normalized() -> None:
    assert normalize_address("573001234567@c.us") == "573001234567@c.us"


@pytest.mark.parametrize("number", ["573001234567", "+57 300 123", "abc"])
def test_is_idempotent(number: str) -> None:
    once = normalize_address(number)
    assert normalize_address(once) == once


def test_does_not_validate_format() -> None:
    """Qualquer string é aceita: não há checagem de dígitos."""
    assert normalize_address("+57 300-123") == "+57 300-123@c.us"
