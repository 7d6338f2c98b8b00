from __future__ import annotations

import pytest

from frontend.theme import ALL, brl, period_param, txn_row_html


@pytest.mark.parametrize("value,expected", [
    (1234.5, "R$ 1.234,50"),
    (-450.5, "-R$ 450,50"),
    (0, "R$ 0,00"),
    (-0.001, "R$ 0,00"),
    ("5000", "R$ 5.000,00"),
    ("n/a", "R$ n/a"),
])
def test_brl(value, expected):
    assert brl(value) == expected


def test_brl_without_decimals():
    assert brl(1_000_000, decimals=0) == "R$ 1.000.000"


@pytest.mark.parametrize("value,expected", [(ALL, None), (None, None), ("Mar", "3"), ("Dez", "12"), (2024, "2024")])
def test_period_param(value, expected):
    assert period_param(value) == expected


def test_txn_row_escapes_user_text():
    row = txn_row_html({
        "type": "expense",
        "date": "2024-01-15",
        "description": "<script>alert(1)</script>",
        "category": "<b>Lazer</b>",
        "amount": -10,
    })

    assert "<script>" not in row
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in row
    assert "&lt;b&gt;Lazer&lt;/b&gt;" in row
    assert 'class="txn-expense">-R$ 10,00' in row
