"""Unit tests for money helpers"""

from decimal import Decimal

import pytest

from app.utils.money import sum_money, to_money


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, "0.00"),
        ("", "0.00"),
        (0.1, "0.10"),
        (3, "3.00"),
        ("19.999", "20.00"),
        (Decimal("2.345"), "2.35"),
    ],
)
def test_to_money(raw, expected):
    assert to_money(raw) == Decimal(expected)


def test_to_money_rejects_garbage():
    with pytest.raises(ValueError):
        to_money("twelve")


def test_sum_money_is_exact():
    # float addition would drift here
    assert sum_money([0.1, 0.2, 0.3] * 10) == Decimal("6.00")


def test_sum_money_empty():
    assert sum_money([]) == Decimal("0.00")
