import pytest
from safenet_core.coins import Coins, parse_coins_amount
from safenet_core.constants import MAX_COINS_VALUE
from safenet_core.errors import InvalidAmount


@pytest.mark.parametrize("text, nano", [
    ("1", 1_000_000_000),
    ("1.5", 1_500_000_000),
    ("0.000000001", 1),
    ("2.10", 2_100_000_000),
    ("3.", 3_000_000_000),
    ("4294967295.999999999", MAX_COINS_VALUE),
])
def test_parse_coins_amount(text, nano):
    assert parse_coins_amount(text).as_nano() == nano


@pytest.mark.parametrize("text", [
    "", "abc", "-1", ".5", "1.0000000001", "1.2.3", "4294967296",
])
def test_invalid_amounts(text):
    with pytest.raises(InvalidAmount, match="Invalid safecoins amount"):
        parse_coins_amount(text)


def test_coins_display_and_order():
    assert str(Coins.from_nano(1_500_000_000)) == "1.500000000"
    assert Coins.from_nano(1) < Coins.from_nano(2)
    with pytest.raises(InvalidAmount):
        Coins.from_nano(MAX_COINS_VALUE + 1)
