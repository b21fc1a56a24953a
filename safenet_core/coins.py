"""
safenet_core.coins
------------------
Safecoin amounts. One safecoin is 10**9 nano; amounts are stored as an
integer count of nano so that arithmetic never loses precision.
"""

from __future__ import annotations
from dataclasses import dataclass
import re

from .constants import COIN_TO_NANO, MAX_COINS_VALUE, NANO_DECIMAL_PLACES, U64_MAX
from .errors import InvalidAmount

_UNITS_RE = re.compile(r"\+?[0-9]+")
_FRACTION_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, order=True)
class Coins:
    nano: int = 0

    def __post_init__(self):
        if not 0 <= self.nano <= MAX_COINS_VALUE:
            raise InvalidAmount(f"Coins value {self.nano} nano is out of range")

    @classmethod
    def from_nano(cls, value: int) -> "Coins":
        return cls(nano=value)

    def as_nano(self) -> int:
        return self.nano

    def __str__(self) -> str:
        units, remainder = divmod(self.nano, COIN_TO_NANO)
        return f"{units}.{remainder:0{NANO_DECIMAL_PLACES}d}"


def _to_nano(value_str: str) -> int:
    units_str, _, fraction_str = value_str.partition(".")
    if not _UNITS_RE.fullmatch(units_str):
        raise ValueError("Can't parse coin units")
    units = int(units_str)
    if units > U64_MAX or units * COIN_TO_NANO > U64_MAX:
        raise ValueError("Can't parse coin units")

    fraction_str = fraction_str.rstrip("0")
    remainder = 0
    if fraction_str:
        if not _FRACTION_RE.fullmatch(fraction_str):
            raise ValueError("Can't parse coin remainder")
        if len(fraction_str) > NANO_DECIMAL_PLACES:
            raise ValueError("Loss of precision")
        remainder = int(fraction_str) * 10 ** (NANO_DECIMAL_PLACES - len(fraction_str))

    nano = units * COIN_TO_NANO + remainder
    if nano > MAX_COINS_VALUE:
        raise ValueError("Excessive value")
    return nano


def parse_coins_amount(amount_str: str) -> Coins:
    try:
        return Coins.from_nano(_to_nano(amount_str))
    except ValueError as e:
        raise InvalidAmount(f"Invalid safecoins amount '{amount_str}' ({e})") from e
