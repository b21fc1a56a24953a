"""
SAFE Network Client Core
========================
Addressing and credential primitives shared by SAFE client tools.

Provides:
- Hex codec and RFC 3339 timestamp helpers
- P-384 key pairs with hex (de)serialisation and XorName derivation
- safe:// URL parsing
- Decoding of Authenticator IPC responses into AuthGranted credentials
- Safecoin amount parsing
"""

from .errors import SafeError, InvalidInput, InvalidAmount, InvalidXorUrl, AuthError
from .crypto import KeyPair, Secret, XorName, xorname_from_pk
from .xorurl import ParsedUrl, get_subnames_host_and_path, parse_xorurl
from .ipc import AuthGranted, decode_ipc_msg
from .coins import Coins, parse_coins_amount
from .utils import (
    vec_to_hex, parse_hex, parse_hex_strict, xorname_to_hex,
    gen_timestamp_secs, gen_timestamp_nanos,
)

__all__ = [
    "SafeError", "InvalidInput", "InvalidAmount", "InvalidXorUrl", "AuthError",
    "KeyPair", "Secret", "XorName", "xorname_from_pk",
    "ParsedUrl", "get_subnames_host_and_path", "parse_xorurl",
    "AuthGranted", "decode_ipc_msg",
    "Coins", "parse_coins_amount",
    "vec_to_hex", "parse_hex", "parse_hex_strict", "xorname_to_hex",
    "gen_timestamp_secs", "gen_timestamp_nanos",
]
