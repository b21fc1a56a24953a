"""
safenet_core.utils
------------------
Hex codec, RFC 3339 timestamps and base64 helpers.

parse_hex() is deliberately lenient: any character outside [0-9a-fA-F] is
skipped and a trailing unpaired digit is dropped. Callers that must reject
malformed input use parse_hex_strict() instead.
"""

from __future__ import annotations
import base64, binascii, time
from datetime import datetime, timezone

from .errors import InvalidInput

_HEX_DIGITS = "0123456789abcdefABCDEF"


def vec_to_hex(data: bytes) -> str:
    return "".join(f"{b:02x}" for b in data)


def xorname_to_hex(xorname) -> str:
    return vec_to_hex(bytes(xorname))


def parse_hex(hex_str: str) -> bytes:
    nibbles = [int(c, 16) for c in hex_str if c in _HEX_DIGITS]
    # zip() over one iterator pairs consecutive digits and drops a trailing one
    it = iter(nibbles)
    return bytes(h << 4 | l for h, l in zip(it, it))


def parse_hex_strict(hex_str: str) -> bytes:
    try:
        return binascii.unhexlify(hex_str)
    except (binascii.Error, ValueError) as e:
        raise InvalidInput(f"Invalid hex string '{hex_str}': {e}") from e


def b64d(s: str) -> bytes:
    # Padding is optional on the wire
    s = s.strip()
    return base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))


def gen_timestamp_secs() -> str:
    # RFC 3339 in UTC, second precision
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def gen_timestamp_nanos() -> str:
    ns = time.time_ns()
    secs, frac = divmod(ns, 1_000_000_000)
    stamp = datetime.fromtimestamp(secs, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    return f"{stamp}.{frac:09d}Z"
