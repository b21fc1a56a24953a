"""
safenet_core.crypto
-------------------
Key material and addressing for the SAFE client:

- KeyPair: P-384 public/secret pair, built at random or from hex
- Secret: wrapper that keeps secret bytes out of repr(), str() and pickle
- XorName: fixed-length network address, derived from a public key by
  truncating its compressed point encoding

The curve arithmetic is delegated to `cryptography`; this module only deals
with sizes, encodings and the consistency of user supplied key material.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .constants import CURVE, PK_SIZE, SK_SIZE, XOR_NAME_LEN
from .errors import InvalidInput
from .logger import get_logger
from .utils import parse_hex, vec_to_hex

log = get_logger("SAFE.Crypto")

# Group order of P-384; valid secret scalars lie in [1, n - 1]
_CURVE_ORDER = int(
    "ffffffffffffffffffffffffffffffffffffffffffffffff"
    "c7634d81f4372ddf581a0db248b0a77aecec196accc52973",
    16,
)


# --------- Secret wrapper ----------
class Secret:
    """Holds secret material. Its value only leaves through expose_secret()."""

    __slots__ = ("_value",)

    def __init__(self, value):
        self._value = value

    def expose_secret(self):
        return self._value

    def __repr__(self) -> str:
        return "Secret([REDACTED])"

    __str__ = __repr__

    def __reduce__(self):
        raise TypeError("Secret values cannot be pickled; use serialize_secret()")


def serialize_secret(secret: Secret) -> bytes:
    """Fixed-size big-endian encoding of a wrapped secret key."""
    if not isinstance(secret, Secret):
        raise TypeError("serialize_secret() only accepts a Secret wrapper")
    sk: ec.EllipticCurvePrivateKey = secret.expose_secret()
    return sk.private_numbers().private_value.to_bytes(SK_SIZE, "big")


def deserialize_secret(data: bytes) -> Secret:
    if len(data) != SK_SIZE:
        raise InvalidInput(
            f"Failed to deserialize provided secret key: expected {SK_SIZE} bytes, got {len(data)}"
        )
    value = int.from_bytes(data, "big")
    if not 0 < value < _CURVE_ORDER:
        raise InvalidInput("Failed to deserialize provided secret key: scalar out of range")
    try:
        return Secret(ec.derive_private_key(value, CURVE))
    except ValueError as e:
        raise InvalidInput(f"Failed to deserialize provided secret key: {e}") from e


# --------- Public / secret key hex helpers ----------
def pk_to_bytes(pk: ec.EllipticCurvePublicKey) -> bytes:
    return pk.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)


def pk_to_hex(pk: ec.EllipticCurvePublicKey) -> str:
    return vec_to_hex(pk_to_bytes(pk))


def pk_from_hex(hex_str: str) -> ec.EllipticCurvePublicKey:
    pk_bytes = parse_hex(hex_str)
    if len(pk_bytes) != PK_SIZE:
        raise InvalidInput(
            f"Invalid public key bytes: expected {PK_SIZE} bytes, got {len(pk_bytes)}"
        )
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(CURVE, pk_bytes)
    except ValueError as e:
        raise InvalidInput(f"Invalid public key bytes: {e}") from e


def sk_from_hex(hex_str: str) -> ec.EllipticCurvePrivateKey:
    return deserialize_secret(parse_hex(hex_str)).expose_secret()


# --------- Key pair ----------
@dataclass(frozen=True, eq=False)
class KeyPair:
    pk: ec.EllipticCurvePublicKey
    sk: ec.EllipticCurvePrivateKey = field(repr=False)

    @classmethod
    def random(cls) -> "KeyPair":
        sk = ec.generate_private_key(CURVE)
        return cls(pk=sk.public_key(), sk=sk)

    @classmethod
    def from_hex_keys(cls, pk_hex_str: str, sk_hex_str: str) -> "KeyPair":
        pk = pk_from_hex(pk_hex_str)
        sk = sk_from_hex(sk_hex_str)
        if pk_to_bytes(pk) != pk_to_bytes(sk.public_key()):
            log.warning("Rejected key pair: public key does not match secret key")
            raise InvalidInput("Secret key doesn't correspond to public key provided")
        return cls(pk=pk, sk=sk)

    @classmethod
    def from_hex_sk(cls, sk_hex_str: str) -> "KeyPair":
        sk = sk_from_hex(sk_hex_str)
        return cls(pk=sk.public_key(), sk=sk)

    def to_hex_key_pair(self) -> Tuple[str, str]:
        pk = pk_to_hex(self.pk)
        sk = vec_to_hex(serialize_secret(Secret(self.sk)))
        return pk, sk

    def xorname(self) -> "XorName":
        return xorname_from_pk(self.pk)


# --------- Addressing ----------
@dataclass(frozen=True)
class XorName:
    name: bytes = bytes(XOR_NAME_LEN)

    def __post_init__(self):
        if len(self.name) != XOR_NAME_LEN:
            raise InvalidInput(f"XorName must be {XOR_NAME_LEN} bytes, got {len(self.name)}")

    def __bytes__(self) -> bytes:
        return self.name

    def hex(self) -> str:
        return vec_to_hex(self.name)

    def __str__(self) -> str:
        return self.hex()


def xorname_from_pk(pk: ec.EllipticCurvePublicKey) -> XorName:
    pk_as_bytes = pk_to_bytes(pk)
    buf = bytearray(XOR_NAME_LEN)
    buf[:] = pk_as_bytes[:XOR_NAME_LEN]
    return XorName(bytes(buf))
