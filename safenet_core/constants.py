"""
safenet_core.constants
----------------------
Fixed sizes and names shared across the core. The key sizes are tied to the
curve (NIST P-384); the XorName length is fixed by the network.
"""

from cryptography.hazmat.primitives.asymmetric import ec

CURVE = ec.SECP384R1()

PK_SIZE = 49        # X9.62 compressed point
SK_SIZE = 48        # big-endian private scalar
XOR_NAME_LEN = 32

URL_VERSION_QUERY_NAME = "v="
DEFAULT_URL_SCHEME = "safe"

U64_MAX = 2 ** 64 - 1

# Safecoin amounts are held as nano units
COIN_TO_NANO = 1_000_000_000
NANO_DECIMAL_PLACES = 9
MAX_COINS_VALUE = (2 ** 32) * COIN_TO_NANO - 1

IPC_MSG_VERSION = 1
