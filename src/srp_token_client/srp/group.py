"""
srp_token_client.srp.group

SRP-6a group parameters and primitive helpers for the Cognito variant.

Responsibilities:
- Hold the 3072-bit group (RFC 3526) with g = 2 and the derived multiplier k.
- Provide the hex/hash/HKDF primitives the provider's variant is defined in terms of.

The provider hashes *hex strings decoded to bytes*, so every value goes through
`pad_hex` before hashing; getting the padding wrong yields a valid-looking but
rejected signature.
"""

from __future__ import annotations

import hashlib
import hmac

N_HEX = (
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
    "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
    "670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9"
    "DE2BCBF6955817183995497CEA956AE515D2261898FA0510"
    "15728E5A8AAAC42DAD33170D04507A33A85521ABDF1CBA64"
    "ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7"
    "ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6B"
    "F12FFA06D98A0864D87602733EC86A64521F2B18177B200C"
    "BBE117577A615D6C770988C0BAD946E208E24FA074E5AB31"
    "43DB5BFCE0FD108E4B82D120A93AD2CAFFFFFFFFFFFFFFFF"
)
G_HEX = "2"

N = int(N_HEX, 16)
G = int(G_HEX, 16)

INFO_BITS = b"Caldera Derived Key"


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest().rjust(64, "0")


def hex_hash(hex_string: str) -> str:
    return sha256_hex(bytes.fromhex(hex_string))


def to_hex(value: int) -> str:
    return format(value, "x")


def pad_hex(value: int | str) -> str:
    """
    Even-length hex with a leading 00 byte when the top bit is set,
    i.e. the big-endian two's-complement encoding of a positive integer.
    """
    h = value if isinstance(value, str) else to_hex(value)
    if len(h) % 2 == 1:
        return "0" + h
    if h[0] in "89ABCDEFabcdef":
        return "00" + h
    return h


# k = H(N | g)
K = int(hex_hash("00" + N_HEX + "0" + G_HEX), 16)


def compute_u(big_a: int, big_b: int) -> int:
    return int(hex_hash(pad_hex(big_a) + pad_hex(big_b)), 16)


def compute_x(*, pool_suffix: str, user_id: str, password: str, salt_hex: str) -> int:
    identity_hash = sha256_hex(f"{pool_suffix}{user_id}:{password}".encode())
    return int(hex_hash(pad_hex(salt_hex) + identity_hash), 16)


def compute_hkdf(ikm: bytes, salt: bytes) -> bytes:
    # Single-block HKDF-SHA256 (RFC 5869) truncated to 16 bytes.
    prk = hmac.new(salt, ikm, hashlib.sha256).digest()
    return hmac.new(prk, INFO_BITS + b"\x01", hashlib.sha256).digest()[:16]


def derive_session_key(premaster: int, u: int) -> bytes:
    return compute_hkdf(bytes.fromhex(pad_hex(premaster)), bytes.fromhex(pad_hex(u)))


# --- Module Notes -----------------------------------------------------------
# The server-side test double in `tests/support.py` verifies proofs with these
# same helpers.
