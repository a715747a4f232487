"""
Ed25519 (RFC 8032) over edwards25519: seed generation, public key derivation,
detached sign and verify. Solana keys and signatures use exactly this scheme.
Pure Python on top of stdlib hashlib.sha512 and secrets.
"""

from __future__ import annotations

import hashlib
import secrets

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64

# Field prime p = 2^255 - 19
_P = 2**255 - 19
# Order of the base point
_L = 2**252 + 27742317777372353535851937790883648493
# d = -121665/121666 (mod p)
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
# sqrt(-1) (mod p)
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

# Extended homogeneous coordinates (X, Y, Z, T): x = X/Z, y = Y/Z, x*y = T/Z
Point = tuple[int, int, int, int]

_IDENTITY: Point = (0, 1, 1, 0)


def _inv(x: int) -> int:
    return pow(x, _P - 2, _P)


def _hash_scalar(*chunks: bytes) -> int:
    """SHA-512 over the concatenated chunks, little-endian, reduced mod L."""
    h = hashlib.sha512()
    for chunk in chunks:
        h.update(chunk)
    return int.from_bytes(h.digest(), "little") % _L


def _x_from_y(y: int, sign: int) -> int | None:
    if y >= _P:
        return None
    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x2 = u * _inv(v) % _P
    if x2 == 0:
        return None if sign else 0
    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P:
        x = x * _SQRT_M1 % _P
    if (x * x - x2) % _P:
        return None
    if x & 1 != sign:
        x = _P - x
    return x


_BASE_Y = 4 * _inv(5) % _P
_BASE_X = _x_from_y(_BASE_Y, 0)
assert _BASE_X is not None
_BASE: Point = (_BASE_X, _BASE_Y, 1, _BASE_X * _BASE_Y % _P)


def _add(p: Point, q: Point) -> Point:
    """Unified addition in extended coordinates (RFC 8032 5.1.4)."""
    a = (p[1] - p[0]) * (q[1] - q[0]) % _P
    b = (p[1] + p[0]) * (q[1] + q[0]) % _P
    c = 2 * p[3] * q[3] * _D % _P
    d = 2 * p[2] * q[2] % _P
    e, f, g, h = b - a, d - c, d + c, b + a
    return (e * f % _P, g * h % _P, f * g % _P, e * h % _P)


def _scalar_mul(k: int, p: Point) -> Point:
    acc = _IDENTITY
    while k:
        if k & 1:
            acc = _add(acc, p)
        p = _add(p, p)
        k >>= 1
    return acc


def _same_point(p: Point, q: Point) -> bool:
    return (p[0] * q[2] - q[0] * p[2]) % _P == 0 and (p[1] * q[2] - q[1] * p[2]) % _P == 0


def _compress(p: Point) -> bytes:
    zinv = _inv(p[2])
    x = p[0] * zinv % _P
    y = p[1] * zinv % _P
    return (y | (x & 1) << 255).to_bytes(32, "little")


def _decompress(data: bytes) -> Point | None:
    """32-byte encoding to a curve point; None when it does not encode one."""
    if len(data) != 32:
        return None
    n = int.from_bytes(data, "little")
    sign, y = n >> 255, n & ((1 << 255) - 1)
    x = _x_from_y(y, sign)
    if x is None:
        return None
    return (x, y, 1, x * y % _P)


def _expand_seed(seed: bytes) -> tuple[int, bytes]:
    """Clamped secret scalar and nonce prefix for a 32-byte seed (RFC 8032 5.1.5)."""
    if len(seed) != SEED_SIZE:
        raise ValueError(f"Ed25519 seed must be {SEED_SIZE} bytes, got {len(seed)}")
    digest = hashlib.sha512(seed).digest()
    a = int.from_bytes(digest[:32], "little")
    a &= (1 << 254) - 8
    a |= 1 << 254
    return a, digest[32:]


def ed25519_generate_seed() -> bytes:
    """Fresh 32-byte secret seed from the OS CSPRNG."""
    return secrets.token_bytes(SEED_SIZE)


def ed25519_public_key(seed: bytes) -> bytes:
    """
    Derive the 32-byte compressed public key for a seed.

    Args:
        seed: 32-byte secret seed.

    Raises:
        ValueError: seed has the wrong length.
    """
    a, _ = _expand_seed(seed)
    return _compress(_scalar_mul(a, _BASE))


def ed25519_sign(message: bytes, seed: bytes, public_key: bytes | None = None) -> bytes:
    """
    Deterministic Ed25519 signature R || S of message (RFC 8032 5.1.6).

    Args:
        message: Bytes to sign.
        seed: 32-byte secret seed.
        public_key: Public key of ``seed`` when the caller already holds it;
            derived from the seed otherwise.

    Returns:
        64-byte detached signature.
    """
    a, prefix = _expand_seed(seed)
    if public_key is None:
        public_key = _compress(_scalar_mul(a, _BASE))
    r = _hash_scalar(prefix, message)
    r_enc = _compress(_scalar_mul(r, _BASE))
    k = _hash_scalar(r_enc, public_key, message)
    s = (r + k * a) % _L
    return r_enc + s.to_bytes(32, "little")


def ed25519_verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    """
    Check a detached signature (RFC 8032 5.1.7). Malformed input is just invalid.

    Args:
        message: Signed bytes.
        signature: 64-byte R || S.
        public_key: 32-byte compressed public key.

    Returns:
        True iff the signature is valid for message under public_key.
    """
    if len(signature) != SIGNATURE_SIZE or len(public_key) != PUBLIC_KEY_SIZE:
        return False
    a_point = _decompress(public_key)
    if a_point is None:
        return False
    r_enc = signature[:32]
    r_point = _decompress(r_enc)
    if r_point is None:
        return False
    s = int.from_bytes(signature[32:], "little")
    if s >= _L:
        return False
    k = _hash_scalar(r_enc, public_key, message)
    return _same_point(_scalar_mul(s, _BASE), _add(r_point, _scalar_mul(k, a_point)))


__all__: tuple[str, ...] = (
    "PUBLIC_KEY_SIZE",
    "SEED_SIZE",
    "SIGNATURE_SIZE",
    "ed25519_generate_seed",
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
)
