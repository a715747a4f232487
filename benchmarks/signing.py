"""
Benchmark the per-request work: Ed25519 key derivation, sign and verify, and the
instruction builders with their JSON projection. Reports time per call.

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import time

from ixforge import (Keypair, Pubkey, ed25519_public_key, ed25519_sign,
                     ed25519_verify, initialize_mint, mint_to,
                     project_instruction, transfer_native, transfer_token)

N = 200
N_SLOW = 50

SEED = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
MSG = b"bench message for ed25519"
A = Pubkey(bytes(range(32)))
B = Pubkey(bytes(range(32, 64)))
C = Pubkey(bytes(range(64, 96)))


def _time_per_call(fn, *args, n: int = N, **kwargs) -> float:
    for _ in range(10):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _report(name: str, seconds: float) -> None:
    print(f"  {name:<28} {seconds * 1e3:9.4f} ms")


def main() -> None:
    print("Benchmark: ixforge per-request operations")
    print(f"  n = {N} (builders), {N_SLOW} (curve ops)")
    print()

    print("  --- Ed25519 ---")
    pub = ed25519_public_key(SEED)
    sig = ed25519_sign(MSG, SEED)
    assert ed25519_verify(MSG, sig, pub)
    _report("ed25519_public_key", _time_per_call(ed25519_public_key, SEED, n=N_SLOW))
    _report("ed25519_sign", _time_per_call(ed25519_sign, MSG, SEED, n=N_SLOW))
    _report("ed25519_sign (known pubkey)", _time_per_call(ed25519_sign, MSG, SEED, pub, n=N_SLOW))
    _report("ed25519_verify", _time_per_call(ed25519_verify, MSG, sig, pub, n=N_SLOW))
    _report("Keypair.from_base58_string", _time_per_call(
        Keypair.from_base58_string, Keypair.from_seed(SEED).to_base58_string(), n=N_SLOW
    ))
    print()

    print("  --- Instructions ---")
    _report("initialize_mint", _time_per_call(initialize_mint, A, B, 9))
    _report("mint_to", _time_per_call(mint_to, A, B, C, 1_000))
    _report("transfer_native", _time_per_call(transfer_native, A, B, 1_000))
    _report("transfer_token", _time_per_call(transfer_token, B, C, A, 1_000))
    ix = transfer_token(B, C, A, 1_000)
    _report("project_instruction", _time_per_call(project_instruction, ix))
    _report("Pubkey.from_string", _time_per_call(Pubkey.from_string, str(A)))


if __name__ == "__main__":
    main()
