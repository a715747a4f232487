#!/usr/bin/env python3
"""Example: unsigned token and transfer instructions as JSON."""

import json

from ixforge import (generate_keypair, initialize_mint, mint_to,
                     project_instruction, transfer_native, transfer_token)

authority = generate_keypair().pubkey()
mint = generate_keypair().pubkey()
holder = generate_keypair().pubkey()

for ix in (
    initialize_mint(authority, mint, 6),
    mint_to(mint, holder, authority, 1_000_000),
    transfer_token(holder, mint, authority, 250_000),
    transfer_native(authority, holder, 5_000),
):
    print(json.dumps(project_instruction(ix), indent=2))
