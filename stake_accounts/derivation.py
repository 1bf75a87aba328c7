"""
stake_accounts.derivation
-------------------------
Seeded address derivation for stake accounts.

An address is ``SHA256(base || seed || program_id)`` taken as a public key.
The stake program recomputes the same address on chain to authorize
operations against it, so the formula here must match it bit for bit.
Seeds are the decimal strings of derivation indices ("0", "1", ...).
"""

from __future__ import annotations
from typing import List
from solders.pubkey import Pubkey
from .constants import MAX_SEED_LEN, STAKE_PROGRAM_ID
from .errors import StakeAccountsError
from .utils import hashv

U64_MAX = 2**64 - 1


class PubkeyError(StakeAccountsError):
    pass


class SeedTooLong(PubkeyError):
    def __init__(self, seed: str):
        self.seed = seed
        super().__init__(
            f"seed is {len(seed.encode('utf-8'))} bytes, max is {MAX_SEED_LEN}"
        )


def create_with_seed(base: Pubkey, seed: str, program_id: Pubkey) -> Pubkey:
    raw_seed = seed.encode("utf-8")
    if len(raw_seed) > MAX_SEED_LEN:
        raise SeedTooLong(seed)
    return Pubkey(hashv(bytes(base), raw_seed, bytes(program_id)))


def stake_account_seed(i: int) -> str:
    # bool is an int subclass but str(True) is not a decimal seed
    if isinstance(i, bool) or not isinstance(i, int):
        raise ValueError(f"derivation index must be an int, got {type(i).__name__}")
    if i < 0 or i > U64_MAX:
        raise ValueError(f"derivation index must be in [0, {U64_MAX}], got {i}")
    return str(i)


def derive_stake_account_address(base: Pubkey, i: int) -> Pubkey:
    """Address of the stake account at derivation index ``i`` under ``base``."""
    return create_with_seed(base, stake_account_seed(i), STAKE_PROGRAM_ID)


def derive_stake_account_addresses(base: Pubkey, num_accounts: int) -> List[Pubkey]:
    """
    Addresses for indices ``0 .. num_accounts - 1``, in index order.

    Callers correlate this list positionally with balance lists, so the order
    is part of the contract.
    """
    if num_accounts < 0:
        raise ValueError(f"num_accounts must be non-negative, got {num_accounts}")
    return [derive_stake_account_address(base, i) for i in range(num_accounts)]
