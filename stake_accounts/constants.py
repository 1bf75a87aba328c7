# stake_accounts/constants.py

from typing import Final
from solders.pubkey import Pubkey

MAX_SEED_LEN: Final[int] = 32
"""Longest seed (in bytes) accepted by the seeded address scheme."""

STAKE_PROGRAM_ID: Final[Pubkey] = Pubkey.from_string("Stake11111111111111111111111111111111111111")
"""Public key that identifies the Stake program."""

STAKE_LEN: Final[int] = 200
"""Size of a stake account's data, in bytes."""
