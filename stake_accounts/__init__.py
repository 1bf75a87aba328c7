"""
Stake Accounts Core
===================
Deterministic custody primitives for groups of stake accounts derived from
one base public key.

Provides:
- Seeded address derivation (bit-exact with the stake program)
- Batch message builders: create, authorize (rotate), move / rebase (migrate)
- Lowering of batches to wire-level instructions for a signing collaborator
"""

from .constants import MAX_SEED_LEN, STAKE_PROGRAM_ID, STAKE_LEN
from .derivation import (
    PubkeyError, SeedTooLong, create_with_seed, stake_account_seed,
    derive_stake_account_address, derive_stake_account_addresses,
)
from .errors import StakeAccountsError
from .factory import new_stake_account
from .instructions import Authorized, Lockup, StakeAuthorize
from .message import Message
from .migration import move_stake_accounts, rebase_stake_accounts
from .rotation import authorize_stake_accounts

__all__ = [
    "MAX_SEED_LEN",
    "STAKE_PROGRAM_ID",
    "STAKE_LEN",
    "StakeAccountsError",
    "PubkeyError",
    "SeedTooLong",
    "create_with_seed",
    "stake_account_seed",
    "derive_stake_account_address",
    "derive_stake_account_addresses",
    "Authorized",
    "Lockup",
    "StakeAuthorize",
    "Message",
    "new_stake_account",
    "authorize_stake_accounts",
    "move_stake_accounts",
    "rebase_stake_accounts",
]
