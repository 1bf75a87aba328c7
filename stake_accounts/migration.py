"""
stake_accounts.migration
------------------------
Moves balances from existing stake accounts into accounts derived from a new
base key.

``balances`` is an ordered list of ``(source_address, lamports)``; entry ``i``
lands in ``derive_stake_account_address(new_base_pubkey, i)``. Callers obtain
the pairs themselves (e.g. from an RPC balance query) before building.

Balances are not range-checked here: a negative or larger-than-u64 lamports
value still builds a Message and only fails when the message is lowered with
``Message.to_instructions()`` or ``Message.to_solders()``.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple
from solders.pubkey import Pubkey
from .derivation import derive_stake_account_address, stake_account_seed
from .instructions import SplitWithSeed, split_with_seed
from .logger import get_logger
from .message import Message
from .rotation import authorize_stake_accounts_instructions

log = get_logger("StakeAccounts.Migration")

Balances = Sequence[Tuple[Pubkey, int]]


def _split_to_new_base(
    stake_account_address: Pubkey,
    new_base_pubkey: Pubkey,
    i: int,
    stake_authority_pubkey: Pubkey,
    lamports: int,
) -> Tuple[Pubkey, SplitWithSeed]:
    new_stake_account_address = derive_stake_account_address(new_base_pubkey, i)
    instruction = split_with_seed(
        stake_account_address,
        stake_authority_pubkey,
        lamports,
        new_stake_account_address,
        new_base_pubkey,
        stake_account_seed(i),
    )
    return new_stake_account_address, instruction


def move_stake_account(
    stake_account_address: Pubkey,
    new_base_pubkey: Pubkey,
    i: int,
    fee_payer_pubkey: Pubkey,
    stake_authority_pubkey: Pubkey,
    withdraw_authority_pubkey: Pubkey,
    new_stake_authority_pubkey: Pubkey,
    new_withdraw_authority_pubkey: Pubkey,
    lamports: int,
) -> Message:
    # split and authority handoff share one message so they apply together
    new_stake_account_address, split = _split_to_new_base(
        stake_account_address, new_base_pubkey, i, stake_authority_pubkey, lamports
    )
    instructions = [split]
    instructions.extend(
        authorize_stake_accounts_instructions(
            new_stake_account_address,
            stake_authority_pubkey,
            withdraw_authority_pubkey,
            new_stake_authority_pubkey,
            new_withdraw_authority_pubkey,
        )
    )
    return Message.new_with_payer(instructions, fee_payer_pubkey)


def move_stake_accounts(
    fee_payer_pubkey: Pubkey,
    new_base_pubkey: Pubkey,
    stake_authority_pubkey: Pubkey,
    withdraw_authority_pubkey: Pubkey,
    new_stake_authority_pubkey: Pubkey,
    new_withdraw_authority_pubkey: Pubkey,
    balances: Balances,
) -> List[Message]:
    log.debug(f"[MOVE] {len(balances)} accounts to base={new_base_pubkey}")
    return [
        move_stake_account(
            stake_account_address,
            new_base_pubkey,
            i,
            fee_payer_pubkey,
            stake_authority_pubkey,
            withdraw_authority_pubkey,
            new_stake_authority_pubkey,
            new_withdraw_authority_pubkey,
            lamports,
        )
        for i, (stake_account_address, lamports) in enumerate(balances)
    ]


def rebase_stake_accounts(
    fee_payer_pubkey: Pubkey,
    new_base_pubkey: Pubkey,
    stake_authority_pubkey: Pubkey,
    balances: Balances,
) -> List[Message]:
    """Like ``move_stake_accounts`` but the new accounts keep their current authorities."""
    log.debug(f"[REBASE] {len(balances)} accounts to base={new_base_pubkey}")
    messages = []
    for i, (stake_account_address, lamports) in enumerate(balances):
        _, split = _split_to_new_base(
            stake_account_address, new_base_pubkey, i, stake_authority_pubkey, lamports
        )
        messages.append(Message.new_with_payer([split], fee_payer_pubkey))
    return messages
