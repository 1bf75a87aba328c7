# stake_accounts/factory.py

from __future__ import annotations
from typing import Optional
from solders.pubkey import Pubkey
from .derivation import derive_stake_account_address, stake_account_seed
from .instructions import Authorized, Lockup, create_account_with_seed
from .logger import get_logger
from .message import Message

log = get_logger("StakeAccounts.Factory")


def new_stake_account(
    fee_payer_pubkey: Pubkey,
    sender_pubkey: Pubkey,
    base_pubkey: Pubkey,
    lamports: int,
    stake_authority_pubkey: Pubkey,
    withdraw_authority_pubkey: Pubkey,
    lockup: Optional[Lockup] = None,
) -> Message:
    """
    Build the message that creates the stake account at index 0 under ``base_pubkey``.

    The new account is funded by ``sender_pubkey`` with ``lamports``, owned by
    the stake program, and initialized with the given authorities and lockup
    (unlocked when omitted). Only index 0 is ever created here; a group of N
    accounts takes one base key per account.
    """
    index = 0
    stake_account_address = derive_stake_account_address(base_pubkey, index)
    authorized = Authorized(staker=stake_authority_pubkey, withdrawer=withdraw_authority_pubkey)
    instruction = create_account_with_seed(
        sender_pubkey,
        stake_account_address,
        base_pubkey,
        stake_account_seed(index),
        authorized,
        lockup or Lockup(),
        lamports,
    )
    log.debug(f"[CREATE] {stake_account_address} base={base_pubkey} lamports={lamports}")
    return Message.new_with_payer([instruction], fee_payer_pubkey)
