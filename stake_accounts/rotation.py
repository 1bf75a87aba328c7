# stake_accounts/rotation.py

from __future__ import annotations
from typing import List
from solders.pubkey import Pubkey
from .derivation import derive_stake_account_addresses
from .instructions import Authorize, StakeAuthorize, authorize
from .logger import get_logger
from .message import Message

log = get_logger("StakeAccounts.Rotation")


def authorize_stake_accounts_instructions(
    stake_account_address: Pubkey,
    stake_authority_pubkey: Pubkey,
    withdraw_authority_pubkey: Pubkey,
    new_stake_authority_pubkey: Pubkey,
    new_withdraw_authority_pubkey: Pubkey,
) -> List[Authorize]:
    # staker first, then withdrawer
    return [
        authorize(
            stake_account_address,
            stake_authority_pubkey,
            new_stake_authority_pubkey,
            StakeAuthorize.STAKER,
        ),
        authorize(
            stake_account_address,
            withdraw_authority_pubkey,
            new_withdraw_authority_pubkey,
            StakeAuthorize.WITHDRAWER,
        ),
    ]


def authorize_stake_accounts(
    fee_payer_pubkey: Pubkey,
    base_pubkey: Pubkey,
    stake_authority_pubkey: Pubkey,
    withdraw_authority_pubkey: Pubkey,
    new_stake_authority_pubkey: Pubkey,
    new_withdraw_authority_pubkey: Pubkey,
    num_accounts: int,
) -> List[Message]:
    """
    One message per derived account, index-aligned with
    ``derive_stake_account_addresses(base_pubkey, num_accounts)``.

    Each message hands both roles of one account to the new keys, so a
    failure on one account leaves the others independent.
    """
    addresses = derive_stake_account_addresses(base_pubkey, num_accounts)
    log.debug(f"[AUTHORIZE] {num_accounts} accounts base={base_pubkey}")
    return [
        Message.new_with_payer(
            authorize_stake_accounts_instructions(
                address,
                stake_authority_pubkey,
                withdraw_authority_pubkey,
                new_stake_authority_pubkey,
                new_withdraw_authority_pubkey,
            ),
            fee_payer_pubkey,
        )
        for address in addresses
    ]
