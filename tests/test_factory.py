from solders.pubkey import Pubkey
from solders import system_program
from stake_accounts.constants import STAKE_PROGRAM_ID
from stake_accounts.derivation import derive_stake_account_address
from stake_accounts.factory import new_stake_account
from stake_accounts.instructions import CreateAccountWithSeed, Lockup


def _keys(n):
    return [Pubkey.new_unique() for _ in range(n)]


def test_new_stake_account_targets_index_zero():
    fee_payer, sender, base, staker, withdrawer = _keys(5)
    msg = new_stake_account(fee_payer, sender, base, 1_000_000, staker, withdrawer)

    assert msg.fee_payer == fee_payer
    assert len(msg.instructions) == 1
    ix = msg.instructions[0]
    assert isinstance(ix, CreateAccountWithSeed)
    assert ix.stake_pubkey == derive_stake_account_address(base, 0)
    assert ix.seed == "0"
    assert ix.base == base
    assert ix.from_pubkey == sender
    assert ix.lamports == 1_000_000
    assert ix.authorized.staker == staker
    assert ix.authorized.withdrawer == withdrawer
    assert ix.lockup == Lockup()


def test_new_stake_account_custom_lockup():
    fee_payer, sender, base, staker, withdrawer, custodian = _keys(6)
    lockup = Lockup(unix_timestamp=1_700_000_000, epoch=42, custodian=custodian)
    msg = new_stake_account(fee_payer, sender, base, 5, staker, withdrawer, lockup=lockup)
    assert msg.instructions[0].lockup == lockup


def test_new_stake_account_lowers_to_create_and_initialize():
    fee_payer, sender, base, staker, withdrawer = _keys(5)
    msg = new_stake_account(fee_payer, sender, base, 10, staker, withdrawer)
    wire = msg.to_instructions()

    assert [ix.program_id for ix in wire] == [system_program.ID, STAKE_PROGRAM_ID]
    assert wire[1].accounts[0].pubkey == derive_stake_account_address(base, 0)
    assert set(msg.signers()) == {fee_payer, sender, base}
