import json
import pytest
from dataclasses import FrozenInstanceError
from solders.pubkey import Pubkey
from stake_accounts.message import Message
from stake_accounts.rotation import authorize_stake_accounts


def _rotation_message():
    fee_payer, base, staker, withdrawer, new_staker, new_withdrawer = [Pubkey.new_unique() for _ in range(6)]
    (msg,) = authorize_stake_accounts(fee_payer, base, staker, withdrawer, new_staker, new_withdrawer, 1)
    return msg, fee_payer, staker, withdrawer


def test_message_is_immutable():
    msg, *_ = _rotation_message()
    assert isinstance(msg.instructions, tuple)
    with pytest.raises(FrozenInstanceError):
        msg.fee_payer = Pubkey.new_unique()


def test_signers_fee_payer_first_without_repeats():
    msg, fee_payer, staker, withdrawer = _rotation_message()
    assert msg.signers() == [fee_payer, staker, withdrawer]

    same = Message.new_with_payer(msg.instructions, staker)
    assert same.signers() == [staker, withdrawer]


def test_compiled_message_signers():
    msg, fee_payer, staker, withdrawer = _rotation_message()
    compiled = msg.to_solders()
    required = compiled.header.num_required_signatures
    assert compiled.account_keys[0] == fee_payer
    assert set(compiled.account_keys[:required]) == set(msg.signers())


def test_to_json_summary():
    msg, fee_payer, staker, _ = _rotation_message()
    data = json.loads(msg.to_json())
    assert data["fee_payer"] == str(fee_payer)
    assert [ix["role"] for ix in data["instructions"]] == ["staker", "withdrawer"]
    assert data["instructions"][0]["authority"] == str(staker)
    assert msg.to_json() == msg.to_json()
