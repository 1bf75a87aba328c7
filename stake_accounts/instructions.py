"""
stake_accounts.instructions
---------------------------
Stake program instruction constructors.

Each constructor returns one stake-level instruction value: the unit the batch
builders reason about and count. ``to_instructions()`` lowers a value to the
wire instructions the runtime executes:

- CreateAccountWithSeed -> system CreateAccountWithSeed + stake Initialize
- SplitWithSeed         -> system AllocateWithSeed + stake Split
- Authorize             -> stake Authorize

Stake instruction data is bincode: a little-endian u32 variant tag followed by
the fields in declaration order, declared below as borsh_construct layouts.
Building a value never checks amounts; an out-of-range lamports, epoch or
timestamp surfaces as a construct error from ``to_instructions()``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Dict, List, Tuple, Union
from borsh_construct import CStruct, I64, U32, U64, U8
from solders import system_program
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.sysvar import CLOCK, RENT
from .constants import STAKE_LEN, STAKE_PROGRAM_ID

# StakeInstruction variant tags
INITIALIZE = 0
AUTHORIZE = 1
SPLIT = 3

AuthorizedLayout = CStruct("staker" / U8[32], "withdrawer" / U8[32])
LockupLayout = CStruct("unix_timestamp" / I64, "epoch" / U64, "custodian" / U8[32])
InitializeLayout = CStruct(
    "tag" / U32,
    "authorized" / AuthorizedLayout,
    "lockup" / LockupLayout,
)
AuthorizeLayout = CStruct(
    "tag" / U32,
    "new_authorized" / U8[32],
    "stake_authorize" / U32,
)
SplitLayout = CStruct("tag" / U32, "lamports" / U64)


class StakeAuthorize(IntEnum):
    STAKER = 0
    WITHDRAWER = 1


@dataclass(frozen=True)
class Authorized:
    staker: Pubkey
    withdrawer: Pubkey

    def to_layout(self) -> Dict[str, Any]:
        return {"staker": list(bytes(self.staker)), "withdrawer": list(bytes(self.withdrawer))}


@dataclass(frozen=True)
class Lockup:
    """Withdrawal lockup. The default value is unlocked."""
    unix_timestamp: int = 0
    epoch: int = 0
    custodian: Pubkey = field(default_factory=Pubkey.default)

    def to_layout(self) -> Dict[str, Any]:
        return {
            "unix_timestamp": self.unix_timestamp,
            "epoch": self.epoch,
            "custodian": list(bytes(self.custodian)),
        }

    def to_bytes(self) -> bytes:
        return LockupLayout.build(self.to_layout())


def _stake_instruction(data: bytes, accounts: List[AccountMeta]) -> Instruction:
    return Instruction(STAKE_PROGRAM_ID, data, accounts)


def _initialize(stake_pubkey: Pubkey, authorized: Authorized, lockup: Lockup) -> Instruction:
    return _stake_instruction(
        InitializeLayout.build({
            "tag": INITIALIZE,
            "authorized": authorized.to_layout(),
            "lockup": lockup.to_layout(),
        }),
        [
            AccountMeta(stake_pubkey, is_signer=False, is_writable=True),
            AccountMeta(RENT, is_signer=False, is_writable=False),
        ],
    )


@dataclass(frozen=True)
class CreateAccountWithSeed:
    kind: ClassVar[str] = "create_account_with_seed"

    from_pubkey: Pubkey
    stake_pubkey: Pubkey
    base: Pubkey
    seed: str
    authorized: Authorized
    lockup: Lockup
    lamports: int

    def signers(self) -> Tuple[Pubkey, ...]:
        return (self.from_pubkey, self.base)

    def to_instructions(self) -> List[Instruction]:
        allocate = system_program.create_account_with_seed(
            system_program.CreateAccountWithSeedParams(
                from_pubkey=self.from_pubkey,
                to_pubkey=self.stake_pubkey,
                base=self.base,
                seed=self.seed,
                lamports=self.lamports,
                space=STAKE_LEN,
                owner=STAKE_PROGRAM_ID,
            )
        )
        return [allocate, _initialize(self.stake_pubkey, self.authorized, self.lockup)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "from": str(self.from_pubkey),
            "stake_account": str(self.stake_pubkey),
            "base": str(self.base),
            "seed": self.seed,
            "staker": str(self.authorized.staker),
            "withdrawer": str(self.authorized.withdrawer),
            "lockup": {
                "unix_timestamp": self.lockup.unix_timestamp,
                "epoch": self.lockup.epoch,
                "custodian": str(self.lockup.custodian),
            },
            "lamports": self.lamports,
        }


@dataclass(frozen=True)
class SplitWithSeed:
    kind: ClassVar[str] = "split_with_seed"

    stake_pubkey: Pubkey
    authorized_pubkey: Pubkey
    lamports: int
    split_stake_pubkey: Pubkey
    base: Pubkey
    seed: str

    def signers(self) -> Tuple[Pubkey, ...]:
        return (self.authorized_pubkey, self.base)

    def to_instructions(self) -> List[Instruction]:
        allocate = system_program.allocate_with_seed(
            system_program.AllocateWithSeedParams(
                address=self.split_stake_pubkey,
                base=self.base,
                seed=self.seed,
                space=STAKE_LEN,
                owner=STAKE_PROGRAM_ID,
            )
        )
        split = _stake_instruction(
            SplitLayout.build({"tag": SPLIT, "lamports": self.lamports}),
            [
                AccountMeta(self.stake_pubkey, is_signer=False, is_writable=True),
                AccountMeta(self.split_stake_pubkey, is_signer=False, is_writable=True),
                AccountMeta(self.authorized_pubkey, is_signer=True, is_writable=False),
            ],
        )
        return [allocate, split]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "stake_account": str(self.stake_pubkey),
            "authority": str(self.authorized_pubkey),
            "lamports": self.lamports,
            "split_stake_account": str(self.split_stake_pubkey),
            "base": str(self.base),
            "seed": self.seed,
        }


@dataclass(frozen=True)
class Authorize:
    kind: ClassVar[str] = "authorize"

    stake_pubkey: Pubkey
    authorized_pubkey: Pubkey
    new_authorized_pubkey: Pubkey
    stake_authorize: StakeAuthorize

    def signers(self) -> Tuple[Pubkey, ...]:
        return (self.authorized_pubkey,)

    def to_instructions(self) -> List[Instruction]:
        data = AuthorizeLayout.build({
            "tag": AUTHORIZE,
            "new_authorized": list(bytes(self.new_authorized_pubkey)),
            "stake_authorize": int(self.stake_authorize),
        })
        return [
            _stake_instruction(
                data,
                [
                    AccountMeta(self.stake_pubkey, is_signer=False, is_writable=True),
                    AccountMeta(CLOCK, is_signer=False, is_writable=False),
                    AccountMeta(self.authorized_pubkey, is_signer=True, is_writable=False),
                ],
            )
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "stake_account": str(self.stake_pubkey),
            "authority": str(self.authorized_pubkey),
            "new_authority": str(self.new_authorized_pubkey),
            "role": self.stake_authorize.name.lower(),
        }


StakeInstruction = Union[CreateAccountWithSeed, SplitWithSeed, Authorize]


# --------- Constructors ----------
def create_account_with_seed(
    from_pubkey: Pubkey,
    stake_pubkey: Pubkey,
    base: Pubkey,
    seed: str,
    authorized: Authorized,
    lockup: Lockup,
    lamports: int,
) -> CreateAccountWithSeed:
    return CreateAccountWithSeed(from_pubkey, stake_pubkey, base, seed, authorized, lockup, lamports)


def split_with_seed(
    stake_pubkey: Pubkey,
    authorized_pubkey: Pubkey,
    lamports: int,
    split_stake_pubkey: Pubkey,
    base: Pubkey,
    seed: str,
) -> SplitWithSeed:
    return SplitWithSeed(stake_pubkey, authorized_pubkey, lamports, split_stake_pubkey, base, seed)


def authorize(
    stake_pubkey: Pubkey,
    authorized_pubkey: Pubkey,
    new_authorized_pubkey: Pubkey,
    stake_authorize: StakeAuthorize,
) -> Authorize:
    return Authorize(stake_pubkey, authorized_pubkey, new_authorized_pubkey, stake_authorize)
