"""
stake_accounts.message
----------------------
Defines Message, the instruction batch produced by every builder.

A Message is an ordered tuple of stake-level instructions plus the fee payer.
Instructions within one message run in sequence as one atomic transaction
once a collaborator signs and submits it, so their order is preserved exactly.

Key features:
- Immutable value (frozen dataclass, tuple of frozen instructions)
- Lowering to wire instructions / a compiled solders Message for signing
- Deterministic dict / JSON summaries for review and audit output
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple
from solders.instruction import Instruction
from solders.message import Message as CompiledMessage
from solders.pubkey import Pubkey
from .instructions import StakeInstruction
from .utils import canonical_json


@dataclass(frozen=True)
class Message:
    instructions: Tuple[StakeInstruction, ...]
    fee_payer: Pubkey

    @classmethod
    def new_with_payer(cls, instructions: Iterable[StakeInstruction], fee_payer: Pubkey) -> "Message":
        return cls(tuple(instructions), fee_payer)

    def kinds(self) -> List[str]:
        return [ix.kind for ix in self.instructions]

    def signers(self) -> List[Pubkey]:
        """Keys that must sign the lowered transaction, fee payer first, no repeats."""
        seen = [self.fee_payer]
        for ix in self.instructions:
            for key in ix.signers():
                if key not in seen:
                    seen.append(key)
        return seen

    def to_instructions(self) -> List[Instruction]:
        out: List[Instruction] = []
        for ix in self.instructions:
            out.extend(ix.to_instructions())
        return out

    def to_solders(self) -> CompiledMessage:
        return CompiledMessage(self.to_instructions(), self.fee_payer)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fee_payer": str(self.fee_payer),
            "instructions": [ix.to_dict() for ix in self.instructions],
        }

    def to_json(self) -> str:
        return canonical_json(self.to_dict()).decode("utf-8")
