"""
stake_accounts.utils
--------------------
Small helpers shared by the derivation scheme and the message summaries:
the multi-part SHA-256 digest and canonical JSON serialization.
"""

from __future__ import annotations
import json
from typing import Any, Dict
from cryptography.hazmat.primitives import hashes


def hashv(*parts: bytes) -> bytes:
    # SHA-256 over the concatenation of parts, no separators
    h = hashes.Hash(hashes.SHA256())
    for part in parts:
        h.update(part)
    return h.finalize()


def canonical_json(obj: Dict[str, Any]) -> bytes:
    # Deterministic, minimal JSON for audit output
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False).encode("utf-8")
