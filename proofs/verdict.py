from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

UNKNOWN_FORMAT = "Unknown bundle format"
MISSING_CARDANO_FIELDS = "Missing fields for Cardano bundle"
MISSING_SOLANA_FIELDS = "Missing fields for Solana bundle"
BAD_COSE_SIGN1 = "Bad COSE_Sign1"
MALFORMED_COSE_SIGN1 = "Malformed COSE_Sign1"
BAD_COSE_KEY = "Bad COSE_Key"
MISSING_PUBKEY = "Missing pubkey"
UNSUPPORTED_COSE_KEY = "Unsupported COSE_Key parameters"
INVALID_SIGNATURE = "Invalid signature"
KEYHASH_MISMATCH = "Pubkey does not match address payment keyhash"
SIGNED_ADDRESS_MISMATCH = "Address does not match COSE_Sign1 protected header"
PAYLOAD_MISMATCH = "Payload mismatch"
PUBKEY_ADDRESS_MISMATCH = "Public key does not match address"
VERIFY_ERROR = "Verify error"

@dataclass(frozen=True)
class Verdict:
    ok: bool
    reason: Optional[str] = None

    def __post_init__(self):
        if self.ok != (self.reason is None):
            raise ValueError("reason must be None exactly when ok is True")

    @classmethod
    def accept(cls) -> "Verdict":
        return cls(ok=True, reason=None)

    @classmethod
    def reject(cls, reason: str) -> "Verdict":
        return cls(ok=False, reason=reason or VERIFY_ERROR)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": self.ok, "reason": self.reason}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
