"""
Typed proof bundles.

Exported bundles come in two shapes:
  - Cardano (CIP-8): { addressHex|addressBech32|address, payloadHex, signatureHex, keyHex }
  - Solana:          { addressBase58|address, payloadUtf8, signatureBase58, pubkeyBase58 }

Classification only looks at which fields are present, never at their
contents, so it cannot fail. A bundle carrying both field sets is Cardano.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

CARDANO_SIGNALS = ("signatureHex", "keyHex", "payloadHex")
CARDANO_ADDRESS_FIELDS = ("addressHex", "addressBech32", "address")
SOLANA_SIGNALS = ("signatureBase58", "pubkeyBase58", "payloadUtf8")
SOLANA_ADDRESS_FIELDS = ("addressBase58", "address")

@dataclass(frozen=True)
class CardanoBundle:
    address: Any
    payload: Any
    signature: Any
    key: Any

@dataclass(frozen=True)
class SolanaBundle:
    address: Any
    payload: Any
    signature: Any
    pubkey: Any

@dataclass(frozen=True)
class UnknownBundle:
    pass

ProofBundle = Union[CardanoBundle, SolanaBundle, UnknownBundle]

def _present(obj: Mapping, name: str) -> bool:
    return bool(obj.get(name))

def _first(obj: Mapping, names) -> Optional[Any]:
    for name in names:
        if _present(obj, name):
            return obj.get(name)
    return None

def parse_bundle(obj: Any) -> ProofBundle:
    if not isinstance(obj, Mapping):
        return UnknownBundle()
    if any(_present(obj, f) for f in CARDANO_SIGNALS):
        return CardanoBundle(
            address=_first(obj, CARDANO_ADDRESS_FIELDS),
            payload=obj.get("payloadHex"),
            signature=obj.get("signatureHex"),
            key=obj.get("keyHex"),
        )
    if any(_present(obj, f) for f in SOLANA_SIGNALS):
        return SolanaBundle(
            address=_first(obj, SOLANA_ADDRESS_FIELDS),
            payload=obj.get("payloadUtf8"),
            signature=obj.get("signatureBase58"),
            pubkey=obj.get("pubkeyBase58"),
        )
    return UnknownBundle()
