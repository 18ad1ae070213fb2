"""
Cardano Shelley address decoding and payment credential binding.

Header byte layout (CIP-19): the high nibble is the address type, the low
nibble the network id (1 mainnet, 0 testnets). Key-hash and script-hash
credentials are both 28 bytes.

    type  shape        payment    stake
    0     base         key        key
    1     base         script     key
    2     base         key        script
    3     base         script     script
    4     pointer      key        pointer
    5     pointer      script     pointer
    6     enterprise   key        -
    7     enterprise   script     -
    8     byron        (legacy CBOR encoding)
    14    reward       -          key
    15    reward       -          script
"""
from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Optional

from crypto.bech32 import bech32_decode, bech32_encode
from crypto.encoding import hex_decode
from crypto.errors import CodecError
from crypto.hashing import PAYMENT_CREDENTIAL_SIZE, blake2b_224
from crypto.keys import ED25519_KEY_SIZE
from proofs.errors import AddressError

MAINNET = 1
TESTNET = 0

BECH32_PREFIXES = ("addr", "addr_test", "stake", "stake_test")

BASE = "base"
POINTER = "pointer"
ENTERPRISE = "enterprise"
REWARD = "reward"

_SHAPES = {
    0: (BASE, False), 1: (BASE, True), 2: (BASE, False), 3: (BASE, True),
    4: (POINTER, False), 5: (POINTER, True),
    6: (ENTERPRISE, False), 7: (ENTERPRISE, True),
    14: (REWARD, False), 15: (REWARD, True),
}
_BYRON = 8

_CRED = PAYMENT_CREDENTIAL_SIZE
_EXPECTED_LENGTH = {BASE: 1 + 2 * _CRED, ENTERPRISE: 1 + _CRED, REWARD: 1 + _CRED}
_MIN_POINTER_LENGTH = 1 + _CRED + 3

@dataclass(frozen=True)
class ShelleyAddress:
    kind: str
    address_type: int
    network_id: int
    payment_credential: Optional[bytes]
    payment_is_script: bool
    stake_credential: Optional[bytes]
    raw: bytes

def _is_bech32(addr: str) -> bool:
    lowered = addr.lower()
    sep = lowered.rfind("1")
    return sep > 0 and lowered[:sep] in BECH32_PREFIXES

def address_bytes(addr: str) -> bytes:
    """Raw address bytes from bech32 text or hex."""
    if not isinstance(addr, str) or not addr:
        raise AddressError("Address must be a non-empty string")
    hrp = None
    try:
        if _is_bech32(addr):
            hrp, raw = bech32_decode(addr)
        else:
            raw = hex_decode(addr)
    except CodecError as e:
        raise AddressError(f"Unrecognised address encoding: {e}") from None
    if not raw:
        raise AddressError("Empty address")
    if hrp is not None:
        _check_prefix(hrp, raw[0] & 0x0F)
    return raw

def _check_prefix(hrp: str, network_id: int) -> None:
    # addr / stake on mainnet, addr_test / stake_test on every testnet
    if hrp.endswith("_test") == (network_id == MAINNET):
        raise AddressError(f"Address prefix {hrp} does not match network id {network_id}")

def parse_address(addr: str) -> ShelleyAddress:
    raw = address_bytes(addr)
    header = raw[0]
    address_type = header >> 4
    network_id = header & 0x0F

    if address_type == _BYRON:
        raise AddressError("Unsupported address: byron address")
    if address_type not in _SHAPES:
        raise AddressError(f"Unsupported address: unknown address type {address_type}")
    kind, script_flag = _SHAPES[address_type]

    if kind == POINTER:
        if len(raw) < _MIN_POINTER_LENGTH:
            raise AddressError(f"Invalid {kind} address length {len(raw)}")
    elif len(raw) != _EXPECTED_LENGTH[kind]:
        raise AddressError(f"Invalid {kind} address length {len(raw)}")

    if kind == REWARD:
        return ShelleyAddress(
            kind=kind,
            address_type=address_type,
            network_id=network_id,
            payment_credential=None,
            payment_is_script=False,
            stake_credential=raw[1:1 + _CRED],
            raw=raw,
        )

    return ShelleyAddress(
        kind=kind,
        address_type=address_type,
        network_id=network_id,
        payment_credential=raw[1:1 + _CRED],
        payment_is_script=script_flag,
        stake_credential=raw[1 + _CRED:] if kind == BASE else None,
        raw=raw,
    )

def credential_from_address(addr: str) -> bytes:
    """
    Payment key hash embedded in a base or enterprise address.
    Every other shape is rejected rather than mapped to a default credential.
    """
    parsed = parse_address(addr)
    if parsed.kind not in (BASE, ENTERPRISE):
        raise AddressError(f"Unsupported address: {parsed.kind} address")
    if parsed.payment_is_script:
        raise AddressError(f"Unsupported address: {parsed.kind} address with script-hash payment credential")
    return parsed.payment_credential

def credential_from_public_key(pub: bytes) -> bytes:
    if len(pub) != ED25519_KEY_SIZE:
        raise ValueError("Ed25519 public key must be 32 bytes")
    return blake2b_224(pub)

def credentials_match(a: bytes, b: bytes) -> bool:
    return hmac.compare_digest(a, b)

def _header(address_type: int, network_id: int) -> bytes:
    if not 0 <= network_id <= 0x0F:
        raise ValueError("network id must fit in four bits")
    return bytes([(address_type << 4) | network_id])

def _check_credential(cred: bytes) -> bytes:
    if len(cred) != _CRED:
        raise ValueError("credentials must be 28 bytes")
    return cred

def enterprise_address(payment_keyhash: bytes, network_id: int = MAINNET) -> bytes:
    return _header(6, network_id) + _check_credential(payment_keyhash)

def base_address(payment_keyhash: bytes, stake_keyhash: bytes, network_id: int = MAINNET) -> bytes:
    return _header(0, network_id) + _check_credential(payment_keyhash) + _check_credential(stake_keyhash)

def reward_address(stake_keyhash: bytes, network_id: int = MAINNET) -> bytes:
    return _header(14, network_id) + _check_credential(stake_keyhash)

def to_bech32(raw: bytes) -> str:
    address_type = raw[0] >> 4
    mainnet = (raw[0] & 0x0F) == MAINNET
    prefix = "stake" if address_type in (14, 15) else "addr"
    return bech32_encode(prefix if mainnet else prefix + "_test", raw)
