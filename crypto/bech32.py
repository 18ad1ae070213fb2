"""
BIP-173 bech32 for Cardano addresses.

Cardano uses plain bech32 (not bech32m) but lifts the 90 character limit,
so the common reference libraries reject real mainnet base addresses.
"""
from typing import List, Tuple

from crypto.errors import CodecError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)

def _polymod(values: List[int]) -> int:
    chk = 1
    for v in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ v
        for i in range(5):
            chk ^= _GENERATOR[i] if ((top >> i) & 1) else 0
    return chk

def _hrp_expand(hrp: str) -> List[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]

def _create_checksum(hrp: str, data: List[int]) -> List[int]:
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]

def _convert_bits(data, from_bits: int, to_bits: int, pad: bool) -> List[int]:
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << to_bits) - 1
    for value in data:
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        raise CodecError("Invalid bech32 padding")
    return ret

def bech32_decode(s: str) -> Tuple[str, bytes]:
    """Return (hrp, payload bytes) for a bech32 string."""
    if not isinstance(s, str) or not s:
        raise CodecError("Bech32 input must be a non-empty string")
    if any(ord(c) < 33 or ord(c) > 126 for c in s):
        raise CodecError("Invalid character in bech32 string")
    if s.lower() != s and s.upper() != s:
        raise CodecError("Mixed-case bech32 string")
    s = s.lower()
    pos = s.rfind("1")
    if pos < 1 or pos + 7 > len(s):
        raise CodecError("Missing bech32 separator or checksum")
    hrp = s[:pos]
    try:
        data = [CHARSET.index(c) for c in s[pos + 1:]]
    except ValueError:
        raise CodecError("Invalid character in bech32 data part") from None
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise CodecError("Invalid bech32 checksum")
    return hrp, bytes(_convert_bits(data[:-6], 5, 8, pad=False))

def bech32_encode(hrp: str, payload: bytes) -> str:
    data = _convert_bits(payload, 8, 5, pad=True)
    return hrp + "1" + "".join(CHARSET[d] for d in data + _create_checksum(hrp, data))
