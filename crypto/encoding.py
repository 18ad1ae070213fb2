import binascii

import base58

from crypto.errors import CodecError

def hex_decode(s: str) -> bytes:
    """Decode a hex string to bytes. Odd length or non-hex characters are rejected."""
    if not isinstance(s, str):
        raise CodecError("Hex input must be a string")
    if len(s) % 2:
        raise CodecError("Odd-length hex string")
    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError):
        raise CodecError("Invalid hex string") from None

def hex_encode(data: bytes) -> str:
    return data.hex()

def base58_decode(s: str) -> bytes:
    if not isinstance(s, str) or not s:
        raise CodecError("Base58 input must be a non-empty string")
    try:
        return base58.b58decode(s)
    except ValueError:
        raise CodecError("Invalid base58 string") from None

def base58_encode(data: bytes) -> str:
    return base58.b58encode(data).decode("ascii")
