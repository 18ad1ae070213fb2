class CodecError(ValueError):
    """Raised when hex, base58, bech32 or CBOR input cannot be decoded."""
