from io import BytesIO
from typing import Any

import cbor2

from crypto.errors import CodecError

def cbor_decode(data: bytes) -> Any:
    """
    Decode exactly one CBOR data item.
    Byte strings come back as bytes, arrays as lists (tuples inside a tag
    on cbor2 6), maps as dicts.
    Trailing bytes after the item are rejected.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise CodecError("CBOR input must be bytes")
    if not data:
        raise CodecError("Empty CBOR input")
    fp = BytesIO(data)
    try:
        value = cbor2.CBORDecoder(fp).decode()
    except cbor2.CBORDecodeError as e:
        raise CodecError(f"Malformed CBOR: {e}") from None
    except (TypeError, ValueError, AttributeError, OverflowError, MemoryError, RecursionError) as e:
        # semantic tag decoders (URI, rational, ...) fail with plain Python errors
        raise CodecError(f"Malformed CBOR: {type(e).__name__}") from None
    if fp.tell() != len(data):
        raise CodecError("Trailing bytes after CBOR item")
    return value

def cbor_encode(value: Any) -> bytes:
    try:
        return cbor2.dumps(value)
    except cbor2.CBOREncodeError as e:
        raise CodecError(f"Cannot encode CBOR: {e}") from None
