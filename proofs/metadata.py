"""
Reading proof-of-post records out of Cardano transaction metadata.

Metadata strings longer than 64 bytes are stored as arrays of chunks, so
every text field is either a string or a list of strings.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

POST_LABEL = "674"
POST_TYPE = "post"
POST_APP = "proof-of-post"

Chunked = Union[str, List[str]]

@dataclass(frozen=True)
class PostRecord:
    content: str
    address: str
    nonce: str
    tx_hash: Optional[str] = None
    date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def resolve_chunked(value: Optional[Chunked]) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "".join(resolve_chunked(v) for v in value)
    return str(value)

def _post_metadata(items: Iterable[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    for item in items:
        if isinstance(item, dict) and str(item.get("label")) == POST_LABEL:
            md = item.get("json_metadata") or item.get("metadata")
            return md if isinstance(md, dict) else None
    return None

def parse_post_metadata(
    items: Iterable[Dict[str, Any]],
    address: Optional[str] = None,
    tx_hash: Optional[str] = None,
    date: Optional[str] = None,
) -> Optional[PostRecord]:
    """Return the post record under label 674, or None when there is none."""
    md = _post_metadata(items or [])
    if md is None:
        return None

    fields = {k: resolve_chunked(md.get(k)) for k in ("type", "app", "address", "nonce", "content")}
    if fields["type"] != POST_TYPE or fields["app"] != POST_APP:
        return None
    if not (fields["address"] and fields["nonce"] and fields["content"]):
        return None
    if address is not None and fields["address"] != address:
        return None

    return PostRecord(
        content=fields["content"],
        address=fields["address"],
        nonce=fields["nonce"],
        tx_hash=tx_hash,
        date=date,
    )
