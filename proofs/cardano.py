"""
CIP-8 message signatures (COSE_Sign1 with an Ed25519 payment key).

The wallet does not sign the payload directly: it signs the CBOR encoding of
the Signature1 structure ["Signature1", protected, external_aad, payload]
with an empty external_aad.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

import cbor2
import structlog

from crypto.cbor import cbor_decode, cbor_encode
from crypto.encoding import hex_decode
from crypto.errors import CodecError
from crypto.keys import ED25519_KEY_SIZE
from crypto.signing import ed25519_verify
from proofs import verdict as reasons
from proofs.address import address_bytes, credential_from_address, credential_from_public_key, credentials_match
from proofs.bundle import CardanoBundle
from proofs.errors import ProofError, StructuralError
from proofs.verdict import Verdict

log = structlog.get_logger(__name__)

COSE_SIGN1_TAG = 18
SIGNATURE1_CONTEXT = "Signature1"
HEADER_ADDRESS = "address"

# COSE_Key labels and values (RFC 9052 / RFC 9053)
KEY_KTY = 1
KEY_ALG = 3
KEY_CRV = -1
KEY_X = -2
KTY_OKP = 1
ALG_EDDSA = -8
CRV_ED25519 = 6

def decode_sign1(signature_hex: str) -> Tuple[bytes, bytes, bytes]:
    """Return (protected header, payload, signature) from COSE_Sign1 hex."""
    sign1 = cbor_decode(hex_decode(signature_hex))
    if isinstance(sign1, cbor2.CBORTag) and sign1.tag == COSE_SIGN1_TAG:
        sign1 = sign1.value
    # cbor2 6 decodes arrays nested in a tag as tuples
    if not isinstance(sign1, (list, tuple)) or len(sign1) != 4:
        raise StructuralError(reasons.BAD_COSE_SIGN1)
    protected, _unprotected, payload, sig = sign1
    if not all(isinstance(part, bytes) for part in (protected, payload, sig)):
        raise StructuralError(reasons.MALFORMED_COSE_SIGN1)
    return protected, payload, sig

def protected_address(protected: bytes):
    """Address bytes a CIP-30 wallet places in the protected header, if any."""
    if not protected:
        return None
    header = cbor_decode(protected)
    if not isinstance(header, dict):
        raise StructuralError(reasons.MALFORMED_COSE_SIGN1)
    return header.get(HEADER_ADDRESS)

def sig_structure(protected: bytes, payload: bytes) -> bytes:
    return cbor_encode([SIGNATURE1_CONTEXT, protected, b"", payload])

def decode_cose_key(key_hex: str, strict: bool = False) -> bytes:
    cose_key = cbor_decode(hex_decode(key_hex))
    if not isinstance(cose_key, dict):
        raise StructuralError(reasons.BAD_COSE_KEY)
    pub = cose_key.get(KEY_X)
    if not isinstance(pub, bytes) or len(pub) != ED25519_KEY_SIZE:
        raise StructuralError(reasons.MISSING_PUBKEY)
    if strict and not _is_ed25519_okp(cose_key):
        raise StructuralError(reasons.UNSUPPORTED_COSE_KEY)
    return pub

def _is_ed25519_okp(cose_key: Dict[Any, Any]) -> bool:
    if cose_key.get(KEY_KTY) != KTY_OKP or cose_key.get(KEY_CRV) != CRV_ED25519:
        return False
    return KEY_ALG not in cose_key or cose_key[KEY_ALG] == ALG_EDDSA

def verify_cardano(bundle: CardanoBundle, strict_cose_key: bool = False) -> Verdict:
    if not (bundle.address and bundle.payload and bundle.signature and bundle.key):
        return Verdict.reject(reasons.MISSING_CARDANO_FIELDS)

    try:
        protected, payload, sig = decode_sign1(bundle.signature)
        to_be_signed = sig_structure(protected, payload)
        pub = decode_cose_key(bundle.key, strict=strict_cose_key)

        if not ed25519_verify(to_be_signed, sig, pub):
            return Verdict.reject(reasons.INVALID_SIGNATURE)

        want = credential_from_address(bundle.address)
        got = credential_from_public_key(pub)
        if not credentials_match(want, got):
            return Verdict.reject(reasons.KEYHASH_MISMATCH)

        signed_address = protected_address(protected)
        if signed_address is not None and signed_address != address_bytes(bundle.address):
            return Verdict.reject(reasons.SIGNED_ADDRESS_MISMATCH)

        if payload != hex_decode(bundle.payload):
            return Verdict.reject(reasons.PAYLOAD_MISMATCH)
    except (ProofError, CodecError) as e:
        log.debug("cardano_rejected", error=type(e).__name__, reason=str(e))
        return Verdict.reject(str(e))

    return Verdict.accept()
