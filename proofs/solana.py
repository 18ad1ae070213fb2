import structlog

from crypto.encoding import base58_decode
from crypto.errors import CodecError
from crypto.signing import ed25519_verify
from proofs import verdict as reasons
from proofs.bundle import SolanaBundle
from proofs.verdict import Verdict

log = structlog.get_logger(__name__)

def verify_solana(bundle: SolanaBundle) -> Verdict:
    """
    Raw Ed25519 over the UTF-8 payload. No canonical sign-in message is
    rebuilt here; the payload must be exactly the bytes the wallet signed.
    A Solana address is the base58 public key itself.
    """
    if not (bundle.payload and bundle.signature and bundle.pubkey and bundle.address):
        return Verdict.reject(reasons.MISSING_SOLANA_FIELDS)
    if not isinstance(bundle.payload, str):
        return Verdict.reject("Payload must be a UTF-8 string")

    try:
        msg = bundle.payload.encode("utf-8")
        sig = base58_decode(bundle.signature)
        pub = base58_decode(bundle.pubkey)
    except (CodecError, UnicodeEncodeError) as e:
        log.debug("solana_rejected", error=type(e).__name__, reason=str(e))
        return Verdict.reject(str(e))

    if not ed25519_verify(msg, sig, pub):
        return Verdict.reject(reasons.INVALID_SIGNATURE)
    if bundle.pubkey != bundle.address:
        return Verdict.reject(reasons.PUBKEY_ADDRESS_MISMATCH)
    return Verdict.accept()
