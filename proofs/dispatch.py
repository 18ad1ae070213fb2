from __future__ import annotations

from typing import Any, Optional

import structlog

from proofs import verdict as reasons
from proofs.bundle import CardanoBundle, ProofBundle, SolanaBundle, parse_bundle
from proofs.cardano import verify_cardano
from proofs.config import Settings, load_settings
from proofs.solana import verify_solana
from proofs.verdict import Verdict

log = structlog.get_logger(__name__)

CARDANO = "cardano"
SOLANA = "solana"
UNKNOWN = "unknown"

def _scheme(bundle: ProofBundle) -> str:
    if isinstance(bundle, CardanoBundle):
        return CARDANO
    if isinstance(bundle, SolanaBundle):
        return SOLANA
    return UNKNOWN

def classify(obj: Any) -> str:
    """One of "cardano", "solana" or "unknown". Never raises."""
    return _scheme(parse_bundle(obj))

def verify_bundle(obj: Any, settings: Optional[Settings] = None) -> Verdict:
    """Verify one bundle object. Always returns a Verdict."""
    settings = settings or load_settings()
    bundle = parse_bundle(obj)
    scheme = _scheme(bundle)

    if scheme == UNKNOWN:
        return Verdict.reject(reasons.UNKNOWN_FORMAT)
    try:
        if scheme == CARDANO:
            result = verify_cardano(bundle, strict_cose_key=settings.strict_cose_key)
        else:
            result = verify_solana(bundle)
    except Exception:
        log.exception("verify_failed", scheme=scheme)
        return Verdict.reject(reasons.VERIFY_ERROR)

    log.debug("verdict", scheme=scheme, ok=result.ok, reason=result.reason)
    return result
