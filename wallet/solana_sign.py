from typing import Dict

from Crypto.PublicKey import ECC

from crypto.encoding import base58_encode
from crypto.signing import ed25519_sign
from wallet.keygen import wallet_pubkey

def sign_solana(message: str, sk: ECC.EccKey) -> Dict[str, str]:
    """signMessage-style bundle: raw Ed25519 over the UTF-8 text."""
    pubkey = base58_encode(wallet_pubkey(sk))
    sig = ed25519_sign(message.encode("utf-8"), sk)
    return {
        "payloadUtf8": message,
        "signatureBase58": base58_encode(sig),
        "pubkeyBase58": pubkey,
        "addressBase58": pubkey,
    }
