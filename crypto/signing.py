from Crypto.Signature import eddsa
from Crypto.PublicKey import ECC

from crypto.keys import ED25519_KEY_SIZE, import_public_key

ED25519_SIGNATURE_SIZE = 64

def ed25519_sign(message: bytes, sk: ECC.EccKey) -> bytes:
    """
    Standard Ed25519 over the raw message bytes (RFC8032).
    DO NOT pre-hash here; wallets sign the message bytes as given.
    """
    signer = eddsa.new(sk, mode="rfc8032")
    return signer.sign(message)

def ed25519_verify(message: bytes, sig: bytes, public_key: bytes) -> bool:
    """
    Verify an Ed25519 signature given the raw 32-byte public key.
    Wrong-sized signatures or keys, and keys that are not curve points, are
    simply invalid.
    """
    if not isinstance(sig, (bytes, bytearray)) or len(sig) != ED25519_SIGNATURE_SIZE:
        return False
    if not isinstance(public_key, (bytes, bytearray)) or len(public_key) != ED25519_KEY_SIZE:
        return False
    try:
        pk = import_public_key(bytes(public_key))
        verifier = eddsa.new(pk, mode="rfc8032")
        verifier.verify(bytes(message), bytes(sig))
        return True
    except ValueError:
        return False
