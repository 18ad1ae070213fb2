from Crypto.PublicKey import ECC
from Crypto.Signature import eddsa

ED25519_KEY_SIZE = 32

def generate_signing_key() -> ECC.EccKey:
    return ECC.generate(curve="Ed25519")

def signing_key_from_seed(seed: bytes) -> ECC.EccKey:
    """Deterministic Ed25519 key from a 32-byte RFC8032 seed."""
    if len(seed) != ED25519_KEY_SIZE:
        raise ValueError("Ed25519 seed must be 32 bytes")
    return eddsa.import_private_key(seed)

def public_key_bytes(key: ECC.EccKey) -> bytes:
    """Raw 32-byte encoding of the public half of an Ed25519 key."""
    if key.has_private():
        key = key.public_key()
    return key.export_key(format="raw")

def import_public_key(raw: bytes) -> ECC.EccKey:
    if len(raw) != ED25519_KEY_SIZE:
        raise ValueError("Ed25519 public key must be 32 bytes")
    return eddsa.import_public_key(raw)
