from Crypto.Hash import BLAKE2b

PAYMENT_CREDENTIAL_SIZE = 28

def blake2b_224(data: bytes) -> bytes:
    """BLAKE2b with a 224-bit digest, the hash Cardano uses for key hashes."""
    return BLAKE2b.new(digest_bits=224, data=data).digest()
