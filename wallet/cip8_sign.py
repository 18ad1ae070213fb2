from typing import Dict, Optional

from Crypto.PublicKey import ECC

from crypto.cbor import cbor_encode
from crypto.encoding import hex_encode
from crypto.signing import ed25519_sign
from proofs.address import MAINNET, credential_from_public_key, enterprise_address, to_bech32
from proofs.cardano import (
    ALG_EDDSA, CRV_ED25519, HEADER_ADDRESS, KEY_ALG, KEY_CRV, KEY_KTY, KEY_X, KTY_OKP, sig_structure,
)
from wallet.keygen import wallet_pubkey

HEADER_ALG = 1

def cose_key(pub: bytes) -> bytes:
    return cbor_encode({KEY_KTY: KTY_OKP, KEY_ALG: ALG_EDDSA, KEY_CRV: CRV_ED25519, KEY_X: pub})

def sign_cip8(
    message: bytes,
    sk: ECC.EccKey,
    network_id: int = MAINNET,
    address: Optional[bytes] = None,
    bech32: bool = True,
) -> Dict[str, str]:
    """
    Sign like a CIP-30 wallet's signData: COSE_Sign1 over the Signature1
    structure, address in the protected header, plus the matching COSE_Key.
    Without an explicit address the key's enterprise address is used.
    """
    pub = wallet_pubkey(sk)
    if address is None:
        address = enterprise_address(credential_from_public_key(pub), network_id)

    protected = cbor_encode({HEADER_ALG: ALG_EDDSA, HEADER_ADDRESS: address})
    signature = ed25519_sign(sig_structure(protected, message), sk)
    sign1 = cbor_encode([protected, {"hashed": False}, message, signature])

    bundle = {
        "payloadHex": hex_encode(message),
        "signatureHex": hex_encode(sign1),
        "keyHex": hex_encode(cose_key(pub)),
    }
    if bech32:
        bundle["addressBech32"] = to_bech32(address)
    else:
        bundle["addressHex"] = hex_encode(address)
    return bundle
