"""Named bundle scenarios for end-to-end trials against the verifier service."""
from typing import Callable, Dict

from crypto.cbor import cbor_decode, cbor_encode
from crypto.encoding import base58_decode, base58_encode, hex_decode, hex_encode
from proofs.address import base_address, credential_from_public_key, reward_address
from wallet.cip8_sign import sign_cip8
from wallet.keygen import wallet_from_seed, wallet_pubkey
from wallet.solana_sign import sign_solana

SEED_A = bytes(range(32))
SEED_B = bytes(range(32, 64))
MESSAGE = "hello"

def flip_hex_byte(value: str, index: int) -> str:
    raw = bytearray(hex_decode(value))
    raw[index] ^= 0xFF
    return hex_encode(bytes(raw))

def _cardano_valid() -> dict:
    return sign_cip8(MESSAGE.encode("utf-8"), wallet_from_seed(SEED_A))

def _cardano_tampered_signature() -> dict:
    bundle = _cardano_valid()
    bundle["signatureHex"] = flip_hex_byte(bundle["signatureHex"], -1)
    return bundle

def _cardano_wrong_address() -> dict:
    bundle = _cardano_valid()
    other = sign_cip8(MESSAGE.encode("utf-8"), wallet_from_seed(SEED_B))
    bundle["addressBech32"] = other["addressBech32"]
    return bundle

def _cardano_payload_mismatch() -> dict:
    bundle = _cardano_valid()
    bundle["payloadHex"] = hex_encode(b"goodbye")
    return bundle

def _cardano_bad_sign1() -> dict:
    bundle = _cardano_valid()
    sign1 = cbor_decode(hex_decode(bundle["signatureHex"]))
    bundle["signatureHex"] = hex_encode(cbor_encode(sign1[:3]))
    return bundle

def _cardano_reward_address() -> dict:
    return sign_cip8(MESSAGE.encode("utf-8"), wallet_from_seed(SEED_A), address=reward_address(bytes(28)))

def _cardano_base_address() -> dict:
    sk = wallet_from_seed(SEED_A)
    addr = base_address(credential_from_public_key(wallet_pubkey(sk)), bytes(28))
    return sign_cip8(MESSAGE.encode("utf-8"), sk, address=addr)

def _solana_valid() -> dict:
    return sign_solana(MESSAGE, wallet_from_seed(SEED_A))

def _solana_tampered_signature() -> dict:
    bundle = _solana_valid()
    sig = bytearray(base58_decode(bundle["signatureBase58"]))
    sig[0] ^= 0xFF
    bundle["signatureBase58"] = base58_encode(bytes(sig))
    return bundle

def _solana_address_mismatch() -> dict:
    bundle = _solana_valid()
    bundle["addressBase58"] = sign_solana(MESSAGE, wallet_from_seed(SEED_B))["addressBase58"]
    return bundle

SCENARIOS: Dict[str, Callable[[], dict]] = {
    "cardano_valid": _cardano_valid,
    "cardano_base_address": _cardano_base_address,
    "cardano_tampered_signature": _cardano_tampered_signature,
    "cardano_wrong_address": _cardano_wrong_address,
    "cardano_payload_mismatch": _cardano_payload_mismatch,
    "cardano_bad_sign1": _cardano_bad_sign1,
    "cardano_reward_address": _cardano_reward_address,
    "solana_valid": _solana_valid,
    "solana_tampered_signature": _solana_tampered_signature,
    "solana_address_mismatch": _solana_address_mismatch,
    "unknown": dict,
}

EXPECTED_OK = {"cardano_valid", "cardano_base_address", "solana_valid"}
