import pytest

from crypto.bech32 import bech32_encode
from crypto.cbor import cbor_decode, cbor_encode
from crypto.encoding import hex_decode, hex_encode
from crypto.signing import ed25519_sign
from proofs import verdict as reasons
from proofs.address import base_address, credential_from_public_key, enterprise_address, reward_address, to_bech32
from proofs.bundle import parse_bundle
from proofs.cardano import decode_sign1, sig_structure, verify_cardano
from wallet.cip8_sign import cose_key, sign_cip8

def _verify(bundle, strict=False):
    return verify_cardano(parse_bundle(bundle), strict_cose_key=strict)

def _flip(value: str, index: int) -> str:
    raw = bytearray(hex_decode(value))
    raw[index] ^= 0xFF
    return hex_encode(bytes(raw))

def test_valid_enterprise_bundle(cardano_bundle) -> None:
    result = _verify(cardano_bundle)
    assert result.ok is True
    assert result.reason is None

def test_valid_hex_address_bundle(sk_a) -> None:
    bundle = sign_cip8(b"hello", sk_a, bech32=False)
    assert "addressHex" in bundle
    assert _verify(bundle).ok

def test_valid_base_address_bundle(sk_a, pub_a) -> None:
    addr = base_address(credential_from_public_key(pub_a), bytes(28))
    assert _verify(sign_cip8(b"hello", sk_a, address=addr)).ok

def test_valid_testnet_bundle(sk_a) -> None:
    bundle = sign_cip8(b"hello", sk_a, network_id=0)
    assert bundle["addressBech32"].startswith("addr_test1")
    assert _verify(bundle).ok

def test_tagged_sign1_is_accepted(cardano_bundle) -> None:
    # COSE_Sign1_Tagged: tag 18 is d2
    cardano_bundle["signatureHex"] = "d2" + cardano_bundle["signatureHex"]
    assert _verify(cardano_bundle).ok

def test_tagged_and_untagged_sign1_decode_alike(cardano_bundle) -> None:
    tagged = "d2" + cardano_bundle["signatureHex"]
    assert decode_sign1(tagged) == decode_sign1(cardano_bundle["signatureHex"])

def test_tagged_three_element_sign1(cardano_bundle) -> None:
    sign1 = cbor_decode(hex_decode(cardano_bundle["signatureHex"]))
    cardano_bundle["signatureHex"] = "d2" + hex_encode(cbor_encode(sign1[:3]))
    assert _verify(cardano_bundle).reason == reasons.BAD_COSE_SIGN1

def test_signed_bytes_are_the_signature1_structure(cardano_bundle) -> None:
    protected, payload, _sig = decode_sign1(cardano_bundle["signatureHex"])
    assert payload == b"hello"
    assert cbor_decode(sig_structure(protected, payload)) == ["Signature1", protected, b"", payload]

def test_signature_over_raw_payload_is_rejected(sk_a, pub_a, cardano_bundle) -> None:
    protected, payload, _sig = decode_sign1(cardano_bundle["signatureHex"])
    naive = ed25519_sign(payload, sk_a)
    cardano_bundle["signatureHex"] = hex_encode(cbor_encode([protected, {}, payload, naive]))
    assert _verify(cardano_bundle).reason == reasons.INVALID_SIGNATURE

def test_unrelated_address(cardano_bundle, sk_b) -> None:
    cardano_bundle["addressBech32"] = sign_cip8(b"hello", sk_b)["addressBech32"]
    assert _verify(cardano_bundle).to_dict() == {"ok": False, "reason": reasons.KEYHASH_MISMATCH}

def test_network_swap_is_caught_by_protected_header(cardano_bundle) -> None:
    protected, _payload, _sig = decode_sign1(cardano_bundle["signatureHex"])
    signed = cbor_decode(protected)["address"]
    swapped = bytes([signed[0] ^ 0x01]) + signed[1:]
    cardano_bundle["addressBech32"] = to_bech32(swapped)
    assert _verify(cardano_bundle).reason == reasons.SIGNED_ADDRESS_MISMATCH

def test_bech32_prefix_must_match_network(sk_a, pub_a, cardano_bundle) -> None:
    # no address in the protected header, so only the prefix check can catch this
    protected = cbor_encode({1: -8})
    sig = ed25519_sign(sig_structure(protected, b"hello"), sk_a)
    cardano_bundle["signatureHex"] = hex_encode(cbor_encode([protected, {}, b"hello", sig]))
    assert _verify(cardano_bundle).ok

    raw = enterprise_address(credential_from_public_key(pub_a))
    cardano_bundle["addressBech32"] = bech32_encode("addr_test", raw)
    assert _verify(cardano_bundle).reason == "Address prefix addr_test does not match network id 1"

    cardano_bundle["addressBech32"] = bech32_encode("addr", bytes([raw[0] ^ 0x01]) + raw[1:])
    assert _verify(cardano_bundle).reason == "Address prefix addr does not match network id 0"

def test_payload_mismatch(cardano_bundle) -> None:
    cardano_bundle["payloadHex"] = hex_encode(b"goodbye")
    assert _verify(cardano_bundle).reason == reasons.PAYLOAD_MISMATCH

def test_three_element_sign1(cardano_bundle) -> None:
    sign1 = cbor_decode(hex_decode(cardano_bundle["signatureHex"]))
    cardano_bundle["signatureHex"] = hex_encode(cbor_encode(sign1[:3]))
    assert _verify(cardano_bundle).reason == reasons.BAD_COSE_SIGN1

def test_sign1_with_text_payload(cardano_bundle) -> None:
    protected, _payload, sig = decode_sign1(cardano_bundle["signatureHex"])
    cardano_bundle["signatureHex"] = hex_encode(cbor_encode([protected, {}, "hello", sig]))
    assert _verify(cardano_bundle).reason == reasons.MALFORMED_COSE_SIGN1

def test_cose_key_must_be_a_map(cardano_bundle, pub_a) -> None:
    cardano_bundle["keyHex"] = hex_encode(cbor_encode([pub_a]))
    assert _verify(cardano_bundle).reason == reasons.BAD_COSE_KEY

@pytest.mark.parametrize("key", [{1: 1}, {-2: b"\x00" * 31}, {-2: "not bytes"}])
def test_cose_key_without_public_key(cardano_bundle, key) -> None:
    cardano_bundle["keyHex"] = hex_encode(cbor_encode(key))
    assert _verify(cardano_bundle).reason == reasons.MISSING_PUBKEY

def test_minimal_cose_key_only_passes_when_lenient(cardano_bundle, pub_a) -> None:
    cardano_bundle["keyHex"] = hex_encode(cbor_encode({-2: pub_a}))
    assert _verify(cardano_bundle).ok
    assert _verify(cardano_bundle, strict=True).reason == reasons.UNSUPPORTED_COSE_KEY

def test_full_cose_key_passes_strict(cardano_bundle, pub_a) -> None:
    assert cardano_bundle["keyHex"] == hex_encode(cose_key(pub_a))
    assert _verify(cardano_bundle, strict=True).ok

def test_reward_address_is_address_error(sk_a) -> None:
    bundle = sign_cip8(b"hello", sk_a, address=reward_address(bytes(28)))
    result = _verify(bundle)
    assert result.ok is False
    assert result.reason == "Unsupported address: reward address"

@pytest.mark.parametrize("field", ["payloadHex", "signatureHex", "keyHex", "addressBech32"])
def test_missing_field(cardano_bundle, field) -> None:
    del cardano_bundle[field]
    assert _verify(cardano_bundle).reason == reasons.MISSING_CARDANO_FIELDS

@pytest.mark.parametrize("field,value", [
    ("signatureHex", "zz"),
    ("signatureHex", "abc"),
    ("keyHex", "a4"),
    ("payloadHex", "xyz1"),
])
def test_malformed_encodings_become_reasons(cardano_bundle, field, value) -> None:
    cardano_bundle[field] = value
    result = _verify(cardano_bundle)
    assert result.ok is False
    assert result.reason

def test_flipping_any_signature_byte_fails(cardano_bundle) -> None:
    sign1 = hex_decode(cardano_bundle["signatureHex"])
    for index in range(len(sign1) - 64, len(sign1)):
        tampered = dict(cardano_bundle, signatureHex=_flip(cardano_bundle["signatureHex"], index))
        assert _verify(tampered).reason == reasons.INVALID_SIGNATURE

def test_flipping_protected_header_or_cose_payload_fails(cardano_bundle) -> None:
    protected, payload, _sig = decode_sign1(cardano_bundle["signatureHex"])
    sign1 = hex_decode(cardano_bundle["signatureHex"])
    for part in (protected, payload):
        start = sign1.index(part)
        for index in range(start, start + len(part)):
            tampered = dict(cardano_bundle, signatureHex=_flip(cardano_bundle["signatureHex"], index))
            assert _verify(tampered).ok is False

def test_flipping_any_key_byte_fails(cardano_bundle) -> None:
    size = len(hex_decode(cardano_bundle["keyHex"]))
    for index in range(size):
        tampered = dict(cardano_bundle, keyHex=_flip(cardano_bundle["keyHex"], index))
        assert _verify(tampered).ok is False

def test_flipping_any_payload_byte_fails(cardano_bundle) -> None:
    for index in range(len(b"hello")):
        tampered = dict(cardano_bundle, payloadHex=_flip(cardano_bundle["payloadHex"], index))
        assert _verify(tampered).reason == reasons.PAYLOAD_MISMATCH

def test_flipping_any_address_byte_fails(sk_a) -> None:
    bundle = sign_cip8(b"hello", sk_a, bech32=False)
    for index in range(len(hex_decode(bundle["addressHex"]))):
        tampered = dict(bundle, addressHex=_flip(bundle["addressHex"], index))
        assert _verify(tampered).ok is False

def test_address_field_precedence(cardano_bundle, sk_b, pub_a) -> None:
    # addressHex wins over addressBech32, which wins over address
    own = hex_encode(enterprise_address(credential_from_public_key(pub_a)))
    other = sign_cip8(b"hello", sk_b)["addressBech32"]
    bundle = dict(cardano_bundle, addressHex=own, address=other)
    bundle["addressBech32"] = other
    assert _verify(bundle).ok
    bundle = dict(cardano_bundle, address=other)
    assert _verify(bundle).ok
