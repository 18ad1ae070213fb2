from __future__ import annotations

import pytest
import structlog

from crypto.keys import public_key_bytes
from proofs.config import Settings
from wallet.cip8_sign import sign_cip8
from wallet.keygen import wallet_from_seed
from wallet.solana_sign import sign_solana

SEED_A = bytes(range(32))
SEED_B = bytes(range(32, 64))

@pytest.fixture
def sk_a():
    return wallet_from_seed(SEED_A)

@pytest.fixture
def sk_b():
    return wallet_from_seed(SEED_B)

@pytest.fixture
def pub_a(sk_a) -> bytes:
    return public_key_bytes(sk_a)

@pytest.fixture
def cardano_bundle(sk_a) -> dict:
    return sign_cip8(b"hello", sk_a)

@pytest.fixture
def solana_bundle(sk_a) -> dict:
    return sign_solana("hello", sk_a)

@pytest.fixture
def settings() -> Settings:
    return Settings()

@pytest.fixture
def strict_settings() -> Settings:
    return Settings(strict_cose_key=True)

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PROOFS_HOST", "PROOFS_PORT", "PROOFS_LOG_LEVEL", "PROOFS_LOG_JSON", "PROOFS_STRICT_COSE_KEY"):
        monkeypatch.delenv(name, raising=False)

@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
