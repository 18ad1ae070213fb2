from pathlib import Path

from Crypto.PublicKey import ECC

from crypto.keys import generate_signing_key, public_key_bytes, signing_key_from_seed

WALLET_DIR = Path("wallet_data")
SK_PATH = WALLET_DIR / "wallet_sk.pem"

def generate_wallet(sk_path: Path = SK_PATH) -> ECC.EccKey:
    sk_path.parent.mkdir(parents=True, exist_ok=True)
    sk = generate_signing_key()
    sk_path.write_text(sk.export_key(format="PEM"), encoding="utf-8")
    return sk

def load_wallet_sk(sk_path: Path = SK_PATH) -> ECC.EccKey:
    return ECC.import_key(sk_path.read_text(encoding="utf-8"))

def load_or_create_wallet(sk_path: Path = SK_PATH) -> ECC.EccKey:
    if not sk_path.exists():
        return generate_wallet(sk_path)
    return load_wallet_sk(sk_path)

def wallet_from_seed(seed: bytes) -> ECC.EccKey:
    """Deterministic wallet key, handy for fixtures and demos."""
    return signing_key_from_seed(seed)

def wallet_pubkey(sk: ECC.EccKey) -> bytes:
    return public_key_bytes(sk)

if __name__ == "__main__":
    sk = load_or_create_wallet()
    print("Wallet key:", SK_PATH)
    print("pubkey:", wallet_pubkey(sk).hex())
