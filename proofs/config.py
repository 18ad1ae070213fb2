from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5003
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}

def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY

@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False
    # reject COSE_Key maps that are not OKP / Ed25519 / EdDSA
    strict_cose_key: bool = False

def load_settings() -> Settings:
    return Settings(
        host=os.environ.get("PROOFS_HOST", DEFAULT_HOST),
        port=int(os.environ.get("PROOFS_PORT", DEFAULT_PORT)),
        log_level=os.environ.get("PROOFS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_json=_env_flag("PROOFS_LOG_JSON"),
        strict_cose_key=_env_flag("PROOFS_STRICT_COSE_KEY"),
    )
