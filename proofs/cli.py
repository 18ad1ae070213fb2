"""
Verify signature proof bundles.

Usage:
    python -m proofs.cli '{"addressHex":"...","payloadHex":"...","signatureHex":"...","keyHex":"..."}'
    cat bundle.json | python -m proofs.cli
    cat bundles.ndjson | python -m proofs.cli --lines
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional

from proofs.config import load_settings
from proofs.dispatch import verify_bundle
from proofs.errors import InputError
from proofs.log import configure_logging

def parse_input(text: str) -> Any:
    text = text.strip()
    if not text:
        raise InputError("Provide a JSON bundle as an argument or via stdin")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        raise InputError("Invalid JSON input") from None

def _run_lines(stream, settings) -> int:
    status = 0
    for lineno, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            bundle = parse_input(line)
        except InputError as e:
            print(f"line {lineno}: {e}", file=sys.stderr)
            status = 1
            continue
        print(verify_bundle(bundle, settings).to_json())
    return status

def main(argv: Optional[list] = None) -> int:
    p = argparse.ArgumentParser(description="Verify a Cardano CIP-8 or Solana signature proof bundle")
    p.add_argument("bundle", nargs="?", help="bundle JSON; read from stdin when omitted")
    p.add_argument("--lines", action="store_true", help="read one JSON bundle per line from stdin")
    p.add_argument("--log-level", default=None)
    args = p.parse_args(argv)

    settings = load_settings()
    configure_logging(level=args.log_level or settings.log_level)

    if args.lines:
        return _run_lines(sys.stdin, settings)

    try:
        bundle = parse_input(args.bundle if args.bundle is not None else sys.stdin.read())
    except InputError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(verify_bundle(bundle, settings).to_json())
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
