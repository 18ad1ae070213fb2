import csv
import json
import os
import time
from pathlib import Path

import requests

from experiments.scenarios import EXPECTED_OK, SCENARIOS

VERIFIER = os.environ.get("PROOFS_URL", "http://127.0.0.1:5003")

OUT = Path("experiments/results")
CSV_PATH = OUT / "verify_trials.csv"

def now_ms():
    return time.perf_counter() * 1000

def json_size_bytes(obj):
    return len(json.dumps(obj, separators=(",", ":"), sort_keys=True).encode("utf-8"))

def verify(bundle, base_url=VERIFIER):
    t0 = now_ms()
    r = requests.post(f"{base_url}/verify", json=bundle, timeout=5)
    t1 = now_ms()
    r.raise_for_status()
    return r.json(), (t1 - t0)

def run_trials(n=10, base_url=VERIFIER):
    rows = []
    for name, build in SCENARIOS.items():
        bundle = build()
        for _ in range(n):
            resp, vms = verify(bundle, base_url)
            rows.append({
                "scenario": name,
                "ok": resp["ok"],
                "reason": resp["reason"],
                "expected_ok": name in EXPECTED_OK,
                "verify_ms": round(vms, 2),
                "bundle_bytes": json_size_bytes(bundle),
            })
    return rows

def write_csv(rows, path=CSV_PATH):
    path.parent.mkdir(parents=True, exist_ok=True)
    fieldnames = sorted({k for r in rows for k in r.keys()})
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        w.writerows(rows)

def main(n=20):
    rows = run_trials(n)
    write_csv(rows)
    wrong = [r for r in rows if r["ok"] != r["expected_ok"]]
    print("Wrote:", CSV_PATH)
    print("Rows:", len(rows), "Unexpected verdicts:", len(wrong))
    return 1 if wrong else 0

if __name__ == "__main__":
    raise SystemExit(main())
