import argparse
import json
from pathlib import Path

from proofs.metadata import parse_post_metadata

# Saved transaction dumps: a JSON list of
#   {"tx_hash": ..., "date": ..., "metadata": [{"label": "674", "json_metadata": {...}}, ...]}
POSTS_PATH = Path("experiments/data/posts.json")

def load_posts(path=POSTS_PATH, address=None):
    entries = json.loads(Path(path).read_text(encoding="utf-8"))
    posts = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        record = parse_post_metadata(
            entry.get("metadata") or [],
            address=address,
            tx_hash=entry.get("tx_hash"),
            date=entry.get("date"),
        )
        if record is not None:
            posts.append(record)
    return posts

def main(argv=None):
    p = argparse.ArgumentParser(description="List proof-of-post records from saved label 674 metadata.")
    p.add_argument("path", nargs="?", default=str(POSTS_PATH))
    p.add_argument("--address", default=None, help="Only posts claiming this address")
    args = p.parse_args(argv)

    posts = load_posts(args.path, args.address)
    for record in posts:
        print(json.dumps(record.to_dict(), sort_keys=True))
    print("Posts:", len(posts))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
