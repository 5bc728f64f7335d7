#!/usr/bin/env python
"""Export the GraphQL schema SDL.

Default output: schema.graphql at the repository root
Override path: --out <path>

Exit codes:
    0 success
    1 import failure
    3 unexpected error
"""

import argparse
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_OUT = BASE_DIR / "schema.graphql"


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--out", dest="out", default=str(DEFAULT_OUT))
    args = parser.parse_args()
    out_path = Path(args.out).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        from tasklists.graphql.schema import create_schema
    except ModuleNotFoundError as e:
        print(f"[ERROR] Cannot import schema module: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        sdl = create_schema().as_str()
        out_path.write_text(sdl.strip() + "\n", encoding="utf-8")
    except Exception as e:
        print(f"[ERROR] Unexpected failure exporting schema: {e}", file=sys.stderr)
        sys.exit(3)
    print(f"[INFO] schema SDL written to {out_path}")


if __name__ == "__main__":
    main()
