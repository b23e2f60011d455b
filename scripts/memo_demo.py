from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from twisty_engine import Buffers, Cube, Memo, memo_cube  # noqa: E402


def memo_to_json(m: Memo | None) -> dict | None:
    if m is None:
        return None
    return {
        "cycles": [[s.name for s in cycle] for cycle in m.cycles],
        "parity": [s.name for s in m.parity] if m.parity is not None else None,
        "twists": [[p.name, o.name] for p, o in m.twists],
    }


def main() -> int:
    ap = argparse.ArgumentParser(description="Memorize a random cube and print the memo as JSON.")
    ap.add_argument("--n", type=int, default=3)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cube = Cube.new_random(args.n, args.seed)
    cube.audit()
    result = memo_cube(cube, Buffers())

    out = {
        "n": args.n,
        "seed": args.seed,
        "hash": cube.hash(),
        "cube": repr(cube),
        "edges": memo_to_json(result.edges),
        "corners": memo_to_json(result.corners),
        "layers": [
            {
                "wings": memo_to_json(layer.wings),
                "xcenters": memo_to_json(layer.xcenters),
                "tcenters": memo_to_json(layer.tcenters),
                "obliques": [
                    {"left": memo_to_json(left), "right": memo_to_json(right)}
                    for left, right in layer.obliques
                ],
            }
            for layer in result.layers
        ],
    }
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
