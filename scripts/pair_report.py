from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from twisty_engine.explorer import pair_frequencies  # noqa: E402
from twisty_engine.viz.plot import LETTERING, plot_pair_heatmap  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Letter-pair frequencies over random cube memos.")
    ap.add_argument("--n", type=int, default=5)
    ap.add_argument("--samples", type=int, default=2000)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--outdir", type=Path, default=Path("artifacts/pairs"))
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    args.outdir.mkdir(parents=True, exist_ok=True)

    result = pair_frequencies(args.n, args.samples, seed=args.seed)
    (args.outdir / "pair_frequencies.json").write_text(json.dumps(result, indent=2))

    plt.figure(figsize=(8, 7))
    plot_pair_heatmap(
        result["matrix"], ax=plt.gca(), title=f"Pair frequencies n={args.n} samples={args.samples}"
    )
    plt.tight_layout()
    plt.savefig(args.outdir / "pair_heatmap.png")
    plt.close()

    print(f"Wrote: {args.outdir}/pair_frequencies.json")
    print(f"Wrote: {args.outdir}/pair_heatmap.png")
    pair = result["most_common_pair"]
    if pair is not None:
        print(f"Most common pair: {LETTERING[pair[0]]}{LETTERING[pair[1]]}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
