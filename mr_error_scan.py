#!/usr/bin/env python3
# mr_error_scan.py: single-witness Miller-Rabin error rates over odd n
# Prints each new greatest error, then the max and the top-K bucket.

from __future__ import annotations
import sys, argparse, csv
from concurrent.futures import ProcessPoolExecutor
from fractions import Fraction
from typing import Iterator, List, Tuple

import numpy as np

from bigsquare import BigSquareError, ModExpCache, error_rate, odd_candidates, scan_errors
from bigsquare.settings import MR_HIGH_BOUND, MR_LOW_BOUND, MR_TOP_K

# ---------- worker processes (one memo table each) ----------

_WORKER_CACHE: ModExpCache | None = None

def _init_worker():
    global _WORKER_CACHE
    _WORKER_CACHE = ModExpCache()

def _rate(n: int) -> Tuple[int, Fraction]:
    return n, error_rate(n, _WORKER_CACHE)

def parallel_rates(low: int, high: int, workers: int) -> Iterator[Tuple[int, Fraction]]:
    """(n, error) in scan order, computed across worker processes."""
    with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker) as ex:
        yield from ex.map(_rate, odd_candidates(low, high), chunksize=16)

# ---------- reporting ----------

def fmt(error: Fraction) -> str:
    return f"{float(error):.12g}"

def summary(rates: List[Tuple[int, Fraction]]) -> dict:
    if not rates:
        return {"count": 0}
    v = np.array([float(e) for _, e in rates], dtype=float)
    return {
        "count": int(v.size),
        "mean": float(v.mean()),
        "median": float(np.median(v)),
        "p90": float(np.percentile(v, 90)),
        "zero": int((v == 0).sum()),
    }

def write_csv(path: str, rates: List[Tuple[int, Fraction]]):
    with open(path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["n", "error", "fraction"])
        for n, e in rates:
            w.writerow([n, fmt(e), str(e)])

def plot_rates(path: str, rates: List[Tuple[int, Fraction]]):
    import matplotlib.pyplot as plt
    xs = np.array([n for n, _ in rates])
    ys = np.array([float(e) for _, e in rates])
    plt.figure(figsize=(10, 5))
    plt.scatter(xs, ys, s=4)
    plt.title("Single-witness Miller-Rabin error vs {2,3} verdict")
    plt.xlabel("n"); plt.ylabel("error rate")
    plt.tight_layout()
    plt.savefig(path)
    plt.close()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Miller-Rabin single-witness error scan")
    ap.add_argument("--low", type=int, default=MR_LOW_BOUND, help="inclusive lower bound")
    ap.add_argument("--high", type=int, default=MR_HIGH_BOUND, help="exclusive upper bound")
    ap.add_argument("--top", type=int, default=MR_TOP_K, help="size of the highest-error bucket")
    ap.add_argument("--workers", type=int, default=1, help="worker processes (1 = in-process)")
    ap.add_argument("--csv", default=None, help="write every (n, error) row here")
    ap.add_argument("--plot", default=None, help="save a PNG of error vs n here")
    ap.add_argument("--no-wait", action="store_true", help="exit without waiting for Enter")
    args = ap.parse_args(argv)

    def on_new_max(n, error):
        print(f"New greatest error found: {fmt(error)}", flush=True)

    try:
        rates = parallel_rates(args.low, args.high, args.workers) if args.workers > 1 else None
        res = scan_errors(args.low, args.high, bucket_size=args.top,
                          on_new_max=on_new_max, rates=rates)
    except (BigSquareError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Max error: {fmt(res.max_error)}")
    pairs = ",\n".join(f"[{n}, {fmt(e)}]" for n, e in res.bucket.items())
    print(f"Maximized error values: \n{{\n{pairs}\n}}")

    s = summary(res.rates)
    if s["count"]:
        print(f"# scanned={s['count']} mean={s['mean']:.6g} median={s['median']:.6g} "
              f"p90={s['p90']:.6g} zero_error={s['zero']}", file=sys.stderr)
    if args.csv:
        write_csv(args.csv, res.rates)
        print(f"# wrote {len(res.rates)} rows to {args.csv}", file=sys.stderr)
    if args.plot and res.rates:
        plot_rates(args.plot, res.rates)
        print(f"# saved plot to {args.plot}", file=sys.stderr)

    if not args.no_wait and sys.stdin.isatty():
        input("Press Enter to exit.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
