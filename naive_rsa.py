#!/usr/bin/env python3
# naive_rsa.py: substitution table of A..Z under x -> x^e mod n
# Illustrative only; nothing here is secure.

import sys, argparse
from sympy import mod_inverse, totient

from bigsquare import BigSquareError, ModExpCache, mod_pow
from bigsquare.settings import RSA_EXPONENT, RSA_MODULUS

def letter_table(e: int, n: int, cache: ModExpCache | None = None):
    """[(letter, e(x))] for 'A'..'Z'."""
    if cache is None:
        cache = ModExpCache()
    return [(chr(x), mod_pow(x, e, n, cache)) for x in range(ord("A"), ord("Z") + 1)]

def private_exponent(e: int, n: int) -> int:
    return int(mod_inverse(e, int(totient(n))))

def main(argv=None):
    ap = argparse.ArgumentParser(description="Encrypt A..Z with a toy RSA modulus")
    ap.add_argument("-e", "--exponent", type=int, default=RSA_EXPONENT, help="public exponent")
    ap.add_argument("-n", "--modulus", type=int, default=RSA_MODULUS, help="modulus")
    ap.add_argument("--verify", action="store_true", help="add a d(e(x)) column")
    ap.add_argument("--no-wait", action="store_true", help="exit without waiting for Enter")
    args = ap.parse_args(argv)

    cache = ModExpCache()
    try:
        rows = letter_table(args.exponent, args.modulus, cache)
        d = private_exponent(args.exponent, args.modulus) if args.verify else None
    except (BigSquareError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if d is None:
        print("x | e(x)")
        for letter, c in rows:
            print(f"{letter} | {c}")
    else:
        print("x | e(x) | d(e(x))")
        for letter, c in rows:
            print(f"{letter} | {c} | {mod_pow(c, d, args.modulus, cache)}")

    if not args.no_wait and sys.stdin.isatty():
        input("Press Enter to exit.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
