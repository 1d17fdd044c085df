# factorworker/cli.py
import sys, argparse, json, logging, random

from . import config
from .engine import factorize, format_factors
from .errors import FactorError
from .parse import parse_positive

def process(text: str, rounds: int, rng, as_json: bool) -> int:
    try:
        n = parse_positive(text)
        factors = factorize(n, rounds=rounds, rng=rng, prime_limit=config.PRIME_LIMIT)
    except FactorError as e:
        print(f"# skip: {text.strip()}: {e}", file=sys.stderr)
        return 1
    if as_json:
        print(json.dumps({"original": text.strip(), "factors": {str(p): e for p, e in factors.items()}}))
    else:
        print(f"{n}\t{format_factors(factors)}")
    return 0

def main(argv=None):
    ap = argparse.ArgumentParser(prog="factorworker", description="Prime-power decomposition of integers.")
    ap.add_argument("--rounds", type=int, default=config.ROUNDS, help="Miller-Rabin rounds per candidate")
    ap.add_argument("--seed", type=int, default=None, help="seed the witness/walk RNG")
    ap.add_argument("--json", action="store_true", help="one JSON object per line")
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument("N", nargs="*", help="integers to factor (default: read stdin)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.rounds < 1:
        ap.error("--rounds must be >= 1")
    rng = random.Random(args.seed) if args.seed is not None else None

    rc = 0
    lines = args.N or (line for line in sys.stdin if line.strip())
    for text in lines:
        rc |= process(text, args.rounds, rng, args.json)
    return rc

if __name__ == "__main__":
    raise SystemExit(main())
