import argparse
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from core import MatchSession  # noqa: E402
from notation import compile_pattern  # noqa: E402

# Patterns ordered from tightly governed to fully permissive superiors
PATTERNS = {
    "seq": "seq(one_or_more & even, one_or_more & odd, zero_or_more)",
    "ascending": "serial(ascending, even, odd, gt(50))",
    "permissive": "serial(zero_or_more, even, odd, gt(50), unique)",
}


def generate_tokens(total_tokens: int, seed: int) -> list:
    rng = random.Random(seed)
    return [rng.randint(0, 100) for _ in range(total_tokens)]


def write_token_file(path: Path, tokens: list) -> None:
    lines = ["token,type"] + [f"{token},int" for token in tokens]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def measure(pattern: str, tokens: list) -> dict:
    session = MatchSession(compile_pattern(pattern))
    session.feed_all(tokens)
    stats = session.get_performance_stats()
    stats["verdict"] = str(session.verdict)
    return stats


def main():
    parser = argparse.ArgumentParser(
        description="Measure serial path-set sizes over random integer tokens"
    )
    parser.add_argument(
        "--tokens", type=int, default=1000, help="Number of tokens to generate"
    )
    parser.add_argument("--seed", type=int, default=7, help="Random seed")
    parser.add_argument(
        "--output", type=Path, default=None, help="Optional CSV file to write the tokens to"
    )
    args = parser.parse_args()

    tokens = generate_tokens(args.tokens, args.seed)
    if args.output:
        write_token_file(args.output, tokens)
        print(f"Wrote {len(tokens)} tokens to {args.output}")

    for name, pattern in PATTERNS.items():
        stats = measure(pattern, tokens)
        print(
            f"{name:12s} peak={stats['peak_path_count']:4d} "
            f"final={stats['current_path_count']:4d} verdict={stats['verdict']}"
        )


if __name__ == "__main__":
    main()
