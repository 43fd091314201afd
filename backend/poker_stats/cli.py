import argparse
from typing import List, Optional

import numpy as np

from poker_stats.config import settings
from poker_stats.display import format_aggregate, format_deck, format_score, format_stats
from poker_stats.engine.cards import draw_hand, sorted_deck
from poker_stats.engine.scoring import HandStats, classify
from poker_stats.engine.simulation import sample_statistics
from poker_stats.logging_config import configure_logging, logger
from poker_stats.models import SUPPORTED_HAND_SIZES


def _hand_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        size = None
    if size not in SUPPORTED_HAND_SIZES:
        raise argparse.ArgumentTypeError("Invalid number. Enter either 5 or 7")
    return size


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _seed(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"seed must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="poker-stats", description="Draw poker hands and estimate category frequencies.")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    draw = subparsers.add_parser("draw-hand", help="Draw one hand and show its statistics and score")
    draw.add_argument("hand_size", type=_hand_size, help="Cards per hand: 5 or 7")
    draw.add_argument("--seed", type=_seed, default=None)

    stats = subparsers.add_parser("statistics", help="Sample many hands and report category frequencies")
    stats.add_argument("hand_size", type=_hand_size, help="Cards per hand: 5 or 7")
    stats.add_argument("num_samples", type=_positive_int, help="Total number of hands to sample")
    stats.add_argument("-t", "--threads", type=_positive_int, default=1, help="Number of workers (default: %(default)s)")
    stats.add_argument("--seed", type=_seed, default=None)
    stats.add_argument("--processes", action="store_true", help="Use worker processes instead of threads")

    subparsers.add_parser("sorted-deck", help="Print the 52 cards in sorted order")

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def draw_and_display_hand(hand_size: int, seed: Optional[int] = None) -> None:
    hand = draw_hand(hand_size, np.random.default_rng(seed))
    stats = HandStats.from_hand(hand)
    print(hand)
    print(format_stats(stats))
    print(format_score(classify(stats)))


def sample_and_display_statistics(
    hand_size: int,
    num_samples: int,
    num_workers: int = 1,
    seed: Optional[int] = None,
    use_processes: bool = False,
) -> None:
    if num_workers > settings.max_workers:
        logger.info("Requested %d workers, capped at %d", num_workers, settings.max_workers)
        num_workers = settings.max_workers
    scores = sample_statistics(hand_size, num_samples, num_workers=num_workers, seed=seed, use_processes=use_processes)
    print(format_aggregate(scores))


def print_sorted_deck() -> None:
    print("Sorted Deck:")
    print(format_deck(sorted_deck()))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level.upper(), settings.log_dir)

    if args.command == "draw-hand":
        draw_and_display_hand(args.hand_size, args.seed)
    elif args.command == "statistics":
        sample_and_display_statistics(args.hand_size, args.num_samples, args.threads, args.seed, args.processes)
    elif args.command == "sorted-deck":
        print_sorted_deck()
    elif args.command == "serve":
        import uvicorn

        uvicorn.run("poker_stats.main:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
