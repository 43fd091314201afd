from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from poker_stats.engine.cards import draw_hand
from poker_stats.engine.scoring import AggregateScore, HandStats, classify
from poker_stats.logging_config import logger

# Offset between worker seeds so every worker owns an independent stream.
SEED_STRIDE = 1_000_000_007


def partition_samples(num_samples: int, num_workers: int) -> List[int]:
    """Split num_samples into num_workers shares; the first num_samples % num_workers get one extra."""
    if num_workers < 1:
        raise ValueError("num_workers must be at least 1")
    base, remainder = divmod(num_samples, num_workers)
    return [base + (1 if i < remainder else 0) for i in range(num_workers)]


def resolve_seed(seed: Optional[int]) -> int:
    if seed is not None:
        if seed < 0:
            raise ValueError("seed must be non-negative")
        return seed
    return int(np.random.SeedSequence().generate_state(1)[0])


def worker_seed(seed: int, worker_index: int) -> int:
    return seed + worker_index * SEED_STRIDE


def sample_aggregate_scores(hand_size: int, num_samples: int, rng: np.random.Generator) -> AggregateScore:
    scores = AggregateScore()
    for _ in range(num_samples):
        scores.insert(classify(HandStats.from_hand(draw_hand(hand_size, rng))))
    return scores


def _run_worker(args: Tuple[int, int, int]) -> AggregateScore:
    """
    Sample one share of the total. Module-level so it can be pickled for
    ProcessPoolExecutor.
    """
    hand_size, num_samples, seed = args
    rng = np.random.default_rng(seed)
    return sample_aggregate_scores(hand_size, num_samples, rng)


def sample_statistics(
    hand_size: int,
    num_samples: int,
    num_workers: int = 1,
    seed: Optional[int] = None,
    use_processes: bool = False,
    progress_cb: Optional[Callable[[int, int], None]] = None,
) -> AggregateScore:
    """
    Estimate category frequencies by sampling hands on several workers.

    Args:
        hand_size: Cards per hand (5 or 7)
        num_samples: Total hands to sample across all workers
        num_workers: Number of concurrent workers, at least 1
        seed: Base seed; worker i uses seed + i * SEED_STRIDE. None draws fresh entropy.
        use_processes: Run workers in a ProcessPoolExecutor instead of threads
        progress_cb: Called with (samples_done, samples_total) as each worker finishes

    Returns:
        AggregateScore merged from every worker, in worker order
    """
    shares = partition_samples(num_samples, num_workers)
    base_seed = resolve_seed(seed)
    worker_args = [(hand_size, share, worker_seed(base_seed, i)) for i, share in enumerate(shares)]
    logger.debug(
        "Sampling %d hands of %d cards on %d %s: shares=%s",
        num_samples,
        hand_size,
        num_workers,
        "processes" if use_processes else "threads",
        shares,
    )

    if num_workers == 1:
        local_scores = [_run_worker(worker_args[0])]
        if progress_cb:
            progress_cb(num_samples, num_samples)
    else:
        executor_cls = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
        with executor_cls(max_workers=num_workers) as executor:
            local_scores = _collect(executor, worker_args, num_samples, progress_cb)

    scores = AggregateScore()
    for local in local_scores:
        scores.merge(local)
    logger.info("Sampled %d hands of %d cards on %d workers", scores.samples, hand_size, num_workers)
    return scores


def _collect(
    executor: Executor,
    worker_args: List[Tuple[int, int, int]],
    num_samples: int,
    progress_cb: Optional[Callable[[int, int], None]],
) -> List[AggregateScore]:
    future_to_idx = {executor.submit(_run_worker, args): i for i, args in enumerate(worker_args)}
    results: Dict[int, AggregateScore] = {}
    completed = 0
    for future in as_completed(future_to_idx):
        # Any worker failure fails the whole run.
        local = future.result()
        results[future_to_idx[future]] = local
        completed += local.samples
        if progress_cb:
            progress_cb(completed, num_samples)
    return [results[i] for i in range(len(worker_args))]
