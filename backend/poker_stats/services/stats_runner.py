import concurrent.futures
import time
from typing import Dict, Optional

from poker_stats.config import settings
from poker_stats.engine.simulation import partition_samples, resolve_seed, sample_statistics
from poker_stats.logging_config import logger
from poker_stats.models import StatisticsRequest, StatisticsResult, StatisticsStatus


class InMemoryStatisticsRunner:
    """Runs statistics jobs in the background and keeps their results in memory."""

    def __init__(self, max_jobs: int = 4, max_workers: Optional[int] = None) -> None:
        self._executor = concurrent.futures.ThreadPoolExecutor(max_workers=max_jobs)
        self._max_workers = max_workers or settings.max_workers
        self._futures: Dict[str, concurrent.futures.Future] = {}
        self._progress: Dict[str, StatisticsStatus] = {}

    def start(self, job_id: str, request: StatisticsRequest) -> None:
        self._progress[job_id] = StatisticsStatus(
            status="queued", progress=0.0, samples_done=0, samples_total=request.num_samples
        )
        self._futures[job_id] = self._executor.submit(self._run, job_id, request)

    def _run(self, job_id: str, request: StatisticsRequest) -> StatisticsResult:
        num_workers = min(request.num_workers, self._max_workers)
        seed = resolve_seed(request.seed)

        def _progress_cb(done: int, total: int) -> None:
            self._progress[job_id] = StatisticsStatus(
                status="running",
                progress=done / total if total else 0.0,
                samples_done=done,
                samples_total=total,
            )

        _progress_cb(0, request.num_samples)
        logger.info(
            "Statistics job %s started: %d hands of %d cards, %d workers",
            job_id,
            request.num_samples,
            request.hand_size,
            num_workers,
        )
        started = time.perf_counter()
        try:
            scores = sample_statistics(
                request.hand_size,
                request.num_samples,
                num_workers=num_workers,
                seed=seed,
                use_processes=request.use_processes,
                progress_cb=_progress_cb,
            )
        except Exception as e:
            logger.exception("Statistics job %s failed", job_id)
            self._progress[job_id] = StatisticsStatus(
                status="failed",
                progress=0.0,
                samples_done=0,
                samples_total=request.num_samples,
                error=str(e),
            )
            raise
        elapsed = time.perf_counter() - started
        logger.info("Statistics job %s finished in %.2fs", job_id, elapsed)

        self._progress[job_id] = StatisticsStatus(
            status="done",
            progress=1.0,
            samples_done=scores.samples,
            samples_total=request.num_samples,
        )
        shares = partition_samples(request.num_samples, num_workers)
        return StatisticsResult(
            hand_size=request.hand_size,
            num_samples=scores.samples,
            counts=scores.counts(),
            percentages=scores.percentages(),
            meta={
                "workers": str(num_workers),
                "shares": ",".join(str(share) for share in shares),
                "seed": str(seed),
                "executor": "processes" if request.use_processes and num_workers > 1 else "threads",
                "elapsed_seconds": f"{elapsed:.3f}",
            },
        )

    def get(self, job_id: str) -> Optional[StatisticsResult]:
        future = self._futures.get(job_id)
        if not future or not future.done():
            return None
        if future.exception() is not None:
            return None
        return future.result()

    def status(self, job_id: str) -> Optional[StatisticsStatus]:
        return self._progress.get(job_id)

    def wait(self, job_id: str, timeout: Optional[float] = None) -> Optional[StatisticsResult]:
        """Block until the job finishes. Returns None for unknown or failed jobs."""
        future = self._futures.get(job_id)
        if not future:
            return None
        concurrent.futures.wait([future], timeout=timeout)
        return self.get(job_id)
