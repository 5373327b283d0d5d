"""
Purpose: Fixed-size worker pool used by the filter and score stages.
What it does:

- a task queue and a result queue, both bounded to the batch size
- the task queue is filled completely before any worker starts, so the
  producer never blocks and an empty queue means the batch is drained
- `worker_count` threads pull items, call `handler(worker_id, item)` and
  publish every non-None return value
- the caller joins every worker (the barrier) before draining the results

Result order is NOT guaranteed. Callers must sort downstream.
"""

from __future__ import annotations

import queue
import threading
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Handler = Callable[[int, T], Optional[R]]


def _worker(
    worker_id: int,
    tasks: "queue.Queue[T]",
    results: "queue.Queue[R]",
    failures: "queue.Queue[BaseException]",
    handler: Handler,
) -> None:
    while True:
        try:
            item = tasks.get_nowait()
        except queue.Empty:
            return

        try:
            result = handler(worker_id, item)
        except Exception as e:
            failures.put(e)
            continue

        if result is not None:
            results.put(result)


def run_worker_pool(items: Sequence[T], handler: Handler, worker_count: int) -> List[R]:
    """
    Run `handler` over `items` on `worker_count` threads and collect the
    published results in arrival order.

    If any handler raised, the first failure is re-raised here once every
    worker has finished.
    """
    if not items:
        return []

    tasks: "queue.Queue[T]" = queue.Queue(maxsize=len(items))
    results: "queue.Queue[R]" = queue.Queue(maxsize=len(items))
    failures: "queue.Queue[BaseException]" = queue.Queue()

    # Feed tasks
    for item in items:
        tasks.put(item)

    # Start workers
    threads = [
        threading.Thread(
            target=_worker,
            args=(worker_id, tasks, results, failures, handler),
            name=f"pairing-worker-{worker_id}",
            daemon=True,
        )
        for worker_id in range(worker_count)
    ]
    for thread in threads:
        thread.start()

    # Block until all workers finish
    for thread in threads:
        thread.join()

    if not failures.empty():
        raise failures.get()

    # Collect results
    collected: List[R] = []
    while not results.empty():
        collected.append(results.get())
    return collected
