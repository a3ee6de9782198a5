"""Concurrent module source loading.

Reads run on a :class:`~concurrent.futures.ThreadPoolExecutor`, one task per
file. Results are placed by submission index, never by completion order.

INVARIANT: Either every source is returned or an error is raised.
There is no partial result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from bsnbundle.infrastructure.filesystem import read_source

logger = logging.getLogger(__name__)

Reader = Callable[[Path], str]


def load_module_sources(
    paths: Sequence[Path],
    *,
    reader: Reader = read_source,
    max_workers: int | None = None,
) -> list[str]:
    """Read every path concurrently and return the texts in input order.

    Fails fast: the first failure to complete is re-raised, reads that have
    not started are cancelled, and finished sibling results are discarded.
    """
    if not paths:
        return []

    results: list[str] = [""] * len(paths)
    executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="bsnbundle-read")
    try:
        futures: dict[Future[str], int] = {
            executor.submit(reader, path): index for index, path in enumerate(paths)
        }
        for future in as_completed(futures):
            index = futures[future]
            try:
                results[index] = future.result()
            except Exception:
                logger.debug("Read failed for %s", paths[index])
                raise
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    return results
