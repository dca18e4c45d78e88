"""Helpers for running service calls from competing threads."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from sqlalchemy.orm import Session, sessionmaker

from agentxrp.services.errors import ConflictError, StorageError

CONCURRENT_WORKERS = 6


def run_concurrently(
    sessions: sessionmaker,
    submissions: Iterable[int],
    work: Callable[[Session, int], object],
) -> list[str]:
    """Release every ``work(db, n)`` call at once and classify each outcome."""
    submissions = list(submissions)
    barrier = Barrier(len(submissions))

    def submit(n: int) -> str:
        barrier.wait()
        with sessions() as db:
            try:
                work(db, n)
            except ConflictError:
                return "conflict"
            except StorageError:
                return "storage"
            return "ok"

    with ThreadPoolExecutor(max_workers=len(submissions)) as pool:
        return list(pool.map(submit, submissions))
