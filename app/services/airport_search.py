from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import chain, repeat
from typing import Iterable, List, Optional, Sequence

from app.data.airports_repo import AirportRecord
from app.services.pagination import SliceView

logger = logging.getLogger(__name__)


def normalize_query(q: str) -> str:
    # same transform the loader applies to icao_lower / name_lower
    return (q or "").lower()


def matches(rec: AirportRecord, needle: str) -> bool:
    return needle in rec.icao_lower or needle in rec.name_lower


def filter_airports(airports: Iterable[AirportRecord], needle: str) -> List[AirportRecord]:
    return [rec for rec in airports if matches(rec, needle)]


def _chunks(airports: Sequence[AirportRecord], parts: int) -> List[SliceView[AirportRecord]]:
    size = max(1, -(-len(airports) // parts))
    return [
        SliceView(airports, start, min(start + size, len(airports)))
        for start in range(0, len(airports), size)
    ]


class AirportSearch:
    """
    Case-insensitive substring search over icao and name.

    Results always come back in dataset order. Large datasets are split into
    contiguous chunks filtered on a thread pool; chunk results are joined in
    chunk order, not completion order.
    """

    def __init__(
        self,
        airports: Sequence[AirportRecord],
        workers: int = 1,
        parallel_threshold: int = 20_000,
    ):
        self.airports = airports
        self.workers = max(1, workers)
        self.parallel_threshold = parallel_threshold
        self._executor: Optional[ThreadPoolExecutor] = None
        if self.workers > 1:
            self._executor = ThreadPoolExecutor(
                max_workers=self.workers, thread_name_prefix="airport-search"
            )

    def search(self, q: str) -> Sequence[AirportRecord]:
        needle = normalize_query(q)
        if not needle:
            return self.airports

        executor = self._executor
        if executor is None or len(self.airports) < self.parallel_threshold:
            return filter_airports(self.airports, needle)

        chunks = _chunks(self.airports, self.workers)
        try:
            # Executor.map yields in submission order
            parts = executor.map(filter_airports, chunks, repeat(needle))
        except RuntimeError:
            # pool shut down by close() while this request was in flight
            return filter_airports(self.airports, needle)
        return list(chain.from_iterable(parts))

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("Search executor shut down")
