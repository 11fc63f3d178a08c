"""Split the paths of a page into bounded batches of concurrent renders."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, List


def batches(max_size: int, paths: Iterable[str]) -> Iterator[List[str]]:
    """Return a lazy iterator of consecutive batches of at most ``max_size`` paths.

    Batches are produced from a single pass over ``paths``, in input order,
    and each one is a new list. Only the last batch may hold fewer than
    ``max_size`` paths.
    """
    if max_size < 1:
        raise ValueError(f"max_size must be >= 1, got {max_size}")
    return _iter_batches(max_size, iter(paths))


def _iter_batches(max_size: int, iterator: Iterator[str]) -> Iterator[List[str]]:
    while True:
        batch = list(islice(iterator, max_size))
        if not batch:
            return
        yield batch
