"""Choose which discovered CSVs to download in one run."""

from __future__ import annotations

import random
from typing import Callable, Sequence

SourceSelector = Callable[[Sequence[str]], list[str]]


class LatestPlusRandomSelection:
    """Pick the most recent CSV plus a random sample of the older ones.

    The catalog lists resources oldest first, so the last link is the most
    recent. Downloading every CSV would use too much memory, so at most
    ``max_sources`` are chosen.
    """

    def __init__(self, max_sources: int = 2, rng: random.Random | None = None) -> None:
        if max_sources < 1:
            raise ValueError("max_sources must be at least 1")
        self.max_sources = max_sources
        self.rng = rng or random.Random()

    def __call__(self, urls: Sequence[str]) -> list[str]:
        if not urls:
            return []
        latest, older = urls[-1], list(urls[:-1])
        sample_size = min(self.max_sources - 1, len(older))
        return [latest, *self.rng.sample(older, sample_size)]


def build_source_selector(max_sources: int, seed: int | None = None) -> SourceSelector:
    return LatestPlusRandomSelection(max_sources=max_sources, rng=random.Random(seed))
