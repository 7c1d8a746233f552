"""Small exercises: concurrent downloads, match points and a ticking timer."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

RESULTS = ("w", "l", "w", "d", "w", "l", "l", "l", "d", "d", "w", "l", "w", "d")
_POINTS = {"w": 3, "d": 1}


def download(size: int) -> int:
    """Simulate a download by summing 0 through ``size``."""
    return sum(range(size + 1))


def total_download(sizes: Iterable[int]) -> int:
    """Run the downloads concurrently and return the sum of their results."""
    sizes = list(sizes)
    if not sizes:
        return 0
    with ThreadPoolExecutor(max_workers=len(sizes)) as pool:
        return sum(pool.map(download, sizes))


def match_points(last_match: str) -> int:
    """Total league points after the fixed results plus ``last_match``."""
    return sum(_POINTS.get(result, 0) for result in (*RESULTS, last_match))


@dataclass
class Timer:
    id: int = 0
    value: int = 0

    def tick(self) -> None:
        """Advance the timer by one."""
        self.id += 1


def ticks(count: int) -> list[int]:
    """Tick a fresh timer ``count`` times and return its id after each tick."""
    timer = Timer(0, count)
    seen = []
    for _ in range(count):
        timer.tick()
        seen.append(timer.id)
    return seen