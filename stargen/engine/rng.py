"""Injectable random streams for deterministic generation."""
from __future__ import annotations

import hashlib
import math
import random
from typing import Iterable, List, Sequence, TypeVar

T = TypeVar("T")


def hash_seed(*parts: object) -> int:
    payload = "|".join(str(part) for part in parts)
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    return int(digest[:16], 16)


class RandomStream:
    """Source of floats in [0, 1) with the helpers every stage draws through.

    Every helper is expressed in terms of :meth:`next`, so a stream that
    replays fixed values drives the exact same branches as a seeded one.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        self._random = random.Random(seed)

    @classmethod
    def seeded(cls, *parts: object) -> "RandomStream":
        return cls(hash_seed(*parts))

    def next(self) -> float:
        return self._random.random()

    def uniform(self, low: float, high: float) -> float:
        return low + self.next() * (high - low)

    def chance(self, probability: float) -> bool:
        return self.next() < probability

    def below(self, count: int) -> int:
        return min(count - 1, int(math.floor(self.next() * count)))

    def choice(self, options: Sequence[T]) -> T:
        return options[self.below(len(options))]


class ScriptedStream(RandomStream):
    """Replays a fixed sequence of values, cycling when exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        super().__init__(None)
        self._values: List[float] = [float(value) for value in values]
        if not self._values:
            raise ValueError("ScriptedStream needs at least one value")
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"scripted value {value!r} outside [0, 1)")
        self._index = 0
        self.draws = 0

    def next(self) -> float:
        value = self._values[self._index]
        self._index = (self._index + 1) % len(self._values)
        self.draws += 1
        return value


__all__ = ["RandomStream", "ScriptedStream", "hash_seed"]
