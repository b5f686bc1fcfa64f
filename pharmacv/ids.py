"""
Opaque identifiers for editable list entities (experiences, formations, ...).

Ids are a base-36 millisecond timestamp followed by a base-36 random suffix.
The clock and the random source are injected so that tests can pin them.
"""

from __future__ import annotations

import random
import time
from typing import Callable, Optional, Set

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding expects a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


class IdGenerator:
    """
    Generates unique ids of the form ``<time36><random36>``.

    A generator never hands out the same id twice; when the clock and the
    random source collide, a counter suffix disambiguates.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
        suffix_length: int = 8,
    ):
        self._clock = clock
        self._rng = rng or random.Random()
        self._suffix_length = suffix_length
        self._issued: Set[str] = set()
        self._counter = 0

    def __call__(self) -> str:
        return self.new_id()

    def new_id(self) -> str:
        stamp = to_base36(int(self._clock() * 1000))
        suffix = "".join(self._rng.choice(_ALPHABET) for _ in range(self._suffix_length))
        candidate = stamp + suffix
        while candidate in self._issued:
            self._counter += 1
            candidate = f"{stamp}{suffix}{to_base36(self._counter)}"
        self._issued.add(candidate)
        return candidate
