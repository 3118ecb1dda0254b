"""
Детермінований ГПВЧ у стилі splitmix64.
Вся арифметика беззнакова 64-бітна, тож послідовність для сіду
відтворюється біт-в-біт на будь-якій платформі.
"""
from __future__ import annotations

MASK64 = (1 << 64) - 1
GOLDEN = 0x9E3779B97F4A7C15
MIX1 = 0xBF58476D1CE4E5B9
MIX2 = 0x94D049BB133111EB
TWO53 = float(1 << 53)


class SplitMix64:
    """Виклик інстансу повертає float у [0, 1). Стан локальний для інстансу."""

    __slots__ = ("state",)

    def __init__(self, seed: int = 0):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be int, got {type(seed).__name__}")
        # нульовий сід замінюємо на золоту константу
        self.state = (seed or GOLDEN) & MASK64

    def next_u64(self) -> int:
        self.state = (self.state + GOLDEN) & MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * MIX1) & MASK64
        z = ((z ^ (z >> 27)) * MIX2) & MASK64
        return z ^ (z >> 31)

    def random(self) -> float:
        # верхні 53 біти -> мантиса
        return (self.next_u64() >> 11) / TWO53

    __call__ = random


def make_rng(seed: int) -> SplitMix64:
    return SplitMix64(seed)
