"""64-bit Mersenne Twister (MT19937-64) pseudo-random number generator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_NN = 312
_MM = 156
_MATRIX_A = 0xB5026F5AA96619E9
_UPPER_MASK = 0xFFFFFFFF80000000  # most significant 33 bits
_LOWER_MASK = 0x7FFFFFFF  # least significant 31 bits
_MASK64 = 0xFFFFFFFFFFFFFFFF

_DEFAULT_SEED = 5489
_ARRAY_SEED = 19650218
_ENGINE_KEY = (0x12345, 0x23456, 0x34567, 0x45678)


class MersenneTwister64(Iterator[int]):
    """MT19937-64 generator producing 64-bit unsigned integers.

    A generator created without a seed is seeded with 5489 on first use.
    Iterating over it yields an endless stream of 64-bit integers.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._mt: list[int] = [0] * _NN
        self._mti = _NN + 1
        if seed is not None:
            self.seed(seed)

    def seed(self, seed: int) -> None:
        """Initialise the state from a single integer seed."""
        state = [seed & _MASK64]
        for i in range(1, _NN):
            prev = state[-1]
            state.append((6364136223846793005 * (prev ^ (prev >> 62)) + i) & _MASK64)
        self._mt = state
        self._mti = _NN

    def seed_by_array(self, key: Iterable[int]) -> None:
        """Initialise the state from a sequence of integers."""
        init_key = [k & _MASK64 for k in key]
        if not init_key:
            raise ValueError("seed key must not be empty")
        key_length = len(init_key)

        self.seed(_ARRAY_SEED)
        mt = self._mt
        i, j = 1, 0
        for _ in range(max(_NN, key_length)):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 62)) * 3935559000370003845)) + init_key[j] + j) & _MASK64
            i += 1
            j += 1
            if i >= _NN:
                mt[0] = mt[_NN - 1]
                i = 1
            if j >= key_length:
                j = 0
        for _ in range(_NN - 1):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 62)) * 2862933555777941757)) - i) & _MASK64
            i += 1
            if i >= _NN:
                mt[0] = mt[_NN - 1]
                i = 1
        mt[0] = 1 << 63  # MSB is 1, assuring a non-zero initial state

    def _twist(self) -> None:
        if self._mti == _NN + 1:
            self.seed(_DEFAULT_SEED)
        mt = self._mt
        for i in range(_NN):
            x = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _NN] & _LOWER_MASK)
            value = mt[(i + _MM) % _NN] ^ (x >> 1)
            if x & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._mti = 0

    def next_int64(self) -> int:
        """Return a random integer on [0, 2**64 - 1]."""
        if self._mti >= _NN:
            self._twist()
        x = self._mt[self._mti]
        self._mti += 1

        x ^= (x >> 29) & 0x5555555555555555
        x ^= (x << 17) & 0x71D67FFFEDA60000
        x ^= (x << 37) & 0xFFF7EEE000000000
        x ^= x >> 43
        return x & _MASK64

    def next_int63(self) -> int:
        """Return a random integer on [0, 2**63 - 1]."""
        return self.next_int64() >> 1

    def real1(self) -> float:
        """Return a random float on the closed interval [0, 1]."""
        return (self.next_int64() >> 11) * (1.0 / 9007199254740991.0)

    def real2(self) -> float:
        """Return a random float on the half-open interval [0, 1)."""
        return (self.next_int64() >> 11) * (1.0 / 9007199254740992.0)

    def real3(self) -> float:
        """Return a random float on the open interval (0, 1)."""
        return ((self.next_int64() >> 12) + 0.5) * (1.0 / 4503599627370496.0)

    def __iter__(self) -> MersenneTwister64:
        return self

    def __next__(self) -> int:
        return self.next_int64()


def init_prng() -> MersenneTwister64:
    """Return a generator seeded with the engine's fixed key."""
    generator = MersenneTwister64()
    generator.seed_by_array(_ENGINE_KEY)
    return generator