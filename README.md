# k2prng

A self-contained 64-bit Mersenne Twister (MT19937-64) generator, along with
a few small runtime helpers. It is meant for code that needs reproducible
64-bit random words, such as Zobrist hashing keys in a chess engine.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

## Random numbers

`k2prng.rand.MersenneTwister64` implements the MT19937-64 algorithm with a
312-word state.

```python
from k2prng.rand import MersenneTwister64, init_prng

rng = MersenneTwister64(5489)
word = rng.next_int64()      # integer in [0, 2**64 - 1]
half = rng.next_int63()      # integer in [0, 2**63 - 1]
x = rng.real1()              # float in [0, 1]
y = rng.real2()              # float in [0, 1)
z = rng.real3()              # float in (0, 1)

rng.seed(42)                 # reseed with a single integer
rng.seed_by_array([0x12345, 0x23456, 0x34567, 0x45678])

# The generator is an endless iterator of 64-bit words.
first_three = [next(rng) for _ in range(3)]

# A generator seeded by array with the engine's fixed key
# (0x12345, 0x23456, 0x34567, 0x45678).
engine_rng = init_prng()
```

Notes:

- A generator created without a seed (`MersenneTwister64()`) seeds itself
  with 5489 when the first number is drawn.
- Seeds and key values are reduced to 64 bits.
- `seed_by_array` raises `ValueError` when given an empty key.
- The same seed always gives the same sequence.

This is a statistical generator for simulations and hashing keys; it is not
suitable for cryptographic use.

## Utilities

```python
import sys

from k2prng.utils import (
    RequirementError,
    get_elapsed_time_in_secs,
    get_time_of_day_in_secs,
    print_stacktrace,
    require,
    round_down_to_nearest_power_2,
)

start = get_time_of_day_in_secs()          # seconds since the epoch
elapsed = get_elapsed_time_in_secs(start)  # seconds since start

round_down_to_nearest_power_2(100)   # 64
round_down_to_nearest_power_2(0)     # 0

require(elapsed >= 0, "clock went backwards")

print_stacktrace(sys.stderr)
```

- `require(cond, text)` raises `RequirementError` when `cond` is false. The
  exception carries `text`, `filename`, `lineno` and `function` of the
  caller, and its message lists them under a `FATAL: Error condition` line.
- `print_stacktrace(file=None)` prints a `Obtained N stack frames.` line
  followed by up to ten frames of the caller's stack, innermost first, to
  `file` (standard output by default).
- `print_stacktrace_and_exit()` prints the stack to standard output and
  then exits the process with status -1.

## Running the tests

```
pip install .[test]
pytest
```