from itertools import islice

import pytest

from k2prng.rand import MersenneTwister64, init_prng


def test_init_prng_matches_reference_output():
    generator = init_prng()
    assert generator.next_int64() == 7266447313870364031
    assert generator.next_int64() == 4946485549665804864


def test_default_seed_10000th_value():
    generator = MersenneTwister64(5489)
    values = list(islice(generator, 10000))
    assert values[-1] == 9981545732273789042


def test_unseeded_generator_uses_default_seed():
    unseeded = MersenneTwister64()
    seeded = MersenneTwister64(5489)
    assert [unseeded.next_int64() for _ in range(20)] == [seeded.next_int64() for _ in range(20)]


def test_same_seed_same_sequence():
    a = MersenneTwister64(42)
    b = MersenneTwister64(42)
    assert list(islice(a, 700)) == list(islice(b, 700))


def test_different_seeds_differ():
    a = MersenneTwister64(1)
    b = MersenneTwister64(2)
    assert list(islice(a, 10)) != list(islice(b, 10))


def test_reseed_restarts_sequence():
    generator = MersenneTwister64(7)
    first = list(islice(generator, 400))
    generator.seed(7)
    assert list(islice(generator, 400)) == first


def test_seed_by_array_restarts_sequence():
    generator = init_prng()
    first = list(islice(generator, 50))
    generator.seed_by_array([0x12345, 0x23456, 0x34567, 0x45678])
    assert list(islice(generator, 50)) == first


def test_seed_by_array_empty_key_raises():
    with pytest.raises(ValueError):
        MersenneTwister64().seed_by_array([])


def test_int64_in_range():
    generator = MersenneTwister64(123)
    assert all(0 <= v < 2**64 for v in islice(generator, 1000))


def test_int63_is_int64_shifted():
    a = MersenneTwister64(99)
    b = MersenneTwister64(99)
    for _ in range(100):
        assert a.next_int63() == b.next_int64() >> 1


def test_int63_in_range():
    generator = MersenneTwister64(5)
    assert all(0 <= generator.next_int63() < 2**63 for _ in range(1000))


def test_real_intervals():
    generator = MersenneTwister64(2024)
    for _ in range(1000):
        assert 0.0 <= generator.real1() <= 1.0
        assert 0.0 <= generator.real2() < 1.0
        assert 0.0 < generator.real3() < 1.0


def test_reals_are_deterministic():
    a = MersenneTwister64(11)
    b = MersenneTwister64(11)
    assert [a.real1() for _ in range(10)] == [b.real1() for _ in range(10)]
    assert [a.real2() for _ in range(10)] == [b.real2() for _ in range(10)]
    assert [a.real3() for _ in range(10)] == [b.real3() for _ in range(10)]


def test_iteration_matches_next_int64():
    a = MersenneTwister64(314)
    b = MersenneTwister64(314)
    assert [next(a) for _ in range(5)] == [b.next_int64() for _ in range(5)]
    assert iter(a) is a