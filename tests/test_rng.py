import pytest

from cg2d.rng import GOLDEN, SplitMix64, make_rng


def test_reference_sequence():
    # еталонні значення splitmix64 для сіду 1234567
    rng = SplitMix64(1234567)
    assert rng.next_u64() == 6457827717110365317
    assert rng.next_u64() == 3203168211198807973
    assert rng.next_u64() == 9817491932198370423


def test_float_is_top_53_bits():
    a = SplitMix64(99)
    b = SplitMix64(99)
    for _ in range(100):
        u = b.next_u64()
        assert a() == (u >> 11) / 2.0**53


def test_unit_interval():
    rng = make_rng(7)
    for _ in range(10000):
        v = rng()
        assert 0.0 <= v < 1.0


def test_same_seed_same_stream():
    a = SplitMix64(42)
    b = SplitMix64(42)
    assert [a() for _ in range(50)] == [b() for _ in range(50)]


def test_instances_do_not_share_state():
    a = SplitMix64(42)
    first = a()
    a()
    b = SplitMix64(42)
    assert b() == first


def test_zero_seed_uses_golden_constant():
    assert SplitMix64(0)() == SplitMix64(GOLDEN)()


def test_negative_seed_wraps_to_64_bits():
    a = SplitMix64(-1)
    b = SplitMix64(2**64 - 1)
    assert [a() for _ in range(5)] == [b() for _ in range(5)]


@pytest.mark.parametrize("seed", [1.5, "7", None, True])
def test_non_int_seed_rejected(seed):
    with pytest.raises(TypeError):
        SplitMix64(seed)
