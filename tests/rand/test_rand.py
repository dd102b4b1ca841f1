import statistics

import pytest

from randsource import MT32Source, MT64Source, SimpleSource
from randsource.rand import Rand


@pytest.fixture
def rand():
    """Fixture to create a Rand on top of a default seeded MT64Source."""
    return Rand(MT64Source())


def test_rejects_missing_source():
    with pytest.raises(ValueError):
        Rand(None)


def test_exposes_source():
    source = SimpleSource()
    assert Rand(source).source is source


def test_construction_keeps_source_state():
    """Wrapping a source does not reseed it."""
    source = MT64Source()
    source.seed(1234)
    expected = MT64Source()
    expected.seed(1234)
    assert Rand(source).uint64() == expected.uint64()


def test_random_uses_top_53_bits_of_int63(rand):
    reference = MT64Source()
    for _ in range(100):
        assert rand.random() == (reference.int63() >> 10) / 2**53


def test_random_distribution():
    rand = Rand(SimpleSource())
    values = [rand.random() for _ in range(100_000)]
    assert all(0.0 <= value < 1.0 for value in values)
    assert abs(statistics.fmean(values) - 0.5) <= 0.05
    assert abs(statistics.pvariance(values) - 1 / 12) <= 0.1 / 12


def test_getrandbits_zero(rand):
    assert rand.getrandbits(0) == 0


def test_getrandbits_negative(rand):
    with pytest.raises(ValueError):
        rand.getrandbits(-1)


def test_getrandbits_takes_top_bits(rand):
    reference = MT64Source()
    assert rand.getrandbits(10) == reference.uint64() >> 54
    assert rand.getrandbits(64) == reference.uint64()


def test_getrandbits_concatenates_words(rand):
    reference = MT64Source()
    first = reference.uint64()
    second = reference.uint64()
    third = reference.uint64()
    assert rand.getrandbits(130) == (first << 64 | second) << 2 | third >> 62


def test_seed_forwards_to_source(rand):
    rand.seed(99)
    reference = MT64Source()
    reference.seed(99)
    assert rand.uint64() == reference.uint64()
    assert rand.int63() == reference.int63()


def test_seed_none_keeps_state(rand):
    reference = MT64Source()
    rand.seed(None)
    assert rand.uint64() == reference.uint64()


def test_seed_clears_cached_gauss(rand):
    rand.gauss(0.0, 1.0)
    assert rand.gauss_next is not None
    rand.seed(None)
    assert rand.gauss_next is None
    rand.gauss(0.0, 1.0)
    rand.seed(7)
    assert rand.gauss_next is None


def test_seed_rejects_non_integers(rand):
    with pytest.raises(TypeError):
        rand.seed("seed")


def test_distribution_methods_are_deterministic():
    first = Rand(MT32Source())
    second = Rand(MT32Source())
    assert [first.randrange(6) for _ in range(100)] == [second.randrange(6) for _ in range(100)]
    assert first.uniform(-1.0, 1.0) == second.uniform(-1.0, 1.0)
    assert first.gauss(0.0, 1.0) == second.gauss(0.0, 1.0)
    items_a, items_b = list(range(20)), list(range(20))
    first.shuffle(items_a)
    second.shuffle(items_b)
    assert items_a == items_b


def test_randrange_stays_in_bounds(rand):
    for _ in range(10_000):
        assert 0 <= rand.randrange(20) < 20


def test_state_is_not_exposed(rand):
    with pytest.raises(NotImplementedError):
        rand.getstate()
    with pytest.raises(NotImplementedError):
        rand.setstate(None)
