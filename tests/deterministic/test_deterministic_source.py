import pytest

from randsource.deterministic import DeterministicSource
from randsource.protocol_constants import DEFAULT_SEED


@pytest.fixture
def source():
    """Fixture to create a DeterministicSource with the default seed."""
    return DeterministicSource()


def test_unseeded_sources_agree(source):
    """Two sources built without a seed produce the same sequence."""
    other = DeterministicSource()
    assert [source.uint64() for _ in range(1000)] == [other.uint64() for _ in range(1000)]


def test_default_seed_is_one(source):
    other = DeterministicSource(DEFAULT_SEED)
    assert DEFAULT_SEED == 1
    assert [source.int63() for _ in range(100)] == [other.int63() for _ in range(100)]


@pytest.mark.parametrize("seed", [0, 1, 42, -1, 2**63 - 1, -(2**63)])
def test_same_seed_same_sequence(seed):
    first = DeterministicSource(seed)
    second = DeterministicSource()
    second.seed(seed)
    assert [first.uint64() for _ in range(200)] == [second.uint64() for _ in range(200)]


def test_different_seeds_differ():
    first = DeterministicSource(1)
    second = DeterministicSource(2)
    assert [first.uint64() for _ in range(10)] != [second.uint64() for _ in range(10)]


def test_seed_is_reduced_to_64_bits():
    first = DeterministicSource(-1)
    second = DeterministicSource(2**64 - 1)
    assert [first.uint64() for _ in range(10)] == [second.uint64() for _ in range(10)]


def test_reseed_replaces_state(source):
    source.seed(99)
    first = [source.uint64() for _ in range(20)]
    for _ in range(5):
        source.int63()
    source.seed(99)
    assert [source.uint64() for _ in range(20)] == first


def test_values_in_range(source):
    for _ in range(10000):
        assert 0 <= source.uint64() < 2**64
        assert 0 <= source.int63() < 2**63


def test_always_available(source):
    source.assert_available()
    assert source.err() is None
