from dataclasses import dataclass

import pytest

from singular.instance_cache import InstanceCache


class Service:
    pass


def test_stored_instance_is_returned():
    cache = InstanceCache()
    instance = Service()

    cache.store(Service, instance)

    assert Service in cache
    assert cache[Service] is instance
    assert cache.cached_constructors() == [Service]


def test_empty_cache_contains_nothing():
    cache = InstanceCache()

    assert Service not in cache
    assert len(cache) == 0


@dataclass(frozen=True)
class Factory:
    label: str

    def __call__(self):
        return object()


def test_equal_but_distinct_constructors_are_cached_separately():
    cache = InstanceCache()
    first, second = Factory("x"), Factory("x")

    cache.store(first, "first")

    assert first == second
    assert second not in cache

    cache.store(second, "second")

    assert cache[first] == "first"
    assert cache[second] == "second"
    assert cache.cached_constructors() == [first, second]


def test_missing_instance_raises_key_error():
    with pytest.raises(KeyError):
        InstanceCache()[Service]
