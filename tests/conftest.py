import pytest

from singular.testing import isolated


@pytest.fixture
def container():
    with isolated() as container:
        yield container
