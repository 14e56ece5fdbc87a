# type: ignore
import pytest

from bfvm.common.settings import Settings


@pytest.fixture
def with_chars():
    yield Settings().update(character_output=True)


@pytest.fixture
def with_numbers():
    yield Settings()
