import pytest

from primecheck.config import clear_config


@pytest.fixture(autouse=True)
def _reset_config():
    clear_config()
    yield
    clear_config()
