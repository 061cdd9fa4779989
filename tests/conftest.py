import pytest

from classenforcer import reset_config


@pytest.fixture(autouse=True)
def reset_default_config():
    """Every test starts and ends with the default sentinels"""
    reset_config()
    yield
    reset_config()
