import pytest

from codedigest.core.config import config


@pytest.fixture(autouse=True)
def reset_configuration():
    yield
    config.reset()
