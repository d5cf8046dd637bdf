import os

import pytest

from tinydatalog.engine.config import config

TEST_DATA = os.path.join(os.path.dirname(__file__), "..", "test_data")


@pytest.fixture(autouse=True)
def reset_config():
    yield
    config.reset()


@pytest.fixture
def star_wars_path():
    return os.path.join(TEST_DATA, "star_wars.datalog")
