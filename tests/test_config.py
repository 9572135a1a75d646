import logging

import pytest

from minihub.config import log_level


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("error", logging.ERROR),
        ("verbose", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_log_level(name, expected):
    assert log_level(name) == expected
