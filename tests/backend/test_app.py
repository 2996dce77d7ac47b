import logging

import pytest

from optica.backend.app import configure_logging, log_level
from optica.common.settings import Settings


@pytest.mark.parametrize(
    "name, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("BASIC_FORMAT", logging.INFO),
        ("root", logging.INFO),
        ("VERBOSE", logging.INFO),
    ],
)
def test_log_level_only_accepts_level_names(name, expected):
    assert log_level(name) == expected


def test_configure_logging_ignores_non_level_attributes():
    configure_logging(Settings(log_level="BASIC_FORMAT", log_json=False))
    assert logging.getLogger("urllib3").level == logging.WARNING
