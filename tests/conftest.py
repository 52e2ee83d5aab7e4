"""Shared fixtures for the runtime-metrics test suite."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers and levels installed by CatalogSettings.setup_logging()."""
    yield
    package_logger = logging.getLogger("runtime_metrics")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
