# ABOUTME: pytest configuration for property-util tests
# ABOUTME: Configures timeouts, isolates process-wide state and captures loguru output

import pytest
from loguru import logger

from propertyutil.components.holder import get_property_util_holder
from propertyutil.config import PropertyUtilSettings, get_settings
from propertyutil.implementations.system import system_properties


def pytest_configure(config):
    """Configure pytest for property-util tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "benchmark: Benchmark tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Check for existing timeout marker - if it exists, respect it
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "benchmark"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def isolate_process_state(monkeypatch):
    """Restore system properties, settings and the global holder after each test."""
    for name in (
        "PROPERTYUTIL_CACHE_CAPACITY",
        "PROPERTYUTIL_USE_CACHE",
        "PROPERTYUTIL_FILE_ENCODING",
        "PROPERTYUTIL_LOCALE",
        "PROPERTYUTIL_DEFAULT_BUNDLE_NAME",
        "PROPERTYUTIL_DEFAULT_SUBDIRECTORY",
        "PROPERTYUTIL_LOG_LEVEL",
        "PROPERTYUTIL_LOG_FILE_ENABLED",
        "PROPERTYUTIL_LOG_FILE_PATH",
        "PROPERTYUTIL_LOG_CONSOLE_COLORIZE",
    ):
        monkeypatch.delenv(name, raising=False)

    saved = system_properties.snapshot()
    get_settings.cache_clear()
    get_property_util_holder.cache_clear()
    yield
    system_properties.clear()
    system_properties.update(saved)
    get_settings.cache_clear()
    get_property_util_holder.cache_clear()


@pytest.fixture
def settings():
    """Settings with locale variants disabled, independent of the host locale."""
    return PropertyUtilSettings(_env_file=None, LOCALE="C")


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during the test as (level, message) pairs."""
    records = []
    handler_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="TRACE",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)
