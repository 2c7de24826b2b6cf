# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and logging utilities for the library

# Main settings aggregator and convenience imports
from propertyutil.config.settings import PropertyUtilSettings, get_settings
from propertyutil.config.resolver import ResolverSettings
from propertyutil.config.logging import (
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_development,
)

__all__ = [
    "PropertyUtilSettings",
    "ResolverSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_development",
]
