# ABOUTME: Loguru configuration for the property resolution library
# ABOUTME: Provides optional console and file logging setup for host applications

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from propertyutil.config.settings import get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_backtrace: bool = True
    console_diagnose: bool = False

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/propertyutil.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} | {message}"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"

    # Performance settings
    enqueue: bool = False
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Logging settings that can be configured via environment variables."""

    log_file_enabled: bool = Field(default=False, validation_alias="PROPERTYUTIL_LOG_FILE_ENABLED")
    log_file_path: str = Field(default="logs/propertyutil.log", validation_alias="PROPERTYUTIL_LOG_FILE_PATH")
    log_console_colorize: bool = Field(default=True, validation_alias="PROPERTYUTIL_LOG_CONSOLE_COLORIZE")


def _default_name(record) -> None:
    record["extra"].setdefault("name", record["name"])


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Without a config, the level comes from ``PropertyUtilSettings.LOG_LEVEL``
    and the handler options from LoggingSettings.

    The library never calls this itself; host applications call it once at
    startup if they want the library's formats.

    Args:
        config: Logger configuration. If None, loads from environment variables.
    """
    if config is None:
        settings = LoggingSettings()
        level = get_settings().LOG_LEVEL
        config = LoggerConfig(
            console_level=level,
            file_enabled=settings.log_file_enabled,
            file_path=settings.log_file_path,
            file_level=level,
            console_colorize=settings.log_console_colorize,
        )

    # Remove default handler
    logger.remove()
    logger.configure(patcher=_default_name)

    # Add console handler
    if config.console_enabled:
        logger.add(
            sys.stderr,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    # Add file handler
    if config.file_enabled:
        # Ensure log directory exists
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.configure(patcher=_default_name)
    logger.add(
        sys.stderr,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{extra[name]}</cyan> | <level>{message}</level>",
        colorize=False,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = LoggerConfig(
        console_level="TRACE",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
        file_enabled=True,
        file_level="DEBUG",
    )
    setup_logging(config)
