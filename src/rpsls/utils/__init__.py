"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, setup_logger_from_config, get_log_level, configure_logging
from .config_loader import ConfigLoader, DEFAULT_CONFIG
from .error_handler import ErrorHandler, global_error_handler
from .exceptions import (
    GameException,
    InvalidInputException,
    ConfigurationException
)

__all__ = [
    'setup_logger',
    'setup_logger_from_config',
    'get_log_level',
    'configure_logging',
    'ConfigLoader',
    'DEFAULT_CONFIG',
    'ErrorHandler',
    'global_error_handler',
    'GameException',
    'InvalidInputException',
    'ConfigurationException'
]
