"""
Configuration module for PageFlow.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, set_console_level, logger

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'set_console_level',
    'logger',
    # Constants (all exported via *)
]
