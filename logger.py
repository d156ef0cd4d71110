"""Logging configuration module for the token top-up processor."""
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
import config


def setup_logging(logs_folder=None):
    """Set up logging with appropriate handlers and formatters.

    Calling it again reuses the handlers attached by the first call.
    """
    logs_folder = logs_folder or config.LOGS_FOLDER
    os.makedirs(logs_folder, exist_ok=True)

    # Log file paths
    app_log_path = os.path.join(logs_folder, 'app.log')
    error_log_path = os.path.join(logs_folder, 'error.log')
    debug_log_path = os.path.join(logs_folder, 'debug.log')

    # Log formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s - %(message)s'
    )
    simple_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    console_formatter = logging.Formatter('%(message)s')

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)

    # Console handler prints bare messages to stdout
    if not _has_handler(root_logger, logging.StreamHandler, 'console'):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name('console')
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)

    # 1. App Logger (INFO level)
    app_logger = logging.getLogger('app')
    app_logger.setLevel(logging.INFO)
    if not _has_handler(app_logger, RotatingFileHandler, 'app'):
        app_handler = RotatingFileHandler(
            app_log_path, maxBytes=5*1024*1024, backupCount=5
        )
        app_handler.set_name('app')
        app_handler.setFormatter(simple_formatter)
        app_handler.setLevel(logging.INFO)
        app_logger.addHandler(app_handler)

    # 2. Error Logger (ERROR level)
    error_logger = logging.getLogger('error')
    error_logger.setLevel(logging.ERROR)
    if not _has_handler(error_logger, RotatingFileHandler, 'error'):
        error_handler = RotatingFileHandler(
            error_log_path, maxBytes=2*1024*1024, backupCount=10
        )
        error_handler.set_name('error')
        error_handler.setFormatter(detailed_formatter)
        error_handler.setLevel(logging.ERROR)
        error_logger.addHandler(error_handler)

    # 3. Debug Logger (DEBUG level)
    debug_logger = logging.getLogger('debug')
    debug_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    if not _has_handler(debug_logger, RotatingFileHandler, 'debug'):
        debug_handler = RotatingFileHandler(
            debug_log_path, maxBytes=10*1024*1024, backupCount=3
        )
        debug_handler.set_name('debug')
        debug_handler.setFormatter(detailed_formatter)
        debug_handler.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
        debug_logger.addHandler(debug_handler)

    return get_loggers()


def _has_handler(logger, handler_type, name):
    return any(
        isinstance(handler, handler_type) and handler.get_name() == name
        for handler in logger.handlers
    )


def get_loggers():
    """Get configured logger instances."""
    return {
        'app': logging.getLogger('app'),
        'error': logging.getLogger('error'),
        'debug': logging.getLogger('debug')
    }
