# anyparams/core/logging_setup.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

# Custom log level for consumed parameter values
PARAM_LEVEL = 15  # Between DEBUG (10) and INFO (20)

logging.addLevelName(PARAM_LEVEL, "PARAM")

def param(self, message, *args, **kwargs):
    if self.isEnabledFor(PARAM_LEVEL):
        self._log(PARAM_LEVEL, message, args, **kwargs)

logging.Logger.param = param

LOG_LEVEL_STRINGS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'PARAM': PARAM_LEVEL,
    'DEBUG': logging.DEBUG,
    'NOTSET': logging.NOTSET,
}

FORMATTERS = {
    # Console output
    'verbose': logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                datefmt='%Y-%m-%d %H:%M:%S'),

    # Log file, with milliseconds
    'debug': logging.Formatter('%(asctime)s.%(msecs)03d - %(levelname)s - %(name)s - %(message)s',
                              datefmt='%Y-%m-%d %H:%M:%S'),
}

def resolve_log_level(level_str, default=logging.WARNING):
    """Map a level name (case-insensitive) to its numeric value, falling back to default."""
    if level_str is None:
        return default
    return LOG_LEVEL_STRINGS.get(str(level_str).upper(), default)

def setup_logging(config_loader=None, cmd_log_level=None, log_file=None, formatter='verbose'):
    """
    Configures logging for the application.

    Reads the logging level from the configuration ('logging.level') and sets
    up a console logger. Command-line log level override takes precedence.

    Args:
        config_loader: Optional config loader instance
        cmd_log_level: Optional command-line log level override
        log_file: Optional path to a log file; enables a rotating file handler
        formatter: Name of the console formatter in FORMATTERS
    """
    if cmd_log_level is not None:
        log_level_str = cmd_log_level.upper()
    elif config_loader is not None:
        log_level_str = str(config_loader.get('logging.level', 'WARNING')).upper()
    else:
        log_level_str = 'WARNING'

    log_level = resolve_log_level(log_level_str)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers if any
    if root_logger.hasHandlers():
        for handler in root_logger.handlers[:]:  # Copy list to avoid modification during iteration
            root_logger.removeHandler(handler)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(log_level)
    stdout_handler.setFormatter(FORMATTERS.get(formatter, FORMATTERS['verbose']))
    root_logger.addHandler(stdout_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)
        # Max 10MB per file, keep 3 backup files
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(FORMATTERS['debug'])
        root_logger.addHandler(file_handler)

    setup_logger = logging.getLogger(__name__)
    setup_logger.debug(f"Logging configured (level: {log_level_str}, file: {log_file})")
    return log_level
