"""
Logging Configuration for the LUX query compiler.

Provides centralized logger setup for the compile trace log.
Loggers always write to stderr; when LUX_QUERY_LOG_DIR is set they
also write to compile_trace.log in that directory.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_TRACE_LOGGER_NAME = "lux_query.compile_trace"

# Values set by reconfigure_logging(); they win over the environment
_overrides = {"log_dir": None, "log_level": None}


def _get_log_directory() -> Optional[Path]:
    """Get the log directory path, or None when file logging is off."""
    log_dir = _overrides["log_dir"] or os.getenv("LUX_QUERY_LOG_DIR")
    if not log_dir:
        return None
    return Path(log_dir)


def _get_log_level() -> int:
    """Resolve LUX_QUERY_LOG_LEVEL (name or number) to a logging level."""
    raw = str(_overrides["log_level"] or os.getenv("LUX_QUERY_LOG_LEVEL", "WARNING")).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


def _create_file_handler(log_filename: str) -> Optional[logging.FileHandler]:
    """
    Create a file handler for the specified log file.

    Args:
        log_filename: Name of the log file (e.g., 'compile_trace.log')

    Returns:
        Configured FileHandler, or None if file logging is disabled
    """
    log_dir = _get_log_directory()
    if log_dir is None:
        return None

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / log_filename, mode='a', encoding='utf-8')
    except OSError as e:
        print(f"Cannot open {log_filename} in {log_dir}: {e}", file=sys.stderr)
        return None

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


class FlushingStreamHandler(logging.StreamHandler):
    """StreamHandler that flushes after every emit.

    ::: This is-in-layer Infrastructure-Layer.
    ::: This is a handler.
    ::: This is stateless.
    """
    def emit(self, record):
        super().emit(record)
        self.flush()


def _create_stderr_handler() -> logging.StreamHandler:
    """Create a stderr handler for console output with auto-flush."""
    handler = FlushingStreamHandler(sys.stderr)
    handler.setLevel(_get_log_level())
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def get_compile_trace_logger() -> logging.Logger:
    """
    Get the compile trace logger shared by the registry, compiler and
    template library.

    Output goes to stderr and, if configured, LUX_QUERY_LOG_DIR/compile_trace.log.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(_TRACE_LOGGER_NAME)

    # Only configure once
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        file_handler = _create_file_handler("compile_trace.log")
        if file_handler:
            logger.addHandler(file_handler)

        logger.addHandler(_create_stderr_handler())

    return logger


def reconfigure_logging(
    log_level: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Drop and rebuild the trace handlers.

    Call this after LUX_QUERY_LOG_DIR or LUX_QUERY_LOG_LEVEL change at
    runtime, or pass the values read from lux_query.json.

    Args:
        log_level: Level name or number; overrides LUX_QUERY_LOG_LEVEL
        log_dir: Directory for compile_trace.log; overrides LUX_QUERY_LOG_DIR

    Returns:
        Configured logger instance
    """
    _overrides["log_level"] = log_level
    _overrides["log_dir"] = str(log_dir) if log_dir else None

    logger = logging.getLogger(_TRACE_LOGGER_NAME)
    stale = list(logger.handlers)
    for handler in stale:
        handler.close()
        logger.removeHandler(handler)

    trace_logger = get_compile_trace_logger()

    # Module loggers share the trace handlers; swap them in place
    for candidate in list(logging.Logger.manager.loggerDict.values()):
        if not isinstance(candidate, logging.Logger) or candidate is trace_logger:
            continue
        shared = [h for h in stale if h in candidate.handlers]
        if not shared:
            continue
        for handler in shared:
            candidate.removeHandler(handler)
        for handler in trace_logger.handlers:
            candidate.addHandler(handler)

    return trace_logger


def configure_logger_for_debug_trace(logger_name: str) -> logging.Logger:
    """
    Configure a logger to write through the compile trace handlers.

    Args:
        logger_name: Name of the logger to configure (e.g., __name__)

    Returns:
        Configured logger instance
    """
    trace_logger = get_compile_trace_logger()
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    for handler in trace_logger.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
