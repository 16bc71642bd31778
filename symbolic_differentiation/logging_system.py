"""
Logging System for Symbolic Differentiation

Centralized logger with verbosity levels. The engine only emits debug
messages, so library use stays quiet unless a caller raises the level.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum


class LogLevel(Enum):
    """Enumeration of logging levels for symbolic differentiation"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and critical info
    MODERATE = 2    # Milestones
    DETAILED = 3    # Per-call summaries
    VERBOSE = 4     # All information including debug details


class DifferentiationLogger:
    """
    Centralized logger for the differentiation engine
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        if log_to_file and log_file_path is None:
            log_file_path = "symbolic_differentiation.log"
        self.log_file_path = log_file_path

        self.logger = logging.getLogger('symbolic_differentiation')
        self.logger.setLevel(logging.DEBUG)
        # Handlers left by a previous configuration
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        self._console_handler: Optional[logging.Handler] = None

        # Console handler
        if self.log_level != LogLevel.SILENT:
            self._add_console_handler()

        # File handler (optional)
        if log_to_file:
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(self.formatter)
            self.logger.addHandler(file_handler)

    def _add_console_handler(self):
        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setFormatter(self.formatter)
        self.logger.addHandler(self._console_handler)

    def set_level(self, level: LogLevel):
        """Change verbosity in place; file output is left untouched"""
        self.log_level = level
        if level != LogLevel.SILENT and self._console_handler is None:
            self._add_console_handler()

    def _should_log(self, required_level: LogLevel, log_level: Optional[LogLevel] = None) -> bool:
        """Check if message should be logged based on current (or a per-call) log level"""
        effective = log_level if log_level is not None else self.log_level
        return effective.value >= required_level.value

    def is_enabled(self, required_level: LogLevel, log_level: Optional[LogLevel] = None) -> bool:
        return self._should_log(required_level, log_level)

    def critical(self, message: str):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def milestone(self, message: str):
        if self._should_log(LogLevel.MODERATE):
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str, log_level: Optional[LogLevel] = None):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE, log_level):
            self.logger.debug(f"DEBUG: {message}")

    def derivative_summary(self, results: Dict[str, Any], log_level: Optional[LogLevel] = None):
        """Log a per-call summary (input/output sizes, variable)"""
        if not self._should_log(LogLevel.DETAILED, log_level):
            return

        self.logger.info("DERIVATIVE: " + ", ".join(
            f"{key}={value}" for key, value in results.items()))


# Global logger instance
_global_logger: Optional[DifferentiationLogger] = None


def get_logger() -> DifferentiationLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = DifferentiationLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = DifferentiationLogger(log_level=level)
    else:
        _global_logger.set_level(level)


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> DifferentiationLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = DifferentiationLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
