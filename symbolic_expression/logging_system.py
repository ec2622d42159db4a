"""
Logging System for Symbolic Expressions

Centralized logger with verbosity levels. Tree operations are pure and fast,
so they only report rewrites and policy decisions at the debug level; library
users raise the level when they want to trace a simplification or derivative.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the expression engine"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and critical info
    MODERATE = 2    # Notable decisions (policies, configuration)
    DETAILED = 3    # Per-operation summaries
    VERBOSE = 4     # Every rewrite and rule application


class ExpressionLogger:
    """
    Centralized logger for expression operations with context-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('symbolic_expression')
        self.logger.setLevel(logging.DEBUG)
        # Replace only handlers installed by an earlier ExpressionLogger
        for handler in [h for h in self.logger.handlers if getattr(h, '_expression_logger', False)]:
            self.logger.removeHandler(handler)
            handler.close()
        # Defer to the host application when it has configured logging
        host_configured = logging.getLogger().hasHandlers()
        self.logger.propagate = True

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT and not host_configured:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            console_handler._expression_logger = True
            self.logger.addHandler(console_handler)
            self.logger.propagate = False

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_expression_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            file_handler._expression_logger = True
            self.logger.addHandler(file_handler)

    def should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self.should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self.should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def operation(self, name: str, message: str):
        """Per-operation summary (differentiate, simplify, evaluate_batch)"""
        if self.should_log(LogLevel.DETAILED):
            self.logger.info(f"{name}: {message}")

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self.should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[ExpressionLogger] = None


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_operation(name: str, message: str):
    """Log an operation summary"""
    get_logger().operation(name, message)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
