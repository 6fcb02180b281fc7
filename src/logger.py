"""
Simple Structured Logging Utility
JSON logging on stderr, stdout carries only the screenshot result
"""

import logging
import time
import sys
from contextlib import contextmanager
from typing import Optional

import structlog


class ScreenshotLogger:
    """Simple structured logger for HTML screenshots"""

    def __init__(self, name: str = "html-screenshot", level: str = "INFO"):
        self.name = name
        log_level = getattr(logging, level.upper())

        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            # resolve sys.stderr per logger so redirected streams are honoured
            logger_factory=lambda *args: structlog.WriteLogger(file=sys.stderr),
            context_class=dict,
            cache_logger_on_first_use=False,
        )

        self.logger = structlog.get_logger(name)

    def bind_context(self, **kwargs):
        """Bind context variables for structured logging"""
        self.logger = self.logger.bind(**kwargs)
        return self

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    @contextmanager
    def timer(self, stage: str):
        """Simple timer context manager"""
        start_time = time.time()

        try:
            self.logger.debug("stage_started", stage=stage)
            yield
            self.logger.debug("stage_completed", stage=stage)
        except Exception as e:
            self.logger.error("stage_failed", stage=stage, error=str(e))
            raise
        finally:
            duration = time.time() - start_time
            self.logger.info(
                "stage_duration", stage=stage, duration_seconds=round(duration, 3)
            )


# Global logger instance
_global_logger: Optional[ScreenshotLogger] = None


def get_logger(name: str = "html-screenshot", **kwargs) -> ScreenshotLogger:
    """Get or create global logger instance"""
    global _global_logger

    if _global_logger is None:
        _global_logger = ScreenshotLogger(name=name, **kwargs)

    return _global_logger


def setup_logging(level: str = "INFO") -> ScreenshotLogger:
    """Setup global logging configuration"""
    global _global_logger

    _global_logger = ScreenshotLogger(level=level)
    return _global_logger
