"""
Logging configuration and utilities for the cancelling checker.
"""
from .config import configure_logging, get_detection_logger, get_logger, log_flag_decision

__all__ = ["configure_logging", "get_logger", "get_detection_logger", "log_flag_decision"]
