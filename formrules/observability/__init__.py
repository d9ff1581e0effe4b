"""
Logging setup for applications embedding formrules.
"""

from .logger import CustomJsonFormatter, get_logger, setup_logger

__all__ = ["CustomJsonFormatter", "setup_logger", "get_logger"]
