"""Observability – structured logging helpers."""
from fix_commons.observability.logging.factory import JsonLoggerFactory
from fix_commons.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
