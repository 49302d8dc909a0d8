"""Observability – structured logging helpers."""
from es_commons.observability.logging.factory import JsonLoggerFactory
from es_commons.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
