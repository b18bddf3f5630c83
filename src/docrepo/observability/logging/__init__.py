"""Observability – structlog configuration and logger helper."""
from docrepo.observability.logging.factory import JsonLoggerFactory
from docrepo.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
