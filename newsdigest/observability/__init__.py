"""
Observability module.

Logging configuration shared by the API process and the pipeline workers.
"""

from newsdigest.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
