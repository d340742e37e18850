"""
Utility functions for the application.
"""
from typing import Any, Dict
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"message": message}
    if details:
        response["errors"] = details
    return response
