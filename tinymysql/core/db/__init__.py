"""
MySQL connection layer over PyMySQL: options, connect, execute, health check.
"""

from .connect import ConnectionOptions, connect, error_details, execute
from .health import health_check

__all__ = [
    "ConnectionOptions",
    "connect",
    "execute",
    "error_details",
    "health_check",
]
