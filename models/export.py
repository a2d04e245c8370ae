"""
Export schemas.
"""

from enum import Enum


class ExportFormat(str, Enum):
    """Supported export payload formats."""
    JSON = "json"
    CSV = "csv"
