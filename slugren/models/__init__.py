"""
slugren Pydantic Models
"""

from .entry import Entry
from .settings import RenameSettings

__all__ = [
    "Entry",
    "RenameSettings",
]
