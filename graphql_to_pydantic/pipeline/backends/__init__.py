"""
Code generation backends.
"""

from __future__ import annotations

from .imports import ImportFeature, ImportTracker
from .pydantic_backend import PydanticBackend

__all__ = [
    "ImportFeature",
    "ImportTracker",
    "PydanticBackend",
]
