"""
Resources for the Lenco SDK.
"""
from .base import AsyncBaseResource
from .collections import AsyncCollectionsResource

__all__ = [
    "AsyncBaseResource",
    "AsyncCollectionsResource",
]
