"""Interfaces the application codes against.

DataProvider is the resource-agnostic CRUD surface over plain Records;
Repository[T] is the typed, one-resource view layered on top of it.
RestDataProvider and RestRepository in src/infrastructure/rest/ are the
only implementations.
"""

from .base import Repository
from .data_provider import DataProvider

__all__ = [
    "Repository",
    "DataProvider",
]
