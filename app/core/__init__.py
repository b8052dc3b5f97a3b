"""
Core Package - IEOP Scoring Engine
app/core/__init__.py

Core infrastructure: exceptions, logging, dependencies.
Dependencies are imported from app.core.dependencies directly to keep
this package import-cycle free.
"""

from app.core.exceptions import (
    DataSourceUnavailableException,
    FallbackDatasetException,
    IEOPException,
    InvalidReferenceTableException,
)

__all__ = [
    # Exceptions
    "DataSourceUnavailableException",
    "FallbackDatasetException",
    "IEOPException",
    "InvalidReferenceTableException",
]
