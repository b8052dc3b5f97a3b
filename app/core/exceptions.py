"""
Custom Exceptions - IEOP Scoring Engine
app/core/exceptions.py

Degraded arithmetic (zero area, zero planned duration) and empty portfolios
are handled numerically by the engine and never raise. The exceptions below
cover configuration and data acquisition only.
"""

from typing import List, Optional


class IEOPException(Exception):
    """Base exception for the IEOP service."""

    pass


class InvalidReferenceTableException(IEOPException):
    """Reference cost table is incomplete or has non-positive costs."""

    def __init__(
        self,
        missing: Optional[List[str]] = None,
        invalid: Optional[List[str]] = None,
    ):
        self.missing = missing or []
        self.invalid = invalid or []
        parts = []
        if self.missing:
            parts.append(f"missing work types: {', '.join(self.missing)}")
        if self.invalid:
            parts.append(f"non-positive costs: {', '.join(self.invalid)}")
        super().__init__("Invalid reference cost table (" + "; ".join(parts) + ")")


class DataSourceUnavailableException(IEOPException):
    """Remote project catalog could not deliver a usable record list."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Data source {source} unavailable: {reason}")


class FallbackDatasetException(IEOPException):
    """Bundled fallback dataset is missing or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Fallback dataset {path} could not be loaded: {reason}")
