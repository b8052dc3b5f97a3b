"""
Services module for the IEOP Scoring Engine.
"""

from app.services.project_data_source import (
    DATASET_METADATA,
    ProjectDataSource,
    ProjectLoadResult,
)

__all__ = [
    "DATASET_METADATA",
    "ProjectDataSource",
    "ProjectLoadResult",
]
