"""
Dependencies - IEOP Scoring Engine
app/core/dependencies.py

FastAPI dependency injection for the scoring engine and the data source.
"""

from functools import lru_cache

from app.config import get_settings
from app.scoring.ieop_calculator import IEOPCalculator
from app.scoring.portfolio_aggregator import PortfolioAggregator
from app.services.project_data_source import ProjectDataSource


@lru_cache()
def get_ieop_calculator() -> IEOPCalculator:
    """Get cached IEOPCalculator instance."""
    return IEOPCalculator()


@lru_cache()
def get_portfolio_aggregator() -> PortfolioAggregator:
    """Get cached PortfolioAggregator instance."""
    return PortfolioAggregator(get_ieop_calculator())


@lru_cache()
def get_project_data_source() -> ProjectDataSource:
    """Get cached ProjectDataSource instance built from Settings."""
    return ProjectDataSource.from_settings(get_settings())
