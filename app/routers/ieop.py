"""
routers/ieop.py - IEOP Endpoints

Endpoints:
  GET  /api/v1/ieop/projects      - Scored projects from the data source, best first
  GET  /api/v1/ieop/summary       - Portfolio statistics for the data source
  POST /api/v1/ieop/score         - Score caller-supplied project records
  GET  /api/v1/ieop/methodology   - Weights, bands and reference costs
  GET  /api/v1/ieop/dataset       - Metadata of the source dataset
  GET  /api/v1/ieop/dataset/{id}  - Catalog entry of one dataset (null when unavailable)

Register in main.py:
    from app.routers.ieop import router as ieop_router
    app.include_router(ieop_router, prefix=settings.API_V1_PREFIX)
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import date
import logging

from app.core.dependencies import get_portfolio_aggregator, get_project_data_source
from app.models.enumerations import Classification
from app.models.project import ProjectRecord
from app.scoring.cost_calculator import RATIO_FULL_SCORE, RATIO_ZERO_SCORE
from app.scoring.execution_calculator import MISALIGNMENT_WEIGHT, OVERRUN_WEIGHT
from app.scoring.ieop_calculator import CLASSIFICATION_BANDS, COMPONENT_WEIGHTS, ScoredResult
from app.scoring.portfolio_aggregator import PortfolioAggregator, PortfolioStatistics
from app.scoring.recurrence_calculator import (
    AMENDMENT_PENALTY,
    RECURRENCE_PENALTY,
    STOPPAGE_PENALTY,
)
from app.scoring.reference_costs import DEFAULT_REFERENCE_COSTS, REFERENCE_COST_SOURCES
from app.services.project_data_source import DATASET_METADATA, ProjectDataSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ieop", tags=["IEOP"])

# Portuguese labels shown on the public dashboard
CLASSIFICATION_LABELS_PT = {
    Classification.EXCELLENT: "Ótimo",
    Classification.GOOD: "Bom",
    Classification.REGULAR: "Regular",
    Classification.POOR: "Ruim",
    Classification.CRITICAL: "Crítico",
}


# =====================================================================
# Request / Response Models
# =====================================================================

class ComponentScoresOutput(BaseModel):
    cost: int
    schedule: int
    recurrence: int
    execution: int


class RawMetricsOutput(BaseModel):
    cost_per_m2: int
    delay_percent: int
    budget_deviation: float
    has_recurrence: bool


class ScoredProjectOutput(BaseModel):
    project_id: str
    project_name: str
    municipality: str
    work_type: str
    status: str
    index: int
    classification: str
    components: ComponentScoresOutput
    metrics: RawMetricsOutput


class StatisticsOutput(BaseModel):
    total: int
    mean_index: int
    mean_cost_per_m2: int
    mean_delay_percent: int
    recurrence_rate: int
    by_classification: Dict[str, int]
    by_status: Dict[str, int]


class ProjectsResponse(BaseModel):
    source: str
    as_of: date
    total: int
    results: List[ScoredProjectOutput]


class SummaryResponse(BaseModel):
    source: str
    as_of: date
    statistics: StatisticsOutput


class ScoreRequest(BaseModel):
    projects: List[ProjectRecord] = Field(..., description="Project records to score")
    as_of: Optional[date] = Field(
        default=None,
        description="Evaluation date for ongoing projects (defaults to today)"
    )


class ScoreResponse(BaseModel):
    as_of: date
    results: List[ScoredProjectOutput]
    statistics: StatisticsOutput


# =====================================================================
# Helpers
# =====================================================================

def _to_output(result: ScoredResult) -> ScoredProjectOutput:
    return ScoredProjectOutput(
        project_id=result.project_id,
        project_name=result.project_name,
        municipality=result.municipality,
        work_type=result.work_type.value,
        status=result.status.value,
        index=result.index,
        classification=result.classification.value,
        components=ComponentScoresOutput(
            cost=result.components.cost,
            schedule=result.components.schedule,
            recurrence=result.components.recurrence,
            execution=result.components.execution,
        ),
        metrics=RawMetricsOutput(
            cost_per_m2=result.metrics.cost_per_m2,
            delay_percent=result.metrics.delay_percent,
            budget_deviation=float(result.metrics.budget_deviation),
            has_recurrence=result.metrics.has_recurrence,
        ),
    )


def _stats_to_output(stats: PortfolioStatistics) -> StatisticsOutput:
    return StatisticsOutput(
        total=stats.total,
        mean_index=stats.mean_index,
        mean_cost_per_m2=stats.mean_cost_per_m2,
        mean_delay_percent=stats.mean_delay_percent,
        recurrence_rate=stats.recurrence_rate,
        by_classification={k.value: v for k, v in stats.by_classification.items()},
        by_status={k.value: v for k, v in stats.by_status.items()},
    )


def _resolve_as_of(aggregator: PortfolioAggregator, as_of: Optional[date]) -> date:
    return as_of if as_of is not None else aggregator.calculator.clock()


# =====================================================================
# Endpoints
# =====================================================================

@router.get("/projects", response_model=ProjectsResponse)
def list_scored_projects(
    as_of: Optional[date] = Query(default=None, description="Evaluation date (YYYY-MM-DD)"),
    aggregator: PortfolioAggregator = Depends(get_portfolio_aggregator),
    data_source: ProjectDataSource = Depends(get_project_data_source),
) -> ProjectsResponse:
    loaded = data_source.load_projects()
    as_of = _resolve_as_of(aggregator, as_of)
    results = aggregator.score_all(loaded.projects, as_of=as_of)

    logger.info(f"Scored {len(results)} projects from {loaded.source} source (as_of={as_of})")
    return ProjectsResponse(
        source=loaded.source,
        as_of=as_of,
        total=len(results),
        results=[_to_output(r) for r in results],
    )


@router.get("/summary", response_model=SummaryResponse)
def portfolio_summary(
    as_of: Optional[date] = Query(default=None, description="Evaluation date (YYYY-MM-DD)"),
    aggregator: PortfolioAggregator = Depends(get_portfolio_aggregator),
    data_source: ProjectDataSource = Depends(get_project_data_source),
) -> SummaryResponse:
    loaded = data_source.load_projects()
    as_of = _resolve_as_of(aggregator, as_of)
    stats = aggregator.summarize(aggregator.score_all(loaded.projects, as_of=as_of))

    return SummaryResponse(source=loaded.source, as_of=as_of, statistics=_stats_to_output(stats))


@router.post("/score", response_model=ScoreResponse)
def score_projects(
    request: ScoreRequest,
    aggregator: PortfolioAggregator = Depends(get_portfolio_aggregator),
) -> ScoreResponse:
    as_of = _resolve_as_of(aggregator, request.as_of)
    results = aggregator.score_all(request.projects, as_of=as_of)
    stats = aggregator.summarize(results)

    return ScoreResponse(
        as_of=as_of,
        results=[_to_output(r) for r in results],
        statistics=_stats_to_output(stats),
    )


@router.get("/methodology")
def methodology() -> Dict[str, Any]:
    """Static description of how the index is computed."""
    return {
        "formula": "IEOP = C × 0.30 + P × 0.30 + R × 0.15 + E × 0.25",
        "weights": {name: float(w) for name, w in COMPONENT_WEIGHTS.items()},
        "components": {
            "cost": {
                "description": "Actual cost per m² against the SINAPI/CUB reference for the work type",
                "ratio_full_score": float(RATIO_FULL_SCORE),
                "ratio_zero_score": float(RATIO_ZERO_SCORE),
            },
            "schedule": {
                "description": "Delay = (actual days − planned days) / planned days",
                "delay_full_score_pct": 0,
                "delay_zero_score_pct": 100,
            },
            "recurrence": {
                "description": "Base 100, minus penalties for recurrence, stoppages and amendments",
                "recurrence_penalty": int(RECURRENCE_PENALTY),
                "stoppage_penalty": int(STOPPAGE_PENALTY),
                "amendment_penalty": int(AMENDMENT_PENALTY),
            },
            "execution": {
                "description": "Physical vs financial progress alignment and budget overrun",
                "misalignment_weight": float(MISALIGNMENT_WEIGHT),
                "overrun_weight": float(OVERRUN_WEIGHT),
            },
        },
        "classification_bands": [
            {
                "min_index": lower,
                "classification": tier.value,
                "label_pt": CLASSIFICATION_LABELS_PT[tier],
            }
            for lower, tier in CLASSIFICATION_BANDS
        ],
        "reference_costs": [
            {
                "work_type": work_type.value,
                "cost_per_m2": float(cost),
                "source": REFERENCE_COST_SOURCES[work_type],
            }
            for work_type, cost in DEFAULT_REFERENCE_COSTS.items()
        ],
    }


@router.get("/dataset")
def dataset_metadata() -> Dict[str, Any]:
    return DATASET_METADATA


@router.get("/dataset/{dataset_id}")
def dataset_detail(
    dataset_id: str,
    data_source: ProjectDataSource = Depends(get_project_data_source),
) -> Dict[str, Any]:
    """Catalog entry of one dataset; `detail` is null when the catalog is unreachable."""
    detail = data_source.fetch_dataset_detail(dataset_id)
    return {"dataset_id": dataset_id, "available": detail is not None, "detail": detail}
