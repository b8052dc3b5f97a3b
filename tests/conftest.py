# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and data for the scoring engine and API

BASELINE PROJECT (make_record with no overrides):
- 1000 m² Edificação (reference R$ 3500/m²), R$ 3M contracted and paid → R$ 3000/m²
- Planned and actual duration both 100 days (2024-01-01 → 2024-04-10)
- 50% physical / 50% financial, no amendments, stoppages or recurrence
- Scores: cost 95, schedule 100, recurrence 100, execution 100 → IEOP 99 (Excellent)
"""

import pytest
import httpx
from datetime import date, timedelta
from fastapi.testclient import TestClient

from app.config import DEFAULT_FALLBACK_DATASET
from app.core.dependencies import get_project_data_source
from app.main import app
from app.models.enumerations import ProjectStatus, WorkType
from app.models.project import ProjectRecord
from app.services.project_data_source import ProjectDataSource


BASE_START = date(2024, 1, 1)
BASE_END = BASE_START + timedelta(days=100)
EVALUATION_DATE = date(2025, 1, 1)


def build_record(**overrides) -> ProjectRecord:
    """Build a ProjectRecord from the baseline, replacing any given fields."""
    fields = dict(
        id="OBRA-001",
        name="Escola Municipal Baseline",
        municipality="Niterói",
        work_type=WorkType.BUILDING,
        agency="SEEDUC-RJ",
        status=ProjectStatus.COMPLETED,
        built_area_m2=1000,
        contracted_amount=3_000_000,
        paid_amount=3_000_000,
        planned_start=BASE_START,
        planned_end=BASE_END,
        actual_start=BASE_START,
        actual_end=BASE_END,
        physical_progress_pct=50,
        financial_progress_pct=50,
        amendments=0,
        stoppages=0,
        recurrence=False,
    )
    fields.update(overrides)
    return ProjectRecord(**fields)


@pytest.fixture
def make_record():
    """Factory fixture: make_record(paid_amount=..., ...) → ProjectRecord."""
    return build_record


@pytest.fixture
def baseline_record():
    return build_record()


@pytest.fixture
def evaluation_date():
    return EVALUATION_DATE


@pytest.fixture
def catalog_payload():
    """One project in the catalog's own field names."""
    return {
        "id": "RJ-TEST-001",
        "nome": "Praça Pública do Centro",
        "municipio": "Maricá",
        "tipo": "Equipamento Público",
        "orgaoResponsavel": "Prefeitura de Maricá",
        "status": "Concluída",
        "areaConstruidaM2": 1000,
        "valorContratadoR$": 2400000,
        "valorPagoR$": 2400000,
        "dataInicioPrevista": "2023-01-01",
        "dataFimPrevista": "2023-04-11",
        "dataInicioReal": "2023-01-01",
        "dataFimReal": "2023-04-11",
        "percentualExecutado": 100,
        "percentualFinanceiro": 100,
        "aditivos": 0,
        "paralisacoes": 0,
        "reincidencia": False,
    }


def _unavailable_transport() -> httpx.MockTransport:
    return httpx.MockTransport(lambda request: httpx.Response(503))


@pytest.fixture
def offline_data_source():
    """Data source whose catalog always answers 503, forcing the fallback."""
    return ProjectDataSource(
        url="https://catalog.test/conjuntos-dados",
        dataset_name="obras rio de janeiro",
        timeout_seconds=8.0,
        fallback_path=DEFAULT_FALLBACK_DATASET,
        transport=_unavailable_transport(),
    )


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """TestClient with the data source pinned to the bundled dataset."""
    offline = ProjectDataSource(
        url="https://catalog.test/conjuntos-dados",
        dataset_name="obras rio de janeiro",
        timeout_seconds=8.0,
        fallback_path=DEFAULT_FALLBACK_DATASET,
        transport=_unavailable_transport(),
    )
    app.dependency_overrides[get_project_data_source] = lambda: offline
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_project_data_source, None)
