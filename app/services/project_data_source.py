"""
Project Data Source - IEOP Scoring Engine
app/services/project_data_source.py

Supplies the list of ProjectRecord the scoring engine runs on.

The open-data catalog (dados.gov.br) is tried first. It usually requires
gov.br authentication, so any failure (timeout, transport error, non-2xx,
bad JSON, schema violation, empty list) degrades silently to the dataset
bundled with the service. Callers always receive a complete list.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from app.config import DADOS_GOV_API_BASE, Settings
from app.core.exceptions import DataSourceUnavailableException, FallbackDatasetException
from app.models.project import ProjectRecord

logger = structlog.get_logger(__name__)

SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"

# Keys under which the catalog may wrap the record list
_ENVELOPE_KEYS = ("obras", "projects", "conjuntoDados")

_records_adapter = TypeAdapter(List[ProjectRecord])


DATASET_METADATA = {
    "id": "painel-obras-rj-2024",
    "title": "Obras Públicas do Estado do Rio de Janeiro – Painel de Eficiência",
    "description": (
        "Dataset tratado com informações de obras públicas contratadas no estado "
        "do Rio de Janeiro, incluindo custos, prazos, status e indicadores de eficiência."
    ),
    "organization": "Governo do Estado do Rio de Janeiro / Dados Abertos",
    "source": "Portal de Dados Abertos (dados.gov.br) – API REST v1.0",
    "api_base": DADOS_GOV_API_BASE,
    "endpoints": {
        "list": f"{DADOS_GOV_API_BASE}/conjuntos-dados?isPrivado=false&pagina=1&nomeConjuntoDados=obras",
        "detail": f"{DADOS_GOV_API_BASE}/conjuntos-dados/{{id}}",
        "organizations": f"{DADOS_GOV_API_BASE}/organizacao",
    },
    "last_updated": "2025-12-15",
    "format": "JSON",
    "license": "Decreto nº 8.777/2016 – Política de Dados Abertos",
}


@dataclass(frozen=True)
class ProjectLoadResult:
    """Projects plus where they came from ("remote" or "fallback")."""
    projects: List[ProjectRecord]
    source: str


def _unwrap(payload: Any) -> Any:
    if isinstance(payload, dict):
        for key in _ENVELOPE_KEYS:
            if key in payload:
                return payload[key]
    return payload


class ProjectDataSource:
    """Remote catalog with a local fallback dataset."""

    def __init__(
        self,
        url: str,
        dataset_name: str,
        timeout_seconds: float,
        fallback_path: Path,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url
        self.dataset_name = dataset_name
        self.timeout_seconds = timeout_seconds
        self.fallback_path = Path(fallback_path)
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProjectDataSource":
        return cls(
            url=settings.DATA_SOURCE_URL,
            dataset_name=settings.DATA_SOURCE_DATASET,
            timeout_seconds=settings.DATA_SOURCE_TIMEOUT_SECONDS,
            fallback_path=settings.FALLBACK_DATASET_PATH,
        )

    def fetch_remote(self) -> List[ProjectRecord]:
        """
        Fetch and validate project records from the catalog.

        Raises:
            DataSourceUnavailableException: on any failure to obtain a
                non-empty, schema-valid record list.
        """
        params = {
            "isPrivado": "false",
            "pagina": 1,
            "nomeConjuntoDados": self.dataset_name,
        }
        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = client.get(
                    self.url,
                    params=params,
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            raise DataSourceUnavailableException(self.url, f"timeout after {self.timeout_seconds}s") from e
        except httpx.HTTPStatusError as e:
            raise DataSourceUnavailableException(self.url, f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DataSourceUnavailableException(self.url, f"transport error: {e}") from e
        except ValueError as e:
            raise DataSourceUnavailableException(self.url, "response is not valid JSON") from e

        records = _unwrap(payload)
        if not isinstance(records, list) or not records:
            raise DataSourceUnavailableException(self.url, "no project records in response")

        try:
            return _records_adapter.validate_python(records)
        except ValidationError as e:
            raise DataSourceUnavailableException(
                self.url, f"{e.error_count()} schema violations in project records"
            ) from e

    def fetch_dataset_detail(self, dataset_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the catalog entry of one dataset.

        Returns None when the catalog cannot provide it; the detail view
        is informational and never blocks scoring.
        """
        detail_url = f"{self.url.rstrip('/')}/{dataset_id}"
        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = client.get(detail_url, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("dataset_detail_unavailable", url=detail_url, reason=str(e))
            return None

        if not isinstance(payload, dict):
            logger.warning("dataset_detail_unavailable", url=detail_url, reason="not a JSON object")
            return None
        return payload

    def load_fallback(self) -> List[ProjectRecord]:
        """
        Load the bundled dataset.

        Raises:
            FallbackDatasetException: if the file is missing or invalid.
                This is a packaging error and is not swallowed.
        """
        try:
            with open(self.fallback_path, encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            raise FallbackDatasetException(str(self.fallback_path), str(e)) from e
        except json.JSONDecodeError as e:
            raise FallbackDatasetException(str(self.fallback_path), f"invalid JSON: {e}") from e

        try:
            return _records_adapter.validate_python(_unwrap(payload))
        except ValidationError as e:
            raise FallbackDatasetException(
                str(self.fallback_path), f"{e.error_count()} schema violations"
            ) from e

    def load_projects(self) -> ProjectLoadResult:
        """Remote records when available, otherwise the fallback dataset."""
        try:
            projects = self.fetch_remote()
        except DataSourceUnavailableException as e:
            logger.warning(
                "data_source_fallback",
                url=e.source,
                reason=e.reason,
                fallback_path=str(self.fallback_path),
            )
            projects = self.load_fallback()
            return ProjectLoadResult(projects=projects, source=SOURCE_FALLBACK)

        logger.info("data_source_loaded", url=self.url, projects=len(projects))
        return ProjectLoadResult(projects=projects, source=SOURCE_REMOTE)
