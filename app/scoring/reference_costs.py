"""
scoring/reference_costs.py

Reference cost per m² for each work type, in R$.

Baselines come from CUB/RJ (Custo Unitário Básico da Construção Civil) and
SINAPI (Sistema Nacional de Pesquisa de Custos e Índices da Construção Civil).
The table is static configuration: it is not derived from project data and is
not editable at runtime.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from app.core.exceptions import InvalidReferenceTableException
from app.models.enumerations import WorkType

_DEFAULT_COSTS: Dict[WorkType, Decimal] = {
    WorkType.BUILDING:          Decimal("3500"),
    WorkType.SANITATION:        Decimal("5000"),
    WorkType.PAVING:            Decimal("450"),
    WorkType.DRAINAGE:          Decimal("2000"),
    WorkType.BRIDGE_VIADUCT:    Decimal("12000"),
    WorkType.RENOVATION:        Decimal("2200"),
    WorkType.SLOPE_CONTAINMENT: Decimal("4500"),
    WorkType.PUBLIC_FACILITY:   Decimal("3000"),
}

# Where each baseline comes from (reported by the methodology endpoint)
REFERENCE_COST_SOURCES: Dict[WorkType, str] = {
    WorkType.BUILDING:          "CUB/RJ + SINAPI",
    WorkType.SANITATION:        "SINAPI",
    WorkType.PAVING:            "SINAPI/DNIT",
    WorkType.DRAINAGE:          "SINAPI",
    WorkType.BRIDGE_VIADUCT:    "SINAPI/DNIT",
    WorkType.RENOVATION:        "CUB/RJ",
    WorkType.SLOPE_CONTAINMENT: "SINAPI",
    WorkType.PUBLIC_FACILITY:   "CUB/RJ + SINAPI",
}


class ReferenceCostTable(Mapping[WorkType, Decimal]):
    """
    Immutable WorkType → reference cost per m² mapping.

    Construction fails with InvalidReferenceTableException if any work type
    is missing or any cost is not strictly positive, so a table that exists
    can always be used as a divisor.
    """

    def __init__(self, costs: Mapping[WorkType, Decimal]):
        normalized = {WorkType(k): Decimal(str(v)) for k, v in costs.items()}

        missing = [wt.value for wt in WorkType if wt not in normalized]
        invalid = [wt.value for wt, cost in normalized.items() if cost <= 0]
        if missing or invalid:
            raise InvalidReferenceTableException(missing=missing, invalid=invalid)

        self._costs = MappingProxyType(normalized)

    def __getitem__(self, work_type: WorkType) -> Decimal:
        return self._costs[work_type]

    def __iter__(self) -> Iterator[WorkType]:
        return iter(self._costs)

    def __len__(self) -> int:
        return len(self._costs)

    def cost_for(self, work_type: WorkType) -> Decimal:
        """Reference cost per m² for a work type."""
        return self._costs[work_type]


DEFAULT_REFERENCE_COSTS = ReferenceCostTable(_DEFAULT_COSTS)
