from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from datetime import date
from typing import Optional

from app.models.enumerations import WorkType, ProjectStatus


def _alias(name: str, catalog_key: str) -> AliasChoices:
    """Accept both the snake_case field name and the open-data catalog key."""
    return AliasChoices(name, catalog_key)


class ProjectRecord(BaseModel):
    """
    One public-works project as supplied by the data source.

    Immutable once validated. Work type and status are closed enumerations,
    so unrecognised values are rejected here and never reach the scoring
    engine. Built area and the progress percentages are deliberately left
    unconstrained: the engine floors degenerate areas and tolerates
    percentages outside 0-100.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # Identity
    id: str = Field(
        ...,
        validation_alias=_alias("id", "id"),
        description="Project identifier in the source catalog"
    )

    name: str = Field(
        ...,
        validation_alias=_alias("name", "nome"),
        description="Project name"
    )

    municipality: str = Field(
        ...,
        validation_alias=_alias("municipality", "municipio"),
        description="Municipality where the work takes place"
    )

    work_type: WorkType = Field(
        ...,
        validation_alias=_alias("work_type", "tipo"),
        description="Work category (one of 8 fixed types)"
    )

    agency: str = Field(
        ...,
        validation_alias=_alias("agency", "orgaoResponsavel"),
        description="Agency responsible for the contract"
    )

    status: ProjectStatus = Field(
        ...,
        validation_alias=_alias("status", "status"),
        description="Current project status"
    )

    # Physical scale
    built_area_m2: float = Field(
        ...,
        validation_alias=_alias("built_area_m2", "areaConstruidaM2"),
        description="Built area in square meters"
    )

    # Costs (R$)
    contracted_amount: float = Field(
        ...,
        ge=0,
        validation_alias=_alias("contracted_amount", "valorContratadoR$"),
        description="Contracted value"
    )

    paid_amount: float = Field(
        ...,
        ge=0,
        validation_alias=_alias("paid_amount", "valorPagoR$"),
        description="Amount actually paid to date"
    )

    # Schedule
    planned_start: date = Field(
        ...,
        validation_alias=_alias("planned_start", "dataInicioPrevista"),
    )

    planned_end: date = Field(
        ...,
        validation_alias=_alias("planned_end", "dataFimPrevista"),
    )

    actual_start: date = Field(
        ...,
        validation_alias=_alias("actual_start", "dataInicioReal"),
    )

    actual_end: Optional[date] = Field(
        default=None,
        validation_alias=_alias("actual_end", "dataFimReal"),
        description="Actual completion date; null while the work is ongoing"
    )

    # Progress percentages (0-100 by convention, not enforced)
    physical_progress_pct: float = Field(
        ...,
        validation_alias=_alias("physical_progress_pct", "percentualExecutado"),
    )

    financial_progress_pct: float = Field(
        ...,
        validation_alias=_alias("financial_progress_pct", "percentualFinanceiro"),
    )

    # Control
    amendments: int = Field(
        default=0,
        ge=0,
        validation_alias=_alias("amendments", "aditivos"),
        description="Number of contract amendments"
    )

    stoppages: int = Field(
        default=0,
        ge=0,
        validation_alias=_alias("stoppages", "paralisacoes"),
        description="Number of work stoppages"
    )

    recurrence: bool = Field(
        default=False,
        validation_alias=_alias("recurrence", "reincidencia"),
        description="Similar work recently carried out in the same municipality"
    )

    @property
    def is_ongoing(self) -> bool:
        """True when the project has no actual completion date."""
        return self.actual_end is None

    @model_validator(mode="after")
    def validate_identity(self):
        """Reject blank identifiers; everything downstream keys on id."""
        if not self.id.strip():
            raise ValueError("id must not be blank")
        return self
