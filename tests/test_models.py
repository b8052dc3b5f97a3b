# tests/test_models.py

"""
Model Validation Tests - Enumerations and ProjectRecord ingestion rules
"""

import pytest
from datetime import date
from pydantic import ValidationError

from app.models.enumerations import Classification, ProjectStatus, WorkType
from app.models.project import ProjectRecord



# ENUMERATION TESTS


class TestWorkTypeEnum:
    """Tests for WorkType enumeration."""

    def test_all_work_types_exist(self):
        expected = [
            "Edificação", "Saneamento", "Pavimentação", "Drenagem",
            "Ponte/Viaduto", "Reforma", "Contenção de Encostas", "Equipamento Público",
        ]
        assert [w.value for w in WorkType] == expected

    def test_work_type_count(self):
        assert len(WorkType) == 8


class TestProjectStatusEnum:
    """Tests for ProjectStatus enumeration."""

    def test_all_statuses_exist(self):
        expected = ["Concluída", "Em Andamento", "Paralisada", "Não Iniciada", "Cancelada"]
        assert [s.value for s in ProjectStatus] == expected


class TestClassificationEnum:
    """Tests for Classification enumeration."""

    def test_tiers_ordered_best_to_worst(self):
        expected = ["Excellent", "Good", "Regular", "Poor", "Critical"]
        assert [c.value for c in Classification] == expected



# PROJECT RECORD TESTS


class TestProjectRecord:
    """Tests for ProjectRecord validation at the ingestion boundary."""

    def test_accepts_catalog_field_names(self, catalog_payload):
        record = ProjectRecord.model_validate(catalog_payload)
        assert record.work_type == WorkType.PUBLIC_FACILITY
        assert record.status == ProjectStatus.COMPLETED
        assert record.paid_amount == 2_400_000
        assert record.planned_end == date(2023, 4, 11)
        assert record.recurrence is False

    def test_accepts_snake_case_field_names(self, baseline_record):
        data = baseline_record.model_dump()
        assert ProjectRecord.model_validate(data) == baseline_record

    def test_unknown_work_type_rejected(self, catalog_payload):
        catalog_payload["tipo"] = "Aeroporto"
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(catalog_payload)

    def test_unknown_status_rejected(self, catalog_payload):
        catalog_payload["status"] = "Suspensa"
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(catalog_payload)

    def test_negative_amount_rejected(self, make_record):
        with pytest.raises(ValidationError):
            make_record(paid_amount=-1)

    def test_negative_counts_rejected(self, make_record):
        with pytest.raises(ValidationError):
            make_record(stoppages=-1)
        with pytest.raises(ValidationError):
            make_record(amendments=-2)

    def test_nan_rejected(self, make_record):
        with pytest.raises(ValidationError):
            make_record(physical_progress_pct=float("nan"))

    def test_blank_id_rejected(self, make_record):
        with pytest.raises(ValidationError):
            make_record(id="   ")

    def test_zero_and_negative_area_accepted(self, make_record):
        """The engine floors degenerate areas, so ingestion lets them through."""
        assert make_record(built_area_m2=0).built_area_m2 == 0
        assert make_record(built_area_m2=-10).built_area_m2 == -10

    def test_progress_not_clamped(self, make_record):
        record = make_record(physical_progress_pct=120, financial_progress_pct=-5)
        assert record.physical_progress_pct == 120
        assert record.financial_progress_pct == -5

    def test_null_actual_end_means_ongoing(self, catalog_payload):
        catalog_payload["dataFimReal"] = None
        record = ProjectRecord.model_validate(catalog_payload)
        assert record.actual_end is None
        assert record.is_ongoing is True

    def test_record_is_immutable(self, baseline_record):
        with pytest.raises(ValidationError):
            baseline_record.paid_amount = 1
