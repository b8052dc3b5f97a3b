from enum import Enum

class WorkType(str, Enum):
    BUILDING = "Edificação"
    SANITATION = "Saneamento"
    PAVING = "Pavimentação"
    DRAINAGE = "Drenagem"
    BRIDGE_VIADUCT = "Ponte/Viaduto"
    RENOVATION = "Reforma"
    SLOPE_CONTAINMENT = "Contenção de Encostas"
    PUBLIC_FACILITY = "Equipamento Público"

class ProjectStatus(str, Enum):
    COMPLETED = "Concluída"
    IN_PROGRESS = "Em Andamento"
    HALTED = "Paralisada"          # Work stopped, contract still active
    NOT_STARTED = "Não Iniciada"
    CANCELLED = "Cancelada"

class Classification(str, Enum):
    # Ordered best → worst
    EXCELLENT = "Excellent"
    GOOD = "Good"
    REGULAR = "Regular"
    POOR = "Poor"
    CRITICAL = "Critical"
