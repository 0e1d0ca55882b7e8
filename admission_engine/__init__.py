"""
Admission Chance Engine

Estimates admission chances for degree programs and classifies them as
reach, target or safety options, with explanatory factors and advice.
"""

from admission_engine.domain.models import (
    BudgetMode,
    CatalogEntry,
    CompetitionLevel,
    EnglishTest,
    GpaScale,
    HistoricalStats,
    ProgramRecord,
    ProgramRequirement,
    StudentProfile,
)
from admission_engine.domain.scoring import (
    AdditiveStrategy,
    AdmissionCategory,
    AdmissionScorer,
    CatalogRanker,
    Factor,
    LogitStrategy,
    RankedProgram,
    ScoringResult,
    normalize_gpa,
)
from admission_engine.services import AdmissionService

__version__ = "1.0.0"

__all__ = [
    "BudgetMode",
    "CatalogEntry",
    "CompetitionLevel",
    "EnglishTest",
    "GpaScale",
    "HistoricalStats",
    "ProgramRecord",
    "ProgramRequirement",
    "StudentProfile",
    "AdditiveStrategy",
    "AdmissionCategory",
    "AdmissionScorer",
    "CatalogRanker",
    "Factor",
    "LogitStrategy",
    "RankedProgram",
    "ScoringResult",
    "normalize_gpa",
    "AdmissionService",
]
