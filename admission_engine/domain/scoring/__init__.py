# Scoring module for the Admission Chance Engine
from admission_engine.domain.scoring.interfaces import (
    AdmissionCategory,
    BaseSignal,
    Factor,
    FeatureSet,
    ScoringResult,
    ScoringStrategy,
    SignalOutcome,
)
from admission_engine.domain.scoring.normalizer import normalize_gpa
from admission_engine.domain.scoring.feature_extractor import FeatureExtractor
from admission_engine.domain.scoring.strategies import AdditiveStrategy, LogitStrategy
from admission_engine.domain.scoring.historical_adjustment import apply_historical_adjustment
from admission_engine.domain.scoring.label_classifier import LabelClassifier
from admission_engine.domain.scoring.recommendations import RecommendationGenerator
from admission_engine.domain.scoring.admission_scorer import AdmissionScorer
from admission_engine.domain.scoring.catalog_ranker import (
    CatalogRanker,
    RankedProgram,
    filter_catalog,
    filter_ranked,
)

__all__ = [
    "AdmissionCategory",
    "BaseSignal",
    "Factor",
    "FeatureSet",
    "ScoringResult",
    "ScoringStrategy",
    "SignalOutcome",
    "normalize_gpa",
    "FeatureExtractor",
    "AdditiveStrategy",
    "LogitStrategy",
    "apply_historical_adjustment",
    "LabelClassifier",
    "RecommendationGenerator",
    "AdmissionScorer",
    "CatalogRanker",
    "RankedProgram",
    "filter_catalog",
    "filter_ranked",
]
