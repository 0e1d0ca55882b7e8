"""
Scoring Interfaces for the Admission Chance Engine

Defines protocols and value objects for the scoring pipeline.
Signals and strategies are pluggable; everything they exchange is
immutable so one engine can score many candidates without shared state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Generic,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from admission_engine.domain.models import HistoricalStats, StudentProfile


TargetT = TypeVar("TargetT")


class AdmissionCategory(str, Enum):
    """Ordinal admission-likelihood bands."""
    REACH = "reach"
    TARGET = "target"
    SAFETY = "safety"


@dataclass(frozen=True)
class Factor:
    """One named, signed contribution to a score."""
    name: str
    impact: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "impact": self.impact,
            "description": self.description,
        }


@dataclass(frozen=True)
class SignalOutcome:
    """
    Result of evaluating one signal.

    A signal may contribute model features without emitting a factor
    (e.g. an IELTS score for a program that publishes no IELTS minimum).
    `missing` marks required-but-absent or unverifiable data; `slot` names
    the model feature an absent signal stands in for.
    """
    factor: Optional[Factor] = None
    features: Mapping[str, float] = field(default_factory=dict)
    recommendation: Optional[str] = None
    missing: bool = False
    slot: Optional[str] = None

    @property
    def deficient(self) -> bool:
        """Whether this outcome should produce a recommendation."""
        if self.factor is None:
            return False
        return self.factor.impact < 0 or self.missing


@dataclass(frozen=True)
class FeatureSet:
    """Immutable output of the feature extractor for one candidate."""
    normalized_gpa: Optional[float]
    features: Mapping[str, float]
    outcomes: Tuple[SignalOutcome, ...]

    @property
    def factors(self) -> Tuple[Factor, ...]:
        """Emitted factors in evaluation order."""
        return tuple(o.factor for o in self.outcomes if o.factor is not None)

    def feature(self, name: str, default: float = 0.0) -> float:
        return self.features.get(name, default)

    @classmethod
    def build(
        cls,
        normalized_gpa: Optional[float],
        outcomes: Sequence[SignalOutcome],
    ) -> "FeatureSet":
        merged: Dict[str, float] = {}
        for outcome in outcomes:
            merged.update(outcome.features)
        return cls(
            normalized_gpa=normalized_gpa,
            features=MappingProxyType(merged),
            outcomes=tuple(outcomes),
        )


@dataclass(frozen=True)
class ScoringResult:
    """
    Final output for one (profile, program) pair.

    Returned to the presentation layer for rendering.
    """
    score: int  # 0-100
    category: AdmissionCategory
    factors: Tuple[Factor, ...] = ()
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "score": self.score,
            "category": self.category.value,
            "factors": [f.to_dict() for f in self.factors],
            "recommendations": list(self.recommendations),
        }


class BaseSignal(ABC, Generic[TargetT]):
    """
    Base class for signals.

    Each signal inspects one aspect of the profile against the target
    record and returns at most one factor.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    def is_applicable(self, profile: StudentProfile, target: TargetT) -> bool:
        """Default: always applicable. Override for conditional signals."""
        return True

    @abstractmethod
    def evaluate(
        self,
        profile: StudentProfile,
        target: TargetT
    ) -> Optional[SignalOutcome]:
        pass


@runtime_checkable
class ScoringStrategy(Protocol[TargetT]):
    """
    Protocol for score aggregation strategies.

    A strategy owns the ordered signals it needs and turns the
    extracted feature set into an unclamped numeric score.
    """

    @property
    def name(self) -> str:
        ...

    @property
    def signals(self) -> Sequence[BaseSignal[TargetT]]:
        ...

    def aggregate(self, feature_set: FeatureSet, target: TargetT) -> float:
        ...

    def historical_stats(self, target: TargetT) -> Optional[HistoricalStats]:
        """Stats for the post-processing adjustment, or None to skip it."""
        ...
