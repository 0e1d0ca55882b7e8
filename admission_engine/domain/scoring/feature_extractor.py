"""
Feature Extractor

Runs an ordered list of signals against one (profile, target) pair and
returns an immutable FeatureSet. Factor order is signal order; outcomes
from different signals are never merged or reordered.
"""

from typing import Generic, List, Sequence

from admission_engine.domain.models import StudentProfile
from admission_engine.domain.scoring.interfaces import (
    BaseSignal,
    FeatureSet,
    SignalOutcome,
    TargetT,
)
from admission_engine.domain.scoring.normalizer import profile_gpa


class FeatureExtractor(Generic[TargetT]):
    """Stateless extractor; safe to share across concurrent scoring calls."""

    def __init__(self, signals: Sequence[BaseSignal[TargetT]]):
        self._signals = tuple(signals)

    @property
    def signals(self) -> Sequence[BaseSignal[TargetT]]:
        return self._signals

    def extract(self, profile: StudentProfile, target: TargetT) -> FeatureSet:
        outcomes: List[SignalOutcome] = []
        for signal in self._signals:
            if not signal.is_applicable(profile, target):
                continue
            outcome = signal.evaluate(profile, target)
            if outcome is not None:
                outcomes.append(outcome)

        return FeatureSet.build(profile_gpa(profile), outcomes)
