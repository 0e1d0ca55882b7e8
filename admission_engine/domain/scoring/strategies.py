"""
Score Aggregation Strategies

Two interchangeable strategies over the shared feature extractor:

- AdditiveStrategy: base 50 plus integer factor points, scaled by the
  university's competition tier. Used for catalog ranking.
- LogitStrategy: fixed weighted sum of features, shifted by the logit
  of the trailing acceptance rate and passed through a sigmoid. Used for
  single-program prediction.

The weights are hand-tuned, not fitted. The two strategies are expected
to disagree for the same applicant and program.
"""

import math
from typing import Dict, List, Optional, Sequence

from admission_engine.domain.models import (
    CatalogEntry,
    CompetitionLevel,
    HistoricalStats,
    ProgramRequirement,
)
from admission_engine.domain.scoring.interfaces import BaseSignal, FeatureSet
from admission_engine.domain.scoring.signals import (
    STANDARDIZED_TESTS,
    AchievementsBenchmarkSignal,
    AchievementsSignal,
    CompetitionSignal,
    EnglishBenchmarkSignal,
    EnglishSignal,
    ExperienceSignal,
    GpaBenchmarkSignal,
    GpaGapSignal,
    GpaSignal,
    PortfolioSignal,
    RankingSignal,
    StandardizedTestBenchmarkSignal,
    StandardizedTestSignal,
)


MIN_SCORE = 0.0
MAX_SCORE = 100.0


def clamp_score(score: float) -> float:
    """Clamp a score into [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, score))


def sigmoid(x: float) -> float:
    """Logistic function, stable for large |x|."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def base_rate_logit(acceptance_rate: float) -> float:
    """Logit of an acceptance rate given in percent, clamped to [1, 99]."""
    rate = max(1.0, min(99.0, acceptance_rate))
    return math.log(rate / (100.0 - rate))


class AdditiveStrategy:
    """
    Points-based scoring for ad-hoc university scoring.

    score = (50 + sum of factor impacts) * competition multiplier
    """

    BASE_SCORE = 50.0
    COMPETITION_MULTIPLIERS: Dict[CompetitionLevel, float] = {
        CompetitionLevel.VERY_HIGH: 0.7,
        CompetitionLevel.HIGH: 0.85,
        CompetitionLevel.MEDIUM: 1.0,
        CompetitionLevel.LOW: 1.15,
    }

    def __init__(self, signals: Optional[Sequence[BaseSignal[CatalogEntry]]] = None):
        self._signals = tuple(signals) if signals is not None else self._default_signals()

    def _default_signals(self) -> tuple:
        signals: List[BaseSignal[CatalogEntry]] = [
            GpaBenchmarkSignal(),
            GpaGapSignal(),
            EnglishBenchmarkSignal(),
        ]
        signals.extend(StandardizedTestBenchmarkSignal(spec) for spec in STANDARDIZED_TESTS)
        signals.extend([
            AchievementsBenchmarkSignal(),
            CompetitionSignal(),
        ])
        return tuple(signals)

    @property
    def name(self) -> str:
        return "additive"

    @property
    def signals(self) -> Sequence[BaseSignal[CatalogEntry]]:
        return self._signals

    def aggregate(self, feature_set: FeatureSet, target: CatalogEntry) -> float:
        score = self.BASE_SCORE + sum(f.impact for f in feature_set.factors)
        score *= self.COMPETITION_MULTIPLIERS[target.competition]
        return clamp_score(score)

    def historical_stats(self, target: CatalogEntry) -> Optional[HistoricalStats]:
        return None


class LogitStrategy:
    """
    Probability-style scoring for database-backed single-program prediction.

    logit = gpa*2.0 + english*1.5 + test*1.0 + portfolio*0.5
            + achievements*0.5 + experience*0.3 + ranking*2.0
            + sum(missing-signal impact * slot weight)
            [+ logit(avg acceptance rate)]
    probability = 100 * sigmoid(logit)

    Without GPA or English evidence the acceptance-rate shift is capped
    at 0: a permissive program cannot lift an unassessed applicant above
    even odds.
    """

    WEIGHTS: Dict[str, float] = {
        "gpa": 2.0,
        "english": 1.5,
        "test": 1.0,
        "portfolio": 0.5,
        "achievements": 0.5,
        "experience": 0.3,
        "ranking": 2.0,
    }
    # First non-zero standardized test feature fills the "test" slot
    TEST_FEATURES = tuple(spec.feature for spec in STANDARDIZED_TESTS)
    CORE_SLOTS = ("gpa", "english")

    def __init__(self, signals: Optional[Sequence[BaseSignal[ProgramRequirement]]] = None):
        self._signals = tuple(signals) if signals is not None else self._default_signals()

    def _default_signals(self) -> tuple:
        signals: List[BaseSignal[ProgramRequirement]] = [
            GpaSignal(),
            EnglishSignal(),
        ]
        signals.extend(StandardizedTestSignal(spec) for spec in STANDARDIZED_TESTS)
        signals.extend([
            PortfolioSignal(),
            AchievementsSignal(),
            ExperienceSignal(),
            RankingSignal(),
        ])
        return tuple(signals)

    @property
    def name(self) -> str:
        return "logit"

    @property
    def signals(self) -> Sequence[BaseSignal[ProgramRequirement]]:
        return self._signals

    def logit(self, feature_set: FeatureSet, target: ProgramRequirement) -> float:
        """Weighted feature sum plus the base-rate shift."""
        test_feature = next(
            (feature_set.feature(name) for name in self.TEST_FEATURES if feature_set.feature(name)),
            0.0,
        )
        values = {
            "gpa": feature_set.feature("gpa"),
            "english": feature_set.feature("english"),
            "test": test_feature,
            "portfolio": feature_set.feature("portfolio"),
            "achievements": feature_set.feature("achievements"),
            "experience": feature_set.feature("experience"),
            "ranking": feature_set.feature("ranking"),
        }
        logit = sum(values[name] * weight for name, weight in self.WEIGHTS.items())
        logit += self.missing_penalty(feature_set)

        stats = target.historical
        if stats is not None and stats.avg_acceptance_rate is not None:
            shift = base_rate_logit(stats.avg_acceptance_rate)
            if self.missing_core_evidence(feature_set):
                shift = min(shift, 0.0)
            logit += shift
        return logit

    def missing_penalty(self, feature_set: FeatureSet) -> float:
        """Impacts of absent signals, weighted like the features they replace."""
        return sum(
            o.factor.impact * self.WEIGHTS.get(o.slot, 0.0)
            for o in feature_set.outcomes
            if o.missing and o.slot and o.factor is not None
        )

    def missing_core_evidence(self, feature_set: FeatureSet) -> bool:
        return any(o.missing and o.slot in self.CORE_SLOTS for o in feature_set.outcomes)

    def aggregate(self, feature_set: FeatureSet, target: ProgramRequirement) -> float:
        return clamp_score(sigmoid(self.logit(feature_set, target)) * 100.0)

    def historical_stats(self, target: ProgramRequirement) -> Optional[HistoricalStats]:
        return target.historical
