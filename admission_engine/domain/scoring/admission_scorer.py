"""
Admission Scorer

Central scoring engine. Runs the pipeline for one (profile, target) pair:
feature extraction -> aggregation -> historical adjustment -> category ->
recommendations. The aggregation strategy is injected.
"""

import logging
import math
from typing import Generic, Optional

from admission_engine.domain.models import StudentProfile
from admission_engine.domain.scoring.feature_extractor import FeatureExtractor
from admission_engine.domain.scoring.historical_adjustment import apply_historical_adjustment
from admission_engine.domain.scoring.interfaces import ScoringResult, ScoringStrategy, TargetT
from admission_engine.domain.scoring.label_classifier import LabelClassifier
from admission_engine.domain.scoring.recommendations import RecommendationGenerator
from admission_engine.domain.scoring.strategies import clamp_score

logger = logging.getLogger(__name__)


def round_score(score: float) -> int:
    """Round half up to an integer score."""
    return int(math.floor(score + 0.5))


class AdmissionScorer(Generic[TargetT]):
    """
    Admission chance scoring engine.

    Pure and synchronous: no I/O, no shared mutable state, so one
    instance can score any number of candidates.
    """

    def __init__(
        self,
        strategy: ScoringStrategy[TargetT],
        classifier: Optional[LabelClassifier] = None,
        recommender: Optional[RecommendationGenerator] = None,
        historical_adjustment_enabled: bool = True,
    ):
        self._strategy = strategy
        self._extractor: FeatureExtractor[TargetT] = FeatureExtractor(strategy.signals)
        self._classifier = classifier or LabelClassifier()
        self._recommender = recommender or RecommendationGenerator()
        self._historical_adjustment_enabled = historical_adjustment_enabled

    @property
    def strategy(self) -> ScoringStrategy[TargetT]:
        return self._strategy

    def score(self, profile: StudentProfile, target: TargetT) -> ScoringResult:
        """
        Score a single target for the applicant.

        Returns:
            ScoringResult with a clamped integer score; the category is
            derived from that integer so the two always agree.
        """
        feature_set = self._extractor.extract(profile, target)
        raw_score = self._strategy.aggregate(feature_set, target)

        if self._historical_adjustment_enabled:
            raw_score = apply_historical_adjustment(
                raw_score,
                feature_set.normalized_gpa,
                self._strategy.historical_stats(target),
            )

        score = round_score(clamp_score(raw_score))
        category = self._classifier.classify(score)
        recommendations = self._recommender.generate(feature_set, category)

        logger.debug(
            f"[SCORER] {self._strategy.name}: score={score} category={category.value} "
            f"factors={len(feature_set.factors)}"
        )

        return ScoringResult(
            score=score,
            category=category,
            factors=feature_set.factors,
            recommendations=recommendations,
        )
