"""
Recommendation Generator

Turns deficient signal outcomes into actionable advice and appends one
strategic line keyed on the category. Never introduces new signals.
"""

from typing import Dict, List, Tuple

from admission_engine.domain.scoring.interfaces import AdmissionCategory, FeatureSet


STRATEGIC_ADVICE: Dict[AdmissionCategory, str] = {
    AdmissionCategory.REACH: (
        'This university is an ambitious goal, treat it as a "reach" option'
    ),
    AdmissionCategory.SAFETY: (
        'Good chances of admission, this university can serve as a "safety" option'
    ),
}


class RecommendationGenerator:
    """One recommendation per deficient factor, in factor order."""

    def generate(
        self,
        feature_set: FeatureSet,
        category: AdmissionCategory,
    ) -> Tuple[str, ...]:
        recommendations: List[str] = [
            outcome.recommendation
            for outcome in feature_set.outcomes
            if outcome.deficient and outcome.recommendation
        ]

        advice = STRATEGIC_ADVICE.get(category)
        if advice:
            recommendations.append(advice)

        return tuple(recommendations)
