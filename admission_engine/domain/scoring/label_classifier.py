"""
Label Classifier

Classifies a final score as Reach, Target, or Safety.
"""

from admission_engine.domain.scoring.interfaces import AdmissionCategory


class LabelClassifier:
    """
    Score-band classifier.

    - Reach: score < 30
    - Target: 30 <= score < 80
    - Safety: score >= 80
    """

    REACH_BELOW = 30
    SAFETY_FROM = 80

    def classify(self, score: float) -> AdmissionCategory:
        if score < self.REACH_BELOW:
            return AdmissionCategory.REACH
        if score < self.SAFETY_FROM:
            return AdmissionCategory.TARGET
        return AdmissionCategory.SAFETY
