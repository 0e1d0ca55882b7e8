"""
Historical Adjustment

Post-processing step for probability scoring: rescales the score when the
applicant's GPA sits clearly outside the program's admitted-GPA average.
"""

from typing import Optional

from admission_engine.domain.models import HistoricalStats
from admission_engine.domain.scoring.normalizer import score_margin


GPA_TOLERANCE = 0.3
BELOW_AVERAGE_MULTIPLIER = 0.7
ABOVE_AVERAGE_MULTIPLIER = 1.2


def apply_historical_adjustment(
    score: float,
    normalized_gpa: Optional[float],
    stats: Optional[HistoricalStats],
) -> float:
    """
    Adjust a 0-100 score using the trailing average admitted GPA.

    - GPA more than 0.3 below the average: x0.7
    - GPA more than 0.3 above the average: x1.2, capped at 100
    - otherwise, or when either GPA is unknown: unchanged
    """
    if normalized_gpa is None or stats is None or stats.avg_gpa is None:
        return score

    diff = score_margin(normalized_gpa, stats.avg_gpa)
    if diff < -GPA_TOLERANCE:
        return score * BELOW_AVERAGE_MULTIPLIER
    if diff > GPA_TOLERANCE:
        return min(100.0, score * ABOVE_AVERAGE_MULTIPLIER)
    return score
