"""
GPA Scale Normalizer

Converts GPA from the supported grading scales to the 4.0 scale.
"""

from typing import Optional, Union

from admission_engine.domain.models import GpaScale, StudentProfile


MAX_GPA = 4.0

# Percentage grade -> 4.0 GPA; first matching lower bound wins.
PERCENT_TO_GPA_TABLE = (
    (97, 4.0),
    (93, 3.9),
    (90, 3.7),
    (87, 3.3),
    (83, 3.0),
    (80, 2.7),
    (77, 2.3),
    (73, 2.0),
    (70, 1.7),
)
PERCENT_FLOOR_GPA = 1.0


def normalize_gpa(gpa: float, scale: Union[GpaScale, str] = GpaScale.FOUR) -> float:
    """
    Normalize GPA to the 4.0 scale.

    - 4.0: identity
    - 5.0: linear rescale
    - 100: table lookup, anything below 70 maps to 1.0

    The result is clamped into [0, 4.0].
    """
    scale = GpaScale(scale)

    if scale == GpaScale.FOUR:
        normalized = gpa
    elif scale == GpaScale.FIVE:
        normalized = gpa / 5.0 * 4.0
    else:
        normalized = PERCENT_FLOOR_GPA
        for lower_bound, mapped in PERCENT_TO_GPA_TABLE:
            if gpa >= lower_bound:
                normalized = mapped
                break

    return max(0.0, min(MAX_GPA, normalized))


def score_margin(value: float, reference: float) -> float:
    """
    Difference between a score and a threshold, rounded to 6 places so
    that threshold comparisons are not thrown off by float noise
    (3.8 - 3.5 must compare equal to 0.3).
    """
    return round(value - reference, 6)


def profile_gpa(profile: StudentProfile) -> Optional[float]:
    """Normalized GPA of a profile, or None when not reported."""
    if profile.gpa is None:
        return None
    return normalize_gpa(profile.gpa, profile.gpa_scale)
