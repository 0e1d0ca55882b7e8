"""
Academic Signals (GPA)

GPA compared against program thresholds. The logit variant measures the
margin over the published minimum; the additive variant benchmarks against
the admitted average first and the minimum second.
"""

from typing import Optional

from admission_engine.domain.models import CatalogEntry, ProgramRequirement, StudentProfile
from admission_engine.domain.scoring.interfaces import BaseSignal, Factor, SignalOutcome
from admission_engine.domain.scoring.normalizer import MAX_GPA, profile_gpa, score_margin


MISSING_GPA_DESCRIPTION = "GPA not provided, the estimate is less precise"
MISSING_GPA_RECOMMENDATION = "Provide your GPA for a more accurate estimate"


class GpaSignal(BaseSignal[ProgramRequirement]):
    """
    GPA signal for probability (logit) scoring.

    Feature: normalized GPA / 4.0.
    Factor only when the program publishes a minimum GPA.
    """

    STRONG_MARGIN = 0.3
    STRONG_IMPACT = 0.25
    MEETS_IMPACT = 0.15
    BELOW_IMPACT = -0.2
    MISSING_IMPACT = -0.2

    @property
    def name(self) -> str:
        return "GPA"

    def evaluate(
        self,
        profile: StudentProfile,
        target: ProgramRequirement
    ) -> Optional[SignalOutcome]:
        gpa = profile_gpa(profile)
        if gpa is None:
            return SignalOutcome(
                factor=Factor(self.name, self.MISSING_IMPACT, MISSING_GPA_DESCRIPTION),
                features={"gpa": 0.0},
                recommendation=MISSING_GPA_RECOMMENDATION,
                missing=True,
                slot="gpa",
            )

        features = {"gpa": gpa / MAX_GPA}
        if target.min_gpa is None:
            return SignalOutcome(features=features)

        diff = score_margin(gpa, target.min_gpa)
        if diff >= self.STRONG_MARGIN:
            factor = Factor(
                self.name,
                self.STRONG_IMPACT,
                f"Excellent GPA ({gpa:.2f}) well above the requirement",
            )
            return SignalOutcome(factor=factor, features=features)
        if diff >= 0:
            factor = Factor(
                self.name,
                self.MEETS_IMPACT,
                f"GPA ({gpa:.2f}) meets the requirement",
            )
            return SignalOutcome(factor=factor, features=features)

        return SignalOutcome(
            factor=Factor(
                self.name,
                self.BELOW_IMPACT,
                f"GPA ({gpa:.2f}) is below the requirement ({target.min_gpa})",
            ),
            features=features,
            recommendation=f"Raise your GPA to at least {target.min_gpa}",
        )


class GpaBenchmarkSignal(BaseSignal[CatalogEntry]):
    """
    GPA signal for additive (points) scoring.

    Being at or above the admitted average takes priority over merely
    meeting the minimum.
    """

    ABOVE_AVERAGE_POINTS = 20
    MEETS_MINIMUM_POINTS = 10
    BELOW_MINIMUM_POINTS = -30
    MISSING_POINTS = -15

    @property
    def name(self) -> str:
        return "GPA"

    def evaluate(
        self,
        profile: StudentProfile,
        target: CatalogEntry
    ) -> Optional[SignalOutcome]:
        gpa = profile_gpa(profile)
        if gpa is None:
            return SignalOutcome(
                factor=Factor(self.name, self.MISSING_POINTS, MISSING_GPA_DESCRIPTION),
                recommendation=MISSING_GPA_RECOMMENDATION,
                missing=True,
            )

        features = {"gpa": gpa / MAX_GPA}
        min_gpa = target.requirement.min_gpa

        if target.avg_gpa is not None and score_margin(gpa, target.avg_gpa) >= 0:
            return SignalOutcome(
                factor=Factor(
                    self.name,
                    self.ABOVE_AVERAGE_POINTS,
                    f"Your GPA ({gpa:.2f}) is above the average for this university ({target.avg_gpa})",
                ),
                features=features,
            )

        if min_gpa is None:
            return SignalOutcome(features=features)

        if score_margin(gpa, min_gpa) >= 0:
            return SignalOutcome(
                factor=Factor(
                    self.name,
                    self.MEETS_MINIMUM_POINTS,
                    f"Your GPA ({gpa:.2f}) meets the minimum requirement",
                ),
                features=features,
            )

        return SignalOutcome(
            factor=Factor(
                self.name,
                self.BELOW_MINIMUM_POINTS,
                f"Your GPA ({gpa:.2f}) is below the minimum requirement ({min_gpa})",
            ),
            features=features,
            recommendation=f"Raise your GPA to at least {min_gpa} for this university",
        )


class GpaGapSignal(BaseSignal[CatalogEntry]):
    """
    Extra penalty when GPA trails the admitted average by more than 0.3.

    Kept as its own factor so the GPA factor stays a single benchmark
    verdict and each deficiency maps to one recommendation.
    """

    GAP_THRESHOLD = 0.3
    GAP_POINTS = -10

    @property
    def name(self) -> str:
        return "GPA Gap"

    def is_applicable(self, profile: StudentProfile, target: CatalogEntry) -> bool:
        return profile.gpa is not None and target.avg_gpa is not None

    def evaluate(
        self,
        profile: StudentProfile,
        target: CatalogEntry
    ) -> Optional[SignalOutcome]:
        gpa = profile_gpa(profile)
        gap = score_margin(target.avg_gpa, gpa)
        if gap <= self.GAP_THRESHOLD:
            return None

        return SignalOutcome(
            factor=Factor(
                self.name,
                self.GAP_POINTS,
                f"Your GPA ({gpa:.2f}) is {gap:.2f} below the admitted average ({target.avg_gpa})",
            ),
            recommendation=f"To improve your chances, aim for a GPA of at least {target.avg_gpa}",
        )
