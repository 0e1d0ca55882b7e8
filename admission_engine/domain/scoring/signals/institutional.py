"""
Institutional Signals (Ranking, Competition)

Higher-ranked and more competitive institutions are harder to get into.
"""

from typing import Optional

from admission_engine.domain.models import (
    CatalogEntry,
    CompetitionLevel,
    ProgramRequirement,
    StudentProfile,
)
from admission_engine.domain.scoring.interfaces import BaseSignal, Factor, SignalOutcome


# (QS rank upper bound, impact); first matching band wins
QS_RANKING_BANDS = (
    (50, -0.15),
    (100, -0.10),
    (200, -0.05),
)


def ranking_impact(qs_ranking: Optional[int]) -> float:
    """Monotonic penalty by QS rank band; 0 outside the top 200 or unranked."""
    if qs_ranking is None:
        return 0.0
    for upper_bound, impact in QS_RANKING_BANDS:
        if qs_ranking <= upper_bound:
            return impact
    return 0.0


class RankingSignal(BaseSignal[ProgramRequirement]):
    """
    Institutional ranking signal for logit scoring.

    The impact is also the `ranking` feature; a factor is emitted only
    when the penalty is non-zero.
    """

    @property
    def name(self) -> str:
        return "University Ranking"

    def evaluate(
        self,
        profile: StudentProfile,
        target: ProgramRequirement
    ) -> Optional[SignalOutcome]:
        impact = ranking_impact(target.qs_ranking)
        features = {"ranking": impact}
        if impact == 0:
            return SignalOutcome(features=features)

        band = next(bound for bound, value in QS_RANKING_BANDS if value == impact)
        return SignalOutcome(
            factor=Factor(
                self.name,
                impact,
                f"Highly ranked university (QS: {target.qs_ranking})",
            ),
            features=features,
            recommendation=(
                f"QS top-{band} universities admit few applicants, "
                "balance your list with target and safety options"
            ),
        )


class CompetitionSignal(BaseSignal[CatalogEntry]):
    """
    Informational note for very competitive universities (additive scoring).

    The competition multiplier itself is applied by the additive strategy;
    this factor only explains it.
    """

    @property
    def name(self) -> str:
        return "Competition"

    def is_applicable(self, profile: StudentProfile, target: CatalogEntry) -> bool:
        return target.competition == CompetitionLevel.VERY_HIGH

    def evaluate(
        self,
        profile: StudentProfile,
        target: CatalogEntry
    ) -> Optional[SignalOutcome]:
        if target.acceptance_rate is None:
            description = "High competition at this university"
        else:
            description = (
                f"High competition at this university (acceptance rate {target.acceptance_rate:g}%)"
            )
        return SignalOutcome(factor=Factor(self.name, 0, description))
