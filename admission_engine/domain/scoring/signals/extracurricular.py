"""
Extracurricular Signals (Portfolio, Achievements, Work Experience)
"""

from typing import Optional

from admission_engine.domain.models import CatalogEntry, ProgramRequirement, StudentProfile
from admission_engine.domain.scoring.interfaces import BaseSignal, Factor, SignalOutcome


CAP = 5  # items / years counted


def _capped_feature(value: float) -> float:
    return min(value / CAP, 1.0)


def _capped_impact(value: float, per_unit: float) -> float:
    return round(per_unit * min(value, CAP), 4)


class PortfolioSignal(BaseSignal[ProgramRequirement]):
    """
    Portfolio signal; only evaluated when the program requires one.

    "Not required" and "required but missing" are different outcomes.
    """

    PROVIDED_IMPACT = 0.05
    MISSING_IMPACT = -0.1

    @property
    def name(self) -> str:
        return "Portfolio"

    def is_applicable(self, profile: StudentProfile, target: ProgramRequirement) -> bool:
        return target.portfolio_required

    def evaluate(
        self,
        profile: StudentProfile,
        target: ProgramRequirement
    ) -> Optional[SignalOutcome]:
        if profile.has_portfolio:
            return SignalOutcome(
                factor=Factor(self.name, self.PROVIDED_IMPACT, "Portfolio provided"),
                features={"portfolio": 1.0},
            )
        return SignalOutcome(
            factor=Factor(self.name, self.MISSING_IMPACT, "A portfolio is required"),
            features={"portfolio": 0.0},
            recommendation="Prepare a portfolio for your application",
            missing=True,
            slot="portfolio",
        )


class AchievementsSignal(BaseSignal[ProgramRequirement]):
    """Achievements signal for logit scoring: capped linear, 0.05 per item."""

    PER_ITEM_IMPACT = 0.05

    @property
    def name(self) -> str:
        return "Achievements"

    def is_applicable(self, profile: StudentProfile, target: ProgramRequirement) -> bool:
        return profile.achievement_count > 0

    def evaluate(
        self,
        profile: StudentProfile,
        target: ProgramRequirement
    ) -> Optional[SignalOutcome]:
        count = profile.achievement_count
        return SignalOutcome(
            factor=Factor(
                self.name,
                _capped_impact(count, self.PER_ITEM_IMPACT),
                f"Extracurricular achievements ({count})",
            ),
            features={"achievements": _capped_feature(count)},
        )


class ExperienceSignal(BaseSignal[ProgramRequirement]):
    """Work experience signal: capped linear, 0.05 per year."""

    PER_YEAR_IMPACT = 0.05

    @property
    def name(self) -> str:
        return "Experience"

    def is_applicable(self, profile: StudentProfile, target: ProgramRequirement) -> bool:
        return profile.work_experience_years > 0

    def evaluate(
        self,
        profile: StudentProfile,
        target: ProgramRequirement
    ) -> Optional[SignalOutcome]:
        years = profile.work_experience_years
        return SignalOutcome(
            factor=Factor(
                self.name,
                _capped_impact(years, self.PER_YEAR_IMPACT),
                f"Work experience ({years:g} years)",
            ),
            features={"experience": _capped_feature(years)},
        )


class AchievementsBenchmarkSignal(BaseSignal[CatalogEntry]):
    """Achievements signal for additive scoring; no achievements costs points."""

    SIGNIFICANT_COUNT = 3
    SIGNIFICANT_POINTS = 10
    SOME_POINTS = 5
    NONE_POINTS = -5

    @property
    def name(self) -> str:
        return "Achievements"

    def evaluate(
        self,
        profile: StudentProfile,
        target: CatalogEntry
    ) -> Optional[SignalOutcome]:
        count = profile.achievement_count
        features = {"achievements": _capped_feature(count)}

        if count >= self.SIGNIFICANT_COUNT:
            return SignalOutcome(
                factor=Factor(
                    self.name,
                    self.SIGNIFICANT_POINTS,
                    f"You have significant extracurricular achievements ({count})",
                ),
                features=features,
            )
        if count >= 1:
            return SignalOutcome(
                factor=Factor(self.name, self.SOME_POINTS, "You have some extracurricular achievements"),
                features=features,
            )
        return SignalOutcome(
            factor=Factor(self.name, self.NONE_POINTS, "No extracurricular achievements listed"),
            features=features,
            recommendation=(
                "Add extracurricular achievements: olympiads, volunteering, sports or leadership roles"
            ),
        )
