"""
English Proficiency Signals (IELTS / TOEFL)

A missing test is a normal state: it becomes a fixed negative factor
with one recommendation, never an error.
"""

from typing import Optional

from admission_engine.domain.models import (
    CatalogEntry,
    EnglishTest,
    ProgramRequirement,
    StudentProfile,
)
from admission_engine.domain.scoring.interfaces import BaseSignal, Factor, SignalOutcome
from admission_engine.domain.scoring.normalizer import score_margin


IELTS_MAX = 9.0
TOEFL_MAX = 120.0

MISSING_TEST_NAME = "English Test"
MISSING_TEST_DESCRIPTION = "No English test result provided"
MISSING_TEST_RECOMMENDATION = "Take IELTS or TOEFL to demonstrate your English proficiency"

UNKNOWN_TOEFL_DESCRIPTION = "No TOEFL requirement on record, check the university website"
UNKNOWN_TOEFL_RECOMMENDATION = (
    "Check the TOEFL requirement on the program website; if none is published, consider IELTS"
)


def _format_score(score: float) -> str:
    return f"{score:g}"


def english_feature(test: EnglishTest, score: float) -> float:
    """Test score scaled to [0, 1] by the test's maximum."""
    scale = IELTS_MAX if test == EnglishTest.IELTS else TOEFL_MAX
    return score / scale


class EnglishSignal(BaseSignal[ProgramRequirement]):
    """
    English signal for probability (logit) scoring.

    IELTS margins are measured in bands (1.0 = strong),
    TOEFL margins in points (20 = strong).
    """

    STRONG_IELTS_MARGIN = 1.0
    STRONG_TOEFL_MARGIN = 20
    STRONG_IMPACT = 0.2
    MEETS_IMPACT = 0.1
    BELOW_IMPACT = -0.25
    MISSING_IMPACT = -0.2

    @property
    def name(self) -> str:
        return MISSING_TEST_NAME

    def evaluate(
        self,
        profile: StudentProfile,
        target: ProgramRequirement
    ) -> Optional[SignalOutcome]:
        if not profile.has_english_test:
            return SignalOutcome(
                factor=Factor(MISSING_TEST_NAME, self.MISSING_IMPACT, MISSING_TEST_DESCRIPTION),
                recommendation=MISSING_TEST_RECOMMENDATION,
                missing=True,
                slot="english",
            )

        test = EnglishTest(profile.english_test)
        score = profile.english_score
        features = {"english": english_feature(test, score)}

        if test == EnglishTest.IELTS:
            minimum = target.min_ielts
            strong_margin = self.STRONG_IELTS_MARGIN
            if minimum is None:
                return SignalOutcome(features=features)
        else:
            minimum = target.min_toefl
            strong_margin = self.STRONG_TOEFL_MARGIN
            if minimum is None:
                # unverifiable TOEFL score stays out of the model
                return SignalOutcome(
                    factor=Factor(test.value, 0, UNKNOWN_TOEFL_DESCRIPTION),
                    recommendation=UNKNOWN_TOEFL_RECOMMENDATION,
                    missing=True,
                )

        shown = _format_score(score)
        diff = score_margin(score, minimum)
        if diff >= strong_margin:
            factor = Factor(test.value, self.STRONG_IMPACT, f"Excellent {test.value} result ({shown})")
        elif diff >= 0:
            factor = Factor(test.value, self.MEETS_IMPACT, f"{test.value} ({shown}) meets the requirement")
        else:
            return SignalOutcome(
                factor=Factor(
                    test.value,
                    self.BELOW_IMPACT,
                    f"{test.value} ({shown}) is below the requirement ({_format_score(minimum)})",
                ),
                features=features,
                recommendation=f"Improve your {test.value} score to at least {_format_score(minimum)}",
            )
        return SignalOutcome(factor=factor, features=features)


class EnglishBenchmarkSignal(BaseSignal[CatalogEntry]):
    """
    English signal for additive (points) scoring.

    Benchmarks the score against the admitted average for the same test,
    then against the minimum.
    """

    ABOVE_AVERAGE_POINTS = 15
    MEETS_MINIMUM_POINTS = 8
    BELOW_MINIMUM_POINTS = -25
    MISSING_POINTS = -20

    @property
    def name(self) -> str:
        return MISSING_TEST_NAME

    def evaluate(
        self,
        profile: StudentProfile,
        target: CatalogEntry
    ) -> Optional[SignalOutcome]:
        if not profile.has_english_test:
            return SignalOutcome(
                factor=Factor(MISSING_TEST_NAME, self.MISSING_POINTS, MISSING_TEST_DESCRIPTION),
                recommendation=MISSING_TEST_RECOMMENDATION,
                missing=True,
            )

        test = EnglishTest(profile.english_test)
        score = profile.english_score
        shown = _format_score(score)
        features = {"english": english_feature(test, score)}

        if test == EnglishTest.IELTS:
            average = target.avg_ielts
            minimum = target.requirement.min_ielts
        else:
            average = target.avg_toefl
            minimum = target.requirement.min_toefl

        if average is not None and score_margin(score, average) >= 0:
            return SignalOutcome(
                factor=Factor(
                    test.value,
                    self.ABOVE_AVERAGE_POINTS,
                    f"Excellent {test.value} result ({shown}), above the average",
                ),
                features=features,
            )

        if minimum is None:
            return SignalOutcome(
                factor=Factor(
                    test.value,
                    0,
                    f"No {test.value} requirement on record, check the university website",
                ),
                features=features,
                recommendation=(
                    UNKNOWN_TOEFL_RECOMMENDATION if test == EnglishTest.TOEFL
                    else "Check the IELTS requirement on the university website"
                ),
                missing=True,
            )

        if score_margin(score, minimum) >= 0:
            return SignalOutcome(
                factor=Factor(
                    test.value,
                    self.MEETS_MINIMUM_POINTS,
                    f"{test.value} result ({shown}) meets the requirement",
                ),
                features=features,
            )

        shown_min = _format_score(minimum)
        return SignalOutcome(
            factor=Factor(
                test.value,
                self.BELOW_MINIMUM_POINTS,
                f"{test.value} result ({shown}) is below the minimum requirement ({shown_min})",
            ),
            features=features,
            recommendation=f"Improve your {test.value} result to at least {shown_min}",
        )
