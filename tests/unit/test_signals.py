"""
Unit tests for scoring signals.

Covers both the logit signals (ProgramRequirement targets) and the
additive benchmark signals (CatalogEntry targets).
"""

import pytest

from admission_engine.domain.models import (
    CatalogEntry,
    CompetitionLevel,
    ProgramRequirement,
    StudentProfile,
)
from admission_engine.domain.scoring.signals import (
    GMAT,
    GRE,
    SAT,
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
from admission_engine.domain.scoring.signals.academic import MISSING_GPA_RECOMMENDATION
from admission_engine.domain.scoring.signals.english import (
    MISSING_TEST_DESCRIPTION,
    MISSING_TEST_NAME,
    MISSING_TEST_RECOMMENDATION,
    UNKNOWN_TOEFL_RECOMMENDATION,
)
from admission_engine.domain.scoring.signals.institutional import ranking_impact
from admission_engine.domain.scoring.signals.standardized_tests import act_to_sat


# ============== Test Fixtures ==============

def make_entry(**overrides) -> CatalogEntry:
    data = dict(
        id="u",
        name="Test University",
        country="Canada",
        region="Canada",
        requirement=ProgramRequirement(min_gpa=3.5, min_ielts=6.5, min_toefl=90),
        competition=CompetitionLevel.MEDIUM,
        avg_gpa=3.6,
        avg_ielts=7.0,
        avg_toefl=100,
    )
    data.update(overrides)
    return CatalogEntry(**data)


@pytest.fixture
def requirement():
    """Requirement with GPA and English minimums."""
    return ProgramRequirement(min_gpa=3.0, min_ielts=6.5, min_toefl=80)


# ============== GPA (logit) ==============

class TestGpaSignal:
    """Tests for the logit GPA signal."""

    def test_strong_margin(self, requirement):
        """0.3 or more above the minimum is the strongest band."""
        outcome = GpaSignal().evaluate(StudentProfile(gpa=3.3), requirement)
        assert outcome.factor.impact == 0.25
        assert outcome.features["gpa"] == pytest.approx(3.3 / 4.0)

    def test_meets_minimum(self, requirement):
        """At or just above the minimum."""
        outcome = GpaSignal().evaluate(StudentProfile(gpa=3.0), requirement)
        assert outcome.factor.impact == 0.15
        assert outcome.recommendation is None

    def test_below_minimum(self, requirement):
        """Below the minimum yields a penalty and a recommendation."""
        outcome = GpaSignal().evaluate(StudentProfile(gpa=2.8), requirement)
        assert outcome.factor.impact == -0.2
        assert outcome.recommendation == "Raise your GPA to at least 3.0"

    def test_missing_gpa_is_a_factor_not_an_error(self, requirement):
        """No GPA yields a penalty factor and a zero feature."""
        outcome = GpaSignal().evaluate(StudentProfile(), requirement)
        assert outcome.factor.impact == -0.2
        assert outcome.features["gpa"] == 0.0
        assert outcome.recommendation == MISSING_GPA_RECOMMENDATION
        assert outcome.deficient

    def test_no_published_minimum(self):
        """Without a minimum only the feature is contributed."""
        outcome = GpaSignal().evaluate(StudentProfile(gpa=3.5), ProgramRequirement())
        assert outcome.factor is None
        assert outcome.features["gpa"] == pytest.approx(0.875)


# ============== GPA (additive) ==============

class TestGpaBenchmarkSignal:
    """Tests for the additive GPA benchmark."""

    def test_average_takes_priority(self):
        """GPA equal to the admitted average scores +20, not +10."""
        outcome = GpaBenchmarkSignal().evaluate(StudentProfile(gpa=3.6), make_entry())
        assert outcome.factor.impact == 20

    def test_meets_minimum_only(self):
        """Between minimum and average scores +10."""
        outcome = GpaBenchmarkSignal().evaluate(StudentProfile(gpa=3.5), make_entry())
        assert outcome.factor.impact == 10

    def test_below_minimum(self):
        """Below the minimum scores -30 with a recommendation."""
        outcome = GpaBenchmarkSignal().evaluate(StudentProfile(gpa=3.2), make_entry())
        assert outcome.factor.impact == -30
        assert outcome.recommendation == "Raise your GPA to at least 3.5 for this university"

    def test_missing_gpa(self):
        """No GPA scores -15."""
        outcome = GpaBenchmarkSignal().evaluate(StudentProfile(), make_entry())
        assert outcome.factor.impact == -15
        assert outcome.recommendation == MISSING_GPA_RECOMMENDATION

    def test_other_scales_are_normalized_first(self):
        """A 100-point GPA is compared on the 4.0 scale."""
        outcome = GpaBenchmarkSignal().evaluate(StudentProfile(gpa=93, gpa_scale="100"), make_entry())
        assert outcome.factor.impact == 20


class TestGpaGapSignal:
    """Tests for the additive GPA gap penalty."""

    def test_gap_above_threshold(self):
        """More than 0.3 below the average adds a separate factor."""
        entry = make_entry(requirement=ProgramRequirement(min_gpa=3.0))
        outcome = GpaGapSignal().evaluate(StudentProfile(gpa=3.2), entry)
        assert outcome.factor.name == "GPA Gap"
        assert outcome.factor.impact == -10
        assert "3.6" in outcome.recommendation

    def test_gap_at_threshold(self):
        """Exactly 0.3 below the average is not penalized."""
        assert GpaGapSignal().evaluate(StudentProfile(gpa=3.3), make_entry()) is None

    def test_not_applicable_without_gpa(self):
        """Missing GPA is handled by the GPA signal alone."""
        assert not GpaGapSignal().is_applicable(StudentProfile(), make_entry())


# ============== English ==============

class TestEnglishSignal:
    """Tests for the logit English signal."""

    def test_strong_ielts(self, requirement):
        """One full band above the minimum."""
        profile = StudentProfile(english_test="IELTS", english_score=7.5)
        outcome = EnglishSignal().evaluate(profile, requirement)
        assert outcome.factor.name == "IELTS"
        assert outcome.factor.impact == 0.2
        assert outcome.features["english"] == pytest.approx(7.5 / 9.0)

    def test_toefl_meets(self, requirement):
        """TOEFL less than 20 points above the minimum."""
        profile = StudentProfile(english_test="TOEFL", english_score=95)
        outcome = EnglishSignal().evaluate(profile, requirement)
        assert outcome.factor.impact == 0.1
        assert outcome.features["english"] == pytest.approx(95 / 120.0)

    def test_ielts_below(self, requirement):
        """Below the minimum band."""
        profile = StudentProfile(english_test="IELTS", english_score=6.0)
        outcome = EnglishSignal().evaluate(profile, requirement)
        assert outcome.factor.impact == -0.25
        assert outcome.recommendation == "Improve your IELTS score to at least 6.5"

    def test_unknown_toefl_requirement(self):
        """No TOEFL minimum on record is a neutral, actionable factor."""
        profile = StudentProfile(english_test="TOEFL", english_score=100)
        outcome = EnglishSignal().evaluate(profile, ProgramRequirement(min_ielts=6.5))
        assert outcome.factor.impact == 0
        assert outcome.recommendation == UNKNOWN_TOEFL_RECOMMENDATION
        assert outcome.deficient
        assert "english" not in outcome.features

    def test_unknown_ielts_requirement(self):
        """No IELTS minimum contributes the feature only."""
        profile = StudentProfile(english_test="IELTS", english_score=7.0)
        outcome = EnglishSignal().evaluate(profile, ProgramRequirement())
        assert outcome.factor is None

    @pytest.mark.parametrize(
        "profile",
        [
            StudentProfile(),
            StudentProfile(english_test="none"),
            StudentProfile(english_test="IELTS"),
        ],
    )
    def test_missing_test(self, profile, requirement):
        """Absent, 'none' or score-less tests are all treated as missing."""
        outcome = EnglishSignal().evaluate(profile, requirement)
        assert outcome.factor.name == MISSING_TEST_NAME
        assert outcome.factor.impact == -0.2
        assert outcome.recommendation == MISSING_TEST_RECOMMENDATION
        assert "english" not in outcome.features


class TestEnglishBenchmarkSignal:
    """Tests for the additive English benchmark."""

    def test_ielts_above_average(self):
        """IELTS at the admitted average scores +15."""
        profile = StudentProfile(english_test="IELTS", english_score=7.0)
        assert EnglishBenchmarkSignal().evaluate(profile, make_entry()).factor.impact == 15

    def test_ielts_meets_minimum(self):
        """IELTS between minimum and average scores +8."""
        profile = StudentProfile(english_test="IELTS", english_score=6.5)
        assert EnglishBenchmarkSignal().evaluate(profile, make_entry()).factor.impact == 8

    def test_toefl_uses_toefl_average(self):
        """TOEFL is benchmarked against the TOEFL average, not IELTS."""
        profile = StudentProfile(english_test="TOEFL", english_score=95)
        outcome = EnglishBenchmarkSignal().evaluate(profile, make_entry())
        assert outcome.factor.name == "TOEFL"
        assert outcome.factor.impact == 8

    def test_toefl_below_minimum(self):
        """TOEFL below the minimum scores -25."""
        profile = StudentProfile(english_test="TOEFL", english_score=85)
        outcome = EnglishBenchmarkSignal().evaluate(profile, make_entry())
        assert outcome.factor.impact == -25
        assert outcome.recommendation == "Improve your TOEFL result to at least 90"

    def test_unknown_toefl_requirement(self):
        """Unknown TOEFL minimum is neutral with a verify recommendation."""
        entry = make_entry(requirement=ProgramRequirement(min_ielts=6.5), avg_toefl=None)
        profile = StudentProfile(english_test="TOEFL", english_score=100)
        outcome = EnglishBenchmarkSignal().evaluate(profile, entry)
        assert outcome.factor.impact == 0
        assert outcome.recommendation == UNKNOWN_TOEFL_RECOMMENDATION

    def test_missing_test_is_fixed(self):
        """Missing test always yields the same single factor."""
        for entry in (make_entry(), make_entry(competition=CompetitionLevel.LOW, avg_ielts=None)):
            outcome = EnglishBenchmarkSignal().evaluate(StudentProfile(gpa=3.5), entry)
            assert outcome.factor.name == MISSING_TEST_NAME
            assert outcome.factor.impact == -20
            assert outcome.factor.description == MISSING_TEST_DESCRIPTION
            assert outcome.recommendation == MISSING_TEST_RECOMMENDATION


# ============== Standardized Tests ==============

class TestStandardizedTests:
    """Tests for SAT / GRE / GMAT signals."""

    def test_act_conversion(self):
        """ACT scores use the concordance table."""
        assert act_to_sat(36) == 1600
        assert act_to_sat(32) == 1450
        assert act_to_sat(13) == 760

    def test_act_conversion_below_table(self):
        """Scores under the table keep falling, down to 400."""
        assert act_to_sat(12) == 720
        assert act_to_sat(1) == 400
        assert act_to_sat(0) == 400

    def test_act_conversion_is_monotonic(self):
        """A better ACT never converts to a lower SAT."""
        converted = [act_to_sat(act) for act in range(1, 37)]
        assert converted == sorted(converted)
        assert act_to_sat(40) == 1600

    def test_not_applicable_when_not_required(self):
        """Tests are only evaluated for programs that require them."""
        signal = StandardizedTestSignal(SAT)
        assert not signal.is_applicable(StudentProfile(sat_score=1500), ProgramRequirement())

    def test_default_minimum_when_unpublished(self):
        """Without a published minimum the default threshold applies."""
        requirement = ProgramRequirement(requires_sat=True)
        outcome = StandardizedTestSignal(SAT).evaluate(StudentProfile(sat_score=1380), requirement)
        assert outcome.factor.impact == -0.1
        assert outcome.recommendation == "Raise your SAT score to at least 1400"

    def test_act_stands_in_for_sat(self):
        """ACT 32 converts to SAT 1450, which meets the default."""
        requirement = ProgramRequirement(requires_sat=True)
        profile = StudentProfile(act_score=32)
        signal = StandardizedTestSignal(SAT)
        assert signal.is_applicable(profile, requirement)
        outcome = signal.evaluate(profile, requirement)
        assert outcome.factor.impact == 0.1
        assert outcome.features["sat"] == pytest.approx(1450 / 1600)

    def test_gre_published_minimum(self):
        """A published GRE minimum overrides the default."""
        requirement = ProgramRequirement(requires_gre=True, min_gre=320)
        outcome = StandardizedTestSignal(GRE).evaluate(StudentProfile(gre_score=315), requirement)
        assert outcome.factor.impact == -0.1

    def test_logit_missing_required_test_is_skipped(self):
        """The logit signal does not fire without a score."""
        requirement = ProgramRequirement(requires_gmat=True)
        assert not StandardizedTestSignal(GMAT).is_applicable(StudentProfile(), requirement)

    def test_additive_missing_required_test(self):
        """The additive signal penalizes a missing required test."""
        entry = make_entry(requirement=ProgramRequirement(requires_sat=True, min_sat=1500))
        outcome = StandardizedTestBenchmarkSignal(SAT).evaluate(StudentProfile(), entry)
        assert outcome.factor.impact == -10
        assert outcome.missing

    def test_additive_gmat(self):
        """GMAT meeting the minimum scores +8."""
        entry = make_entry(requirement=ProgramRequirement(requires_gmat=True, min_gmat=680))
        outcome = StandardizedTestBenchmarkSignal(GMAT).evaluate(StudentProfile(gmat_score=700), entry)
        assert outcome.factor.impact == 8


# ============== Extracurricular ==============

class TestExtracurricularSignals:
    """Tests for portfolio, achievements and experience."""

    def test_portfolio_not_required(self):
        """Not required: the signal is skipped entirely."""
        assert not PortfolioSignal().is_applicable(StudentProfile(), ProgramRequirement())

    def test_portfolio_required_and_missing(self):
        """Required but missing: penalty plus recommendation."""
        outcome = PortfolioSignal().evaluate(StudentProfile(), ProgramRequirement(portfolio_required=True))
        assert outcome.factor.impact == -0.1
        assert outcome.features["portfolio"] == 0.0
        assert outcome.recommendation == "Prepare a portfolio for your application"

    def test_portfolio_required_and_provided(self):
        """Required and provided: small boost."""
        profile = StudentProfile(has_portfolio=True)
        outcome = PortfolioSignal().evaluate(profile, ProgramRequirement(portfolio_required=True))
        assert outcome.factor.impact == 0.05
        assert outcome.features["portfolio"] == 1.0

    def test_achievements_are_capped(self):
        """Seven achievements count as five."""
        profile = StudentProfile(olympiads=["a", "b", "c"], sports=["d", "e"], leadership=["f", "g"])
        outcome = AchievementsSignal().evaluate(profile, ProgramRequirement())
        assert outcome.factor.impact == 0.25
        assert outcome.features["achievements"] == 1.0

    def test_achievements_linear_below_cap(self):
        """Two achievements."""
        profile = StudentProfile(volunteering=["a"], other_achievements=["b"])
        outcome = AchievementsSignal().evaluate(profile, ProgramRequirement())
        assert outcome.factor.impact == 0.1
        assert outcome.features["achievements"] == pytest.approx(0.4)

    def test_experience(self):
        """Experience counts per year, capped at five."""
        outcome = ExperienceSignal().evaluate(StudentProfile(work_experience_years=2.5), ProgramRequirement())
        assert outcome.factor.impact == 0.125
        assert outcome.features["experience"] == pytest.approx(0.5)
        assert not ExperienceSignal().is_applicable(StudentProfile(), ProgramRequirement())

    @pytest.mark.parametrize(
        "count, impact",
        [(0, -5), (1, 5), (2, 5), (3, 10), (6, 10)],
    )
    def test_additive_achievement_bands(self, count, impact):
        """Additive achievement bands."""
        profile = StudentProfile(other_achievements=[f"a{i}" for i in range(count)])
        outcome = AchievementsBenchmarkSignal().evaluate(profile, make_entry())
        assert outcome.factor.impact == impact


# ============== Institutional ==============

class TestInstitutionalSignals:
    """Tests for ranking and competition."""

    @pytest.mark.parametrize(
        "qs, impact",
        [(None, 0.0), (1, -0.15), (50, -0.15), (51, -0.10), (100, -0.10), (150, -0.05), (200, -0.05), (201, 0.0)],
    )
    def test_ranking_bands(self, qs, impact):
        """Monotonic penalty by QS band."""
        assert ranking_impact(qs) == impact

    def test_ranking_factor_only_when_penalized(self):
        """Unranked programs contribute a zero feature and no factor."""
        outcome = RankingSignal().evaluate(StudentProfile(), ProgramRequirement(qs_ranking=300))
        assert outcome.factor is None
        assert outcome.features["ranking"] == 0.0

    def test_ranking_penalty_factor(self):
        """Top-50 programs emit a penalty with list-balancing advice."""
        outcome = RankingSignal().evaluate(StudentProfile(), ProgramRequirement(qs_ranking=45))
        assert outcome.factor.impact == -0.15
        assert "top-50" in outcome.recommendation

    def test_competition_note(self):
        """Very-high competition adds a neutral note."""
        entry = make_entry(competition=CompetitionLevel.VERY_HIGH, acceptance_rate=4)
        signal = CompetitionSignal()
        assert signal.is_applicable(StudentProfile(), entry)
        outcome = signal.evaluate(StudentProfile(), entry)
        assert outcome.factor.impact == 0
        assert "4%" in outcome.factor.description
        assert not signal.is_applicable(StudentProfile(), make_entry())
