# Scoring signals submodule
from admission_engine.domain.scoring.signals.academic import (
    GpaSignal,
    GpaBenchmarkSignal,
    GpaGapSignal,
)
from admission_engine.domain.scoring.signals.english import (
    EnglishSignal,
    EnglishBenchmarkSignal,
)
from admission_engine.domain.scoring.signals.standardized_tests import (
    SAT,
    GRE,
    GMAT,
    STANDARDIZED_TESTS,
    StandardizedTestSignal,
    StandardizedTestBenchmarkSignal,
    act_to_sat,
)
from admission_engine.domain.scoring.signals.extracurricular import (
    PortfolioSignal,
    AchievementsSignal,
    ExperienceSignal,
    AchievementsBenchmarkSignal,
)
from admission_engine.domain.scoring.signals.institutional import (
    RankingSignal,
    CompetitionSignal,
    ranking_impact,
)

__all__ = [
    "GpaSignal",
    "GpaBenchmarkSignal",
    "GpaGapSignal",
    "EnglishSignal",
    "EnglishBenchmarkSignal",
    "SAT",
    "GRE",
    "GMAT",
    "STANDARDIZED_TESTS",
    "StandardizedTestSignal",
    "StandardizedTestBenchmarkSignal",
    "act_to_sat",
    "PortfolioSignal",
    "AchievementsSignal",
    "ExperienceSignal",
    "AchievementsBenchmarkSignal",
    "RankingSignal",
    "CompetitionSignal",
    "ranking_impact",
]
