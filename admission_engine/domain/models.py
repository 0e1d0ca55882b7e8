"""
Domain Models for the Admission Chance Engine

Pure Pydantic models with no framework dependencies.
These models define the applicant, program and catalog records the
scoring pipeline consumes. All of them are frozen: a record never
changes while it is being scored.
"""

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GpaScale(str, Enum):
    """Grading scales an applicant may report GPA on."""
    FOUR = "4.0"
    FIVE = "5.0"
    HUNDRED = "100"


class EnglishTest(str, Enum):
    """English proficiency tests."""
    IELTS = "IELTS"
    TOEFL = "TOEFL"
    NONE = "none"


class BudgetMode(str, Enum):
    """How the applicant intends to fund studies."""
    SCHOLARSHIP = "scholarship"
    PAID = "paid"
    BOTH = "both"


class CompetitionLevel(str, Enum):
    """Coarse selectivity tier of a university."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"


ENGLISH_SCORE_MAX = {
    EnglishTest.IELTS: 9.0,
    EnglishTest.TOEFL: 120.0,
}


class StudentProfile(BaseModel):
    """Self-reported applicant profile."""

    model_config = ConfigDict(frozen=True)

    # Academic
    gpa: Optional[float] = Field(None, ge=0.0)
    gpa_scale: GpaScale = GpaScale.FOUR
    english_test: Optional[EnglishTest] = None
    english_score: Optional[float] = Field(None, ge=0.0)
    sat_score: Optional[int] = Field(None, ge=0)
    act_score: Optional[int] = Field(None, ge=0)
    gre_score: Optional[int] = Field(None, ge=0)
    gmat_score: Optional[int] = Field(None, ge=0)

    # Achievements
    olympiads: List[str] = Field(default_factory=list)
    sports: List[str] = Field(default_factory=list)
    volunteering: List[str] = Field(default_factory=list)
    leadership: List[str] = Field(default_factory=list)
    other_achievements: List[str] = Field(default_factory=list)

    # Application material
    has_portfolio: bool = False
    work_experience_years: float = Field(0.0, ge=0.0)

    # Preferences
    preferred_regions: List[str] = Field(default_factory=list)
    preferred_countries: List[str] = Field(default_factory=list)
    preferred_fields: List[str] = Field(default_factory=list)
    budget: Optional[BudgetMode] = None

    @field_validator("preferred_fields")
    @classmethod
    def strip_blank_fields(cls, v: List[str]) -> List[str]:
        return [f.strip() for f in v if f.strip()]

    @model_validator(mode="after")
    def validate_english_score(self) -> "StudentProfile":
        """English score must fit the reported test's scale."""
        if self.english_score is None or self.english_test in (None, EnglishTest.NONE):
            return self
        maximum = ENGLISH_SCORE_MAX[self.english_test]
        if self.english_score > maximum:
            raise ValueError(
                f"{self.english_test.value} score must be at most {maximum:g}, got {self.english_score:g}"
            )
        return self

    @property
    def achievement_count(self) -> int:
        """Total number of listed extracurricular achievements."""
        return (
            len(self.olympiads)
            + len(self.sports)
            + len(self.volunteering)
            + len(self.leadership)
            + len(self.other_achievements)
        )

    @property
    def has_english_test(self) -> bool:
        """True when a real test and its score were both reported."""
        return (
            self.english_test is not None
            and self.english_test != EnglishTest.NONE
            and self.english_score is not None
        )


class HistoricalStats(BaseModel):
    """Trailing 3-year admission statistics for a program."""

    model_config = ConfigDict(frozen=True)

    avg_acceptance_rate: Optional[float] = Field(None, ge=0.0, le=100.0)  # percent
    avg_gpa: Optional[float] = Field(None, ge=0.0, le=4.0)
    avg_ielts: Optional[float] = Field(None, ge=0.0, le=9.0)


class ProgramRequirement(BaseModel):
    """Admission thresholds and ranking metadata for one program."""

    model_config = ConfigDict(frozen=True)

    min_gpa: Optional[float] = Field(None, ge=0.0, le=4.0)
    min_ielts: Optional[float] = Field(None, ge=0.0, le=9.0)
    min_toefl: Optional[int] = Field(None, ge=0, le=120)

    requires_sat: bool = False
    min_sat: Optional[int] = Field(None, ge=400, le=1600)
    requires_gre: bool = False
    min_gre: Optional[int] = Field(None, ge=260, le=340)
    requires_gmat: bool = False
    min_gmat: Optional[int] = Field(None, ge=200, le=800)
    portfolio_required: bool = False

    qs_ranking: Optional[int] = Field(None, ge=1)
    the_ranking: Optional[int] = Field(None, ge=1)

    historical: Optional[HistoricalStats] = None


class ProgramRecord(BaseModel):
    """A single database-backed program as resolved by a program source."""

    model_config = ConfigDict(frozen=True)

    program_id: int
    program_name: str = ""
    university_name: str = ""
    requirement: ProgramRequirement = Field(default_factory=ProgramRequirement)


class CatalogEntry(BaseModel):
    """University catalog record (program requirements + university metadata)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    country: str
    city: Optional[str] = None
    region: str
    degree: str = "Both"  # Bachelor, Master, Both
    fields: List[str] = Field(default_factory=list)

    requirement: ProgramRequirement = Field(default_factory=ProgramRequirement)

    # Statistics
    acceptance_rate: Optional[float] = Field(None, ge=0.0, le=100.0)
    competition: CompetitionLevel = CompetitionLevel.MEDIUM
    avg_gpa: Optional[float] = Field(None, ge=0.0, le=4.0)
    avg_ielts: Optional[float] = Field(None, ge=0.0, le=9.0)
    avg_toefl: Optional[int] = Field(None, ge=0, le=120)

    # Additional info
    tuition: Optional[float] = Field(None, ge=0.0)
    scholarship_available: bool = False
    description: Optional[str] = None
