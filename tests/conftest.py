"""
Test configuration and fixtures for the Admission Chance Engine.

Provides shared fixtures for unit and integration tests.
"""

import pytest

from admission_engine.config.settings import Settings
from admission_engine.domain.models import (
    CatalogEntry,
    CompetitionLevel,
    HistoricalStats,
    ProgramRecord,
    ProgramRequirement,
    StudentProfile,
)
from admission_engine.infrastructure.sources import (
    InMemoryCatalogSource,
    InMemoryProgramSource,
)


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, environment="testing")


# =============================================================================
# Profile Fixtures
# =============================================================================

@pytest.fixture
def strong_profile():
    """3.8 GPA applicant with IELTS 7.5."""
    return StudentProfile(
        gpa=3.8,
        gpa_scale="4.0",
        english_test="IELTS",
        english_score=7.5,
    )


@pytest.fixture
def empty_profile():
    """Applicant who reported neither GPA nor an English test."""
    return StudentProfile()


@pytest.fixture
def well_rounded_profile():
    """Applicant with achievements, experience and a portfolio."""
    return StudentProfile(
        gpa=3.6,
        english_test="IELTS",
        english_score=7.0,
        olympiads=["National Math Olympiad"],
        volunteering=["Red Cross"],
        leadership=["Student council"],
        has_portfolio=True,
        work_experience_years=2,
        preferred_fields=["computer"],
    )


# =============================================================================
# Program Fixtures
# =============================================================================

@pytest.fixture
def medium_university():
    """Medium-competition catalog entry from the reference scenario."""
    return CatalogEntry(
        id="medium-u",
        name="Medium State University",
        country="Canada",
        region="Canada",
        fields=["Computer Science", "Mathematics"],
        requirement=ProgramRequirement(min_gpa=3.5, min_ielts=6.5, min_toefl=90),
        acceptance_rate=45,
        competition=CompetitionLevel.MEDIUM,
        avg_gpa=3.6,
        avg_ielts=7.0,
        avg_toefl=100,
        scholarship_available=True,
    )


@pytest.fixture
def basic_requirement():
    """Program requirement without ranking or historical stats."""
    return ProgramRequirement(min_gpa=3.0, min_ielts=6.5, min_toefl=80)


@pytest.fixture
def catalog_entries():
    """Small catalog spanning regions, fields and funding options."""
    return [
        CatalogEntry(
            id="elite",
            name="Elite Institute",
            country="United States",
            region="USA",
            fields=["Computer Science", "Physics"],
            requirement=ProgramRequirement(min_gpa=3.8, min_ielts=7.0, requires_sat=True, min_sat=1500),
            acceptance_rate=5,
            competition=CompetitionLevel.VERY_HIGH,
            avg_gpa=3.95,
            avg_ielts=7.5,
            scholarship_available=True,
        ),
        CatalogEntry(
            id="north",
            name="Northern University",
            country="Canada",
            region="Canada",
            fields=["Computer Science", "Business"],
            requirement=ProgramRequirement(min_gpa=3.2, min_ielts=6.5),
            acceptance_rate=50,
            competition=CompetitionLevel.MEDIUM,
            avg_gpa=3.5,
            avg_ielts=7.0,
            scholarship_available=True,
        ),
        CatalogEntry(
            id="euro",
            name="European Technical University",
            country="Germany",
            region="Europe",
            fields=["Engineering", "Informatics"],
            requirement=ProgramRequirement(min_gpa=3.0, min_ielts=6.0),
            acceptance_rate=60,
            competition=CompetitionLevel.LOW,
            avg_gpa=3.3,
            avg_ielts=6.5,
            scholarship_available=False,
        ),
        CatalogEntry(
            id="arts",
            name="College of Arts",
            country="United Kingdom",
            region="UK",
            fields=["Design", "Fine Art"],
            requirement=ProgramRequirement(min_gpa=3.0, min_ielts=6.5, portfolio_required=True),
            acceptance_rate=40,
            competition=CompetitionLevel.HIGH,
            avg_gpa=3.4,
            avg_ielts=7.0,
            scholarship_available=False,
        ),
    ]


@pytest.fixture
def catalog_source(catalog_entries):
    """In-memory catalog source over the sample entries."""
    return InMemoryCatalogSource(catalog_entries)


@pytest.fixture
def program_records():
    """Database-style program records."""
    return [
        ProgramRecord(
            program_id=1,
            program_name="MSc Computer Science",
            university_name="Northern University",
            requirement=ProgramRequirement(min_gpa=3.0, min_ielts=6.5),
        ),
        ProgramRecord(
            program_id=2,
            program_name="MSc Data Science",
            university_name="Selective University",
            requirement=ProgramRequirement(
                min_gpa=3.0,
                qs_ranking=40,
                historical=HistoricalStats(avg_acceptance_rate=50, avg_gpa=3.9, avg_ielts=7.0),
            ),
        ),
    ]


@pytest.fixture
def program_source(program_records):
    """In-memory program source."""
    return InMemoryProgramSource(program_records)
