"""
Admission Service

Entry points for the presentation layer. Wires injected data sources to
the scoring engine:

- predict: one database-backed program, logit strategy + historical
  adjustment. Fails with NotFoundError when the program is unknown.
- rank_catalog: every catalog entry matching the applicant's
  preferences, additive strategy, best first.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from admission_engine.config.settings import Settings, get_settings
from admission_engine.domain.models import CatalogEntry, ProgramRequirement, StudentProfile
from admission_engine.domain.scoring import (
    AdditiveStrategy,
    AdmissionScorer,
    CatalogRanker,
    LogitStrategy,
    RankedProgram,
    ScoringResult,
)
from admission_engine.infrastructure.exceptions import NotFoundError, ValidationError
from admission_engine.infrastructure.sources.base import ICatalogSource, IProgramSource

logger = logging.getLogger(__name__)


def parse_profile(data: Dict[str, Any]) -> StudentProfile:
    """
    Validate a raw profile payload.

    Raises:
        ValidationError: before any scoring work is done
    """
    try:
        return StudentProfile.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid student profile",
            errors=e.errors(include_url=False, include_context=False),
            original_error=e,
        )


class AdmissionService:
    """
    Facade over the scoring engine and its data sources.

    Sources are optional so a deployment can expose only the adapter it
    has data for.
    """

    def __init__(
        self,
        program_source: Optional[IProgramSource] = None,
        catalog_source: Optional[ICatalogSource] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._program_source = program_source
        self._catalog_source = catalog_source
        self._program_scorer: AdmissionScorer[ProgramRequirement] = AdmissionScorer(
            LogitStrategy(),
            historical_adjustment_enabled=self._settings.historical_adjustment_enabled,
        )
        self._ranker = CatalogRanker(AdmissionScorer(AdditiveStrategy()))

    async def predict(self, profile: StudentProfile, program_id: int) -> ScoringResult:
        """
        Estimate admission chance for one program.

        Raises:
            NotFoundError: program_id has no backing record
        """
        if self._program_source is None:
            raise NotFoundError(
                "No program source configured",
                source="program",
                identifier=program_id,
            )

        program = await self._program_source.get_program(program_id)
        if program is None:
            logger.info(f"[ADMISSION] Program not found: {program_id}")
            raise NotFoundError(
                f"Program {program_id} not found",
                source="program",
                identifier=program_id,
            )

        result = self._program_scorer.score(profile, program.requirement)
        logger.info(
            f"[ADMISSION] Program {program_id} ({program.program_name or 'unnamed'}): "
            f"{result.score} ({result.category.value})"
        )
        return result

    async def predict_from_dict(self, profile_data: Dict[str, Any], program_id: int) -> ScoringResult:
        return await self.predict(parse_profile(profile_data), program_id)

    async def rank_catalog(
        self,
        profile: StudentProfile,
        limit: Optional[int] = None,
    ) -> List[RankedProgram]:
        """Filter, score and rank the catalog for the applicant."""
        entries: List[CatalogEntry] = []
        if self._catalog_source is not None:
            entries = await self._catalog_source.list_entries()
        else:
            logger.warning("[ADMISSION] No catalog source configured, nothing to rank")

        limit = limit if limit is not None else self._settings.max_ranked_results
        return self._ranker.rank(profile, entries, limit=limit)

    async def rank_catalog_from_dict(
        self,
        profile_data: Dict[str, Any],
        limit: Optional[int] = None,
    ) -> List[RankedProgram]:
        return await self.rank_catalog(parse_profile(profile_data), limit=limit)
