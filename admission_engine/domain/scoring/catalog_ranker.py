"""
Catalog Filter & Ranker

Applies the applicant's preference filters to a collection of catalog
entries, scores the survivors and orders them by descending score.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from admission_engine.domain.models import BudgetMode, CatalogEntry, StudentProfile
from admission_engine.domain.scoring.admission_scorer import AdmissionScorer
from admission_engine.domain.scoring.interfaces import ScoringResult
from admission_engine.domain.scoring.strategies import AdditiveStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedProgram:
    """A catalog entry together with its scoring result."""
    entry: CatalogEntry
    result: ScoringResult

    def to_dict(self) -> dict:
        return {
            "id": self.entry.id,
            "name": self.entry.name,
            "country": self.entry.country,
            "region": self.entry.region,
            **self.result.to_dict(),
        }


def matches_preferences(entry: CatalogEntry, profile: StudentProfile) -> bool:
    """
    Check an entry against the profile's preference filters.

    - regions / countries: membership, when any are set
    - fields: case-insensitive substring of any program field
    - budget: scholarship mode requires an available scholarship
    """
    if profile.preferred_regions and entry.region not in profile.preferred_regions:
        return False

    if profile.preferred_countries and entry.country not in profile.preferred_countries:
        return False

    if profile.preferred_fields:
        wanted = [f.lower() for f in profile.preferred_fields]
        if not any(w in field.lower() for field in entry.fields for w in wanted):
            return False

    if profile.budget == BudgetMode.SCHOLARSHIP and not entry.scholarship_available:
        return False

    return True


def filter_catalog(
    entries: Iterable[CatalogEntry],
    profile: StudentProfile,
) -> List[CatalogEntry]:
    """Entries matching the profile's preferences, in original order."""
    return [e for e in entries if matches_preferences(e, profile)]


def filter_ranked(
    ranked: Iterable[RankedProgram],
    profile: StudentProfile,
) -> List[RankedProgram]:
    """Re-apply preference filters to an already ranked list, keeping its order."""
    return [r for r in ranked if matches_preferences(r.entry, profile)]


class CatalogRanker:
    """
    Filters and ranks catalog entries with the additive strategy.

    Ties keep the catalog order (stable sort).
    """

    def __init__(self, scorer: Optional[AdmissionScorer[CatalogEntry]] = None):
        self._scorer = scorer or AdmissionScorer(AdditiveStrategy())

    def rank(
        self,
        profile: StudentProfile,
        entries: Iterable[CatalogEntry],
        limit: Optional[int] = None,
    ) -> List[RankedProgram]:
        entries = list(entries)
        candidates = filter_catalog(entries, profile)
        logger.info(f"[RANKER] {len(candidates)} of {len(entries)} catalog entries match preferences")

        scored = [
            RankedProgram(entry=entry, result=self._scorer.score(profile, entry))
            for entry in candidates
        ]
        ranked = sorted(scored, key=lambda r: r.result.score, reverse=True)

        if limit is not None:
            ranked = ranked[:limit]
        return ranked
