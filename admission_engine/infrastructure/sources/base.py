"""
Data Source Interfaces

Read-only, async interfaces the engine depends on for its inputs.
Follows Dependency Inversion: services depend on these abstractions,
satisfied by an in-memory collection or a query against persisted records.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from admission_engine.domain.models import CatalogEntry, ProgramRecord


class ICatalogSource(ABC):
    """Source of catalog entries for filtering and ranking."""

    @abstractmethod
    async def list_entries(self) -> List[CatalogEntry]:
        """Get all catalog entries in a stable order."""
        pass


class IProgramSource(ABC):
    """Resolves a program identifier to its requirement record."""

    @abstractmethod
    async def get_program(self, program_id: int) -> Optional[ProgramRecord]:
        """
        Get a single program by ID.

        Returns:
            ProgramRecord or None if not found
        """
        pass
