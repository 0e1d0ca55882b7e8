"""
In-Memory Data Sources

Collection-backed implementations of the source interfaces. Each instance
owns its own copy of the records; there is no module-level catalog.
"""

from typing import Dict, Iterable, List, Optional

from admission_engine.domain.models import CatalogEntry, ProgramRecord
from admission_engine.infrastructure.sources.base import ICatalogSource, IProgramSource


class InMemoryCatalogSource(ICatalogSource):
    """Catalog held in memory, returned in insertion order."""

    def __init__(self, entries: Iterable[CatalogEntry]):
        self._entries = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    async def list_entries(self) -> List[CatalogEntry]:
        return list(self._entries)


class InMemoryProgramSource(IProgramSource):
    """Programs keyed by program_id."""

    def __init__(self, programs: Iterable[ProgramRecord]):
        self._programs: Dict[int, ProgramRecord] = {p.program_id: p for p in programs}

    async def get_program(self, program_id: int) -> Optional[ProgramRecord]:
        return self._programs.get(program_id)
