from admission_engine.infrastructure.sources.base import ICatalogSource, IProgramSource
from admission_engine.infrastructure.sources.in_memory import (
    InMemoryCatalogSource,
    InMemoryProgramSource,
)
from admission_engine.infrastructure.sources.json_loader import (
    SAMPLE_CATALOG_PATH,
    catalog_source_from_file,
    load_catalog,
    load_programs,
    program_source_from_file,
)

__all__ = [
    "ICatalogSource",
    "IProgramSource",
    "InMemoryCatalogSource",
    "InMemoryProgramSource",
    "SAMPLE_CATALOG_PATH",
    "catalog_source_from_file",
    "load_catalog",
    "load_programs",
    "program_source_from_file",
]
