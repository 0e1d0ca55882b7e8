"""
JSON Catalog Loader

Loads catalog entries and program records from JSON files using
Pydantic TypeAdapters for validation.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from admission_engine.domain.models import CatalogEntry, ProgramRecord
from admission_engine.infrastructure.exceptions import ConfigurationError
from admission_engine.infrastructure.sources.in_memory import (
    InMemoryCatalogSource,
    InMemoryProgramSource,
)

logger = logging.getLogger(__name__)

SAMPLE_CATALOG_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "sample_catalog.json"

_catalog_adapter = TypeAdapter(List[CatalogEntry])
_programs_adapter = TypeAdapter(List[ProgramRecord])


def _read_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Catalog file not found: {path}", original_error=e)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Catalog file is not valid JSON: {path}", original_error=e)


def load_catalog(path: Optional[Union[str, Path]] = None) -> List[CatalogEntry]:
    """
    Load catalog entries from a JSON array.

    Args:
        path: JSON file path; the bundled sample catalog when None

    Raises:
        ConfigurationError: file missing, not JSON, or entries invalid
    """
    path = Path(path) if path else SAMPLE_CATALOG_PATH
    try:
        entries = _catalog_adapter.validate_python(_read_json(path))
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid catalog entries in {path}", original_error=e)

    logger.info(f"[CATALOG] Loaded {len(entries)} entries from {path.name}")
    return entries


def load_programs(path: Union[str, Path]) -> List[ProgramRecord]:
    """Load program records from a JSON array."""
    path = Path(path)
    try:
        programs = _programs_adapter.validate_python(_read_json(path))
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid program records in {path}", original_error=e)

    logger.info(f"[CATALOG] Loaded {len(programs)} programs from {path.name}")
    return programs


def catalog_source_from_file(path: Optional[Union[str, Path]] = None) -> InMemoryCatalogSource:
    return InMemoryCatalogSource(load_catalog(path))


def program_source_from_file(path: Union[str, Path]) -> InMemoryProgramSource:
    return InMemoryProgramSource(load_programs(path))
