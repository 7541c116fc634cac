"""Dictionary ingestion module.

Provides pluggable ingestors for morphological dictionary formats:
- FreeLing MM.* files (form lemma tag per line)
- Custom formats via register_ingestor()

Usage:
    from morphdict.ingest import freeling

    result = freeling.ingest("data/es/MM.nom", language="es")
"""

from .base import Ingestor, IngestResult, MalformedEntryError
from . import freeling

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "freeling": freeling.FreelingIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


__all__ = [
    "Ingestor",
    "IngestResult",
    "MalformedEntryError",
    "freeling",
    "get_ingestor",
    "register_ingestor",
    "INGESTORS",
]
