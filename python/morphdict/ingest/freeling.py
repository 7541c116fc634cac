"""FreeLing dictionary ingestor.

Parses the per-category dictionary files shipped with FreeLing
(MM.adj, MM.nom, MM.verb, ...).

Format:
    canción canción NCFS000     # form lemma tag
    cantaba cantar VMII1S0
    (blank lines are ignored)
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import Ingestor, IngestResult

# Files of the FreeLing Spanish dictionary, in load order
FREELING_FILES = {
    "es": [
        "MM.adj",
        "MM.adv",
        "MM.int",
        "MM.nom",
        "MM.tanc",
        "MM.vaux",
        "MM.verb",
    ],
}


class FreelingIngestor(Ingestor):
    """Ingestor for FreeLing form/lemma/tag files."""

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name: MM.adj -> freeling_es_adj."""
        suffix = filepath.suffix.lstrip(".") or filepath.name
        return f"freeling_{self.language}_{suffix}"

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse a FreeLing dictionary file.

        Args:
            filepath: Path to MM.* file.

        Yields:
            Tuples of (line, line_number), blank lines skipped.
        """
        with open(filepath, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                if line.strip():
                    yield line.rstrip("\r\n"), line_num


def ingest(filepath: Path | str, language: str) -> IngestResult:
    """Convenience function to ingest a FreeLing dictionary file.

    Args:
        filepath: Path to MM.* file.
        language: Language code.

    Returns:
        IngestResult with entries.
    """
    ingestor = FreelingIngestor(language=language)
    return ingestor.ingest(filepath)


def get_default_files(language: str, data_dir: Path | str) -> list[Path]:
    """Return the standard file list for a language under data_dir.

    Raises:
        ValueError: If no file list is known for the language.
    """
    if language not in FREELING_FILES:
        raise ValueError(f"No default files for language: {language}")
    return [Path(data_dir) / language / name for name in FREELING_FILES[language]]


def get_supported_languages() -> list[str]:
    """Return list of languages with a known file list."""
    return list(FREELING_FILES.keys())
