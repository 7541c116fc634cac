"""Base ingestor interface for morphological dictionary sources.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading entries from any source format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from ..schema import Entry

FIELD_COUNT = 3  # form lemma tag


class MalformedEntryError(ValueError):
    """Raised when a source line does not hold exactly form, lemma and tag."""

    def __init__(self, filepath: str, line_number: Optional[int], line: str):
        self.filepath = filepath
        self.line_number = line_number
        self.line = line
        super().__init__(f"Invalid entry {line!r} ({filepath}:{line_number})")


@dataclass
class IngestResult:
    """Result of ingesting a dictionary source."""

    entries: list[Entry]
    source_path: str
    dict_name: str
    language: str
    total_raw: int = 0          # Non-empty lines in source
    total_valid: int = 0        # Entries with a known PoS category
    total_skipped: int = 0      # Entries whose tag maps to no category

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_skipped} skipped)"
        )


class Ingestor(ABC):
    """Base class for dictionary ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (line, line_number) tuples

    Subclasses may override split_line() for other field separators.
    The ingest() method handles validation and Entry creation.
    """

    def __init__(self, language: str):
        """Initialize ingestor.

        Args:
            language: Language code (e.g., "es").
        """
        self.language = language

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse source file and yield (line, line_number) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (line without its line ending, line_number).
        """
        pass

    def split_line(self, line: str) -> list[str]:
        """Split a source line into fields on runs of whitespace."""
        return line.split()

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest dictionary from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with entries in file order and statistics.

        Raises:
            OSError: If the file cannot be read.
            MalformedEntryError: If a line does not have exactly three fields.
        """
        filepath = Path(filepath)
        dict_name = self.get_dict_name(filepath)
        filepath_str = str(filepath.resolve())

        entries: list[Entry] = []
        total_raw = 0
        skipped = 0

        for line, line_num in self.parse(filepath):
            fields = self.split_line(line)
            if not fields:
                continue
            total_raw += 1

            if len(fields) != FIELD_COUNT:
                raise MalformedEntryError(filepath_str, line_num, line)

            form, lemma, tag = fields
            entry = Entry(
                form=form,
                lemma=lemma,
                tag=tag,
                source_path=filepath_str,
                line_number=line_num,
            )
            if entry.category is None:
                skipped += 1
                continue
            entries.append(entry)

        return IngestResult(
            entries=entries,
            source_path=filepath_str,
            dict_name=dict_name,
            language=self.language,
            total_raw=total_raw,
            total_valid=len(entries),
            total_skipped=skipped,
        )
