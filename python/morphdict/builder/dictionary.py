"""Dictionary builder for generated output.

Merges ingested entries per language and writes one generated file
per language.

Output structure:
    <output_dir>/
    └── es/
        └── dictionary.py    (or dictionary.go / dictionary.json)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..schema import Entry, Dictionary
from ..ingest.base import IngestResult
from .render import get_renderer


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_entries: int = 0
    by_language: dict[str, int] = field(default_factory=dict)
    by_pos: dict[str, int] = field(default_factory=dict)
    files_written: list[str] = field(default_factory=list)


class DictionaryBuilder:
    """Builds generated dictionary files from ingested entries."""

    def __init__(self, output_dir: Path | str, output_format: str = "python"):
        """Initialize builder.

        Args:
            output_dir: Base directory for output files.
            output_format: Renderer name ("python", "go" or "json").

        Raises:
            ValueError: If the format is unknown.
        """
        self.output_dir = Path(output_dir)
        self.renderer = get_renderer(output_format)

        # Internal storage: language -> Dictionary
        self._dicts: dict[str, Dictionary] = {}

    def _get_or_create(self, language: str) -> Dictionary:
        if language not in self._dicts:
            self._dicts[language] = Dictionary(language=language)
        return self._dicts[language]

    def add_result(self, result: IngestResult) -> int:
        """Add entries from an IngestResult, in file order.

        Args:
            result: IngestResult from an ingestor.

        Returns:
            Number of forms inserted (duplicates excluded).
        """
        dictionary = self._get_or_create(result.language)
        inserted = 0
        for entry in result.entries:
            if dictionary.add_entry(entry):
                inserted += 1
        return inserted

    def add_entry(self, entry: Entry, language: str) -> bool:
        """Add a single entry.

        Args:
            entry: Entry to add.
            language: Language code.
        """
        return self._get_or_create(language).add_entry(entry)

    def get_languages(self) -> list[str]:
        """Get list of languages with entries."""
        return list(self._dicts.keys())

    def get_dictionary(self, language: str) -> Optional[Dictionary]:
        return self._dicts.get(language)

    def get_entry_count(
        self,
        language: Optional[str] = None,
        pos: Optional[str] = None
    ) -> int:
        """Get form count, optionally filtered."""
        languages = [language] if language else self._dicts.keys()
        return sum(
            self._dicts[lang].count(pos) for lang in languages if lang in self._dicts
        )

    def build(self) -> BuildStats:
        """Render and write one file per language.

        Returns:
            BuildStats with counts and file paths.
        """
        stats = BuildStats()

        for language, dictionary in self._dicts.items():
            lang_dir = self.output_dir / language
            lang_dir.mkdir(parents=True, exist_ok=True)

            for pos, forms in dictionary.entries.items():
                stats.total_entries += len(forms)
                stats.by_pos[pos] = stats.by_pos.get(pos, 0) + len(forms)
            stats.by_language[language] = dictionary.count()

            filepath = lang_dir / self.renderer.filename()
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(self.renderer.render(dictionary))
            stats.files_written.append(str(filepath))

        return stats
