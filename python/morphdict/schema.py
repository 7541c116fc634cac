"""Entry schema and data structures for morphdict.

Core concept:
    - Each input line is an Entry: surface form, lemma and a PoS tag
    - The first character of the tag selects a coarse PoS category
    - A Dictionary maps category -> form -> lemma, first occurrence wins

Example:
    "canción canción NCFS000" → Dictionary["NOUN"]["canción"] = "canción"
    and, as unaccented fallback, Dictionary["NOUN"]["cancion"] = "canción"
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional
import json

from .normalizer import accent_variant


class PosCategory(Enum):
    """Coarse part-of-speech category used as top-level dictionary key."""

    DET = "DET"
    ADJ = "ADJ"
    NOUN = "NOUN"
    VERB = "VERB"
    ADV = "ADV"
    ADP = "ADP"
    CONJ = "CONJ"
    PRON = "PRON"
    INTJ = "INTJ"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["PosCategory"]:
        """Get PosCategory from the first character of an EAGLES tag."""
        if not tag:
            return None
        mapping = {
            "D": cls.DET,   # determiner
            "A": cls.ADJ,   # adjective
            "N": cls.NOUN,  # noun
            "V": cls.VERB,  # verb
            "R": cls.ADV,   # adverb
            "S": cls.ADP,   # adposition
            "C": cls.CONJ,  # conjunction
            "P": cls.PRON,  # pronoun
            "I": cls.INTJ,  # interjection
        }
        return mapping.get(tag[0])


@dataclass
class Entry:
    """A single form/lemma/tag triple with its origin."""

    form: str
    lemma: str
    tag: str
    source_path: Optional[str] = None
    line_number: Optional[int] = None

    @property
    def category(self) -> Optional[PosCategory]:
        return PosCategory.from_tag(self.tag)


@dataclass
class Dictionary:
    """Per-language lookup table: PoS key -> form -> lemma."""

    language: str
    entries: dict[str, dict[str, str]] = field(default_factory=dict)

    def add_entry(self, entry: Entry) -> bool:
        """Add an entry, keeping the first lemma seen for each form.

        When the form is new and carries accents, its unaccented spelling
        is added too unless that spelling is already taken.

        Args:
            entry: Entry to merge.

        Returns:
            True if the form was inserted, False if skipped or duplicate.
        """
        category = entry.category
        if category is None:
            return False

        forms = self.entries.setdefault(category.value, {})
        if entry.form in forms:
            return False

        forms[entry.form] = entry.lemma
        variant = accent_variant(entry.form)
        if variant is not None and variant not in forms:
            forms[variant] = entry.lemma
        return True

    def get_lemma(self, form: str, pos: Optional[str] = None) -> Optional[str]:
        """Look up the lemma of a form.

        Args:
            form: Surface form.
            pos: PoS key to search; all categories in sorted order if None.

        Returns:
            Lemma or None if the form is unknown.
        """
        keys = [pos] if pos else sorted(self.entries)
        for key in keys:
            lemma = self.entries.get(key, {}).get(form)
            if lemma is not None:
                return lemma
        return None

    def count(self, pos: Optional[str] = None) -> int:
        """Get number of forms, optionally for one PoS key."""
        if pos is not None:
            return len(self.entries.get(pos, {}))
        return sum(len(forms) for forms in self.entries.values())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization, keys sorted."""
        return {
            "language": self.language,
            "entries": {
                pos: dict(sorted(forms.items()))
                for pos, forms in sorted(self.entries.items())
            },
        }

    def to_json(self) -> str:
        """Serialize to the JSON document written by save()."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"

    def save(self, filepath: Path) -> None:
        """Save dictionary to JSON file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.to_json())

    @classmethod
    def load(cls, filepath: Path) -> "Dictionary":
        """Load dictionary from JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        return cls(
            language=data["language"],
            entries={
                pos: dict(forms) for pos, forms in data.get("entries", {}).items()
            },
        )
