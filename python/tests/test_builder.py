"""Tests for the builder module."""

import pytest
import json

from morphdict.schema import Entry, Dictionary
from morphdict.ingest.base import IngestResult
from morphdict.ingest import freeling
from morphdict.builder import DictionaryBuilder, get_renderer, RENDERERS
from morphdict.builder.render import (
    BANNER,
    go_package_name,
    render_go,
    render_json,
    render_python,
)


def create_result(entries: list[tuple[str, str, str]], language: str = "es") -> IngestResult:
    """Helper to create an IngestResult from triples."""
    return IngestResult(
        entries=[Entry(form=f, lemma=l, tag=t) for f, l, t in entries],
        source_path="/test",
        dict_name="test",
        language=language,
        total_raw=len(entries),
        total_valid=len(entries),
    )


def sample_dictionary() -> Dictionary:
    d = Dictionary(language="es")
    d.add_entry(Entry("canción", "canción", "NCFS000"))
    d.add_entry(Entry("cantaba", "cantar", "VMII1S0"))
    d.add_entry(Entry("azul", "azul", "AQ0CS00"))
    return d


class TestDictionaryBuilder:
    """Tests for DictionaryBuilder."""

    def test_add_result(self, tmp_path):
        """Test adding entries to builder."""
        builder = DictionaryBuilder(output_dir=tmp_path)
        inserted = builder.add_result(create_result([
            ("casa", "casa", "NCFS000"),
            ("casas", "casa", "NCFP000"),
            ("casa", "casar", "NCFS000"),
        ]))
        assert inserted == 2
        assert builder.get_entry_count(language="es") == 2
        assert builder.get_dictionary("es").get_lemma("casa") == "casa"

    def test_first_file_wins(self, tmp_path):
        """Test results added earlier win over later ones."""
        builder = DictionaryBuilder(output_dir=tmp_path)
        builder.add_result(create_result([("vino", "vino", "NCMS000")]))
        builder.add_result(create_result([("vino", "venir", "NCMS000")]))
        assert builder.get_dictionary("es").entries["NOUN"]["vino"] == "vino"

    def test_get_entry_count(self, tmp_path):
        """Test count filters."""
        builder = DictionaryBuilder(tmp_path)
        builder.add_entry(Entry("canción", "canción", "NCFS000"), "es")
        builder.add_entry(Entry("cantar", "cantar", "VMN0000"), "es")
        builder.add_entry(Entry("cantare", "cantare", "VMN0000"), "it")

        assert builder.get_entry_count() == 4
        assert builder.get_entry_count(language="es") == 3
        assert builder.get_entry_count(language="es", pos="NOUN") == 2
        assert builder.get_entry_count(pos="VERB") == 2
        assert builder.get_entry_count(language="fr") == 0
        assert sorted(builder.get_languages()) == ["es", "it"]

    def test_unknown_format(self, tmp_path):
        """Test unknown output formats are rejected."""
        with pytest.raises(ValueError):
            DictionaryBuilder(tmp_path, output_format="yaml")

    def test_build_creates_files(self, tmp_path):
        """Test build writes one file per language."""
        builder = DictionaryBuilder(tmp_path, output_format="go")
        builder.add_result(create_result([("canción", "canción", "NCFS000")]))
        builder.add_result(create_result([("gatto", "gatto", "NCMS000")], "it"))

        stats = builder.build()

        assert (tmp_path / "es" / "dictionary.go").exists()
        assert (tmp_path / "it" / "dictionary.go").exists()
        assert len(stats.files_written) == 2
        assert stats.total_entries == 3
        assert stats.by_language == {"es": 2, "it": 1}
        assert stats.by_pos == {"NOUN": 3}

    def test_build_overwrites(self, tmp_path):
        """Test a previous output file is truncated."""
        target = tmp_path / "es" / "dictionary.json"
        target.parent.mkdir(parents=True)
        target.write_text("x" * 10000, encoding="utf-8")

        builder = DictionaryBuilder(tmp_path, output_format="json")
        builder.add_result(create_result([("casa", "casa", "NCFS000")]))
        builder.build()

        loaded = Dictionary.load(target)
        assert loaded.entries == {"NOUN": {"casa": "casa"}}

    def test_build_from_files(self, tmp_path, write_file, sample_noun_content):
        """Test the full ingest and build path."""
        path = write_file("data/es/MM.nom", sample_noun_content)
        builder = DictionaryBuilder(tmp_path / "out")
        builder.add_result(freeling.ingest(path, language="es"))
        builder.build()

        namespace = {}
        source = (tmp_path / "out" / "es" / "dictionary.py").read_text(encoding="utf-8")
        exec(source, namespace)
        table = namespace["DICTIONARY"]

        assert table["NOUN"]["canciones"] == "canción"
        assert table["NOUN"]["cancion"] == "canción"
        assert table["NOUN"]["arbol"] == "árbol"
        assert table["NOUN"]["casa"] == "casa"
        assert table["VERB"] == {"arbol": "arbolar", "casa": "casar"}


class TestRenderers:
    """Tests for output renderers."""

    def test_registry(self):
        """Test available formats."""
        assert set(RENDERERS) == {"python", "go", "json"}
        assert get_renderer("go").filename() == "dictionary.go"
        with pytest.raises(ValueError):
            get_renderer("xml")

    def test_render_python(self):
        """Test Python output is valid and round-trips the table."""
        d = sample_dictionary()
        source = render_python(d)

        assert source.startswith(f"# {BANNER}")
        namespace = {}
        exec(source, namespace)
        assert namespace["DICTIONARY"] == d.entries

    def test_render_python_quotes(self):
        """Test quotes and backslashes are escaped."""
        d = Dictionary(language="es")
        d.add_entry(Entry("o'clock", 'say "hi"\\', "NCMS000"))
        namespace = {}
        exec(render_python(d), namespace)
        assert namespace["DICTIONARY"]["NOUN"]["o'clock"] == 'say "hi"\\'

    def test_render_go(self):
        """Test Go output layout."""
        source = render_go(sample_dictionary())
        lines = source.splitlines()

        assert lines[0] == f"// {BANNER}"
        assert "package es" in lines
        assert "var Dictionary = map[string]map[string]string{" in lines
        assert '\t"ADJ": {' in lines
        assert '\t\t"cancion": "canción",' in lines
        assert source.index('"ADJ"') < source.index('"NOUN"') < source.index('"VERB"')
        assert source.index('"cancion"') < source.index('"canción"')
        assert source.endswith("}\n")

    def test_render_json(self):
        """Test JSON output loads back."""
        d = sample_dictionary()
        data = json.loads(render_json(d))
        assert data["language"] == "es"
        assert data["entries"] == d.entries

    def test_render_deterministic(self):
        """Test insertion order does not change output."""
        a = Dictionary(language="es")
        a.add_entry(Entry("b", "b", "NCMS000"))
        a.add_entry(Entry("a", "a", "NCMS000"))
        b = Dictionary(language="es")
        b.add_entry(Entry("a", "a", "NCMS000"))
        b.add_entry(Entry("b", "b", "NCMS000"))
        for name, renderer in RENDERERS.items():
            assert renderer.render(a) == renderer.render(b), name

    def test_render_go_package_name(self):
        """Test language codes become valid Go package names."""
        assert go_package_name("es") == "es"
        assert go_package_name("pt-BR") == "pt_br"
        assert go_package_name("zh.Hant") == "zh_hant"
        assert go_package_name("123") == "lang_123"

        d = Dictionary(language="pt-BR")
        d.add_entry(Entry("casa", "casa", "NCFS000"))
        assert "package pt_br" in render_go(d).splitlines()
