"""morphdict - Morphological dictionary generator.

Turns flat "form lemma tag" dictionary files into a generated lookup
table (PoS -> form -> lemma) for a spelling and grammar corrector.

Core concepts:
    - The first character of each tag selects a coarse PoS category
    - The first lemma seen for a form wins, across lines and files
    - Accented forms also register their unaccented spelling

Example:
    "canción canción NCFS000" → NOUN: {"canción": "canción", "cancion": "canción"}

Usage:
    from morphdict.ingest import freeling
    from morphdict.builder import DictionaryBuilder

    builder = DictionaryBuilder(output_dir=".", output_format="python")
    for path in freeling.get_default_files("es", "data"):
        builder.add_result(freeling.ingest(path, language="es"))
    stats = builder.build()    # writes ./es/dictionary.py
"""

__version__ = "0.1.0"
