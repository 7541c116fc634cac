"""Renderers for generated dictionary sources.

Each renderer turns a Dictionary into the text of a generated file.
Output is deterministic: PoS keys and forms are emitted sorted.

Formats:
    python  ->  DICTIONARY: dict[str, dict[str, str]] = {...}
    go      ->  var Dictionary = map[string]map[string]string{...}
    json    ->  {"language": ..., "entries": {...}}
"""

from dataclasses import dataclass
from typing import Callable
import json
import re

from ..schema import Dictionary

BANNER = "Code generated by morphdict; DO NOT EDIT."

GO_IDENT_INVALID = re.compile(r"[^a-z0-9_]")


def _sorted_entries(dictionary: Dictionary):
    for pos in sorted(dictionary.entries):
        yield pos, sorted(dictionary.entries[pos].items())


def render_python(dictionary: Dictionary) -> str:
    """Render a Python module holding the lookup table."""
    lines = [
        f"# {BANNER}",
        f'"""Morphological dictionary for {dictionary.language!r}."""',
        "",
        "# map of PoS to (map of form to lemma)",
        "DICTIONARY: dict[str, dict[str, str]] = {",
    ]
    for pos, forms in _sorted_entries(dictionary):
        lines.append(f"    {pos!r}: {{")
        for form, lemma in forms:
            lines.append(f"        {form!r}: {lemma!r},")
        lines.append("    },")
    lines.append("}")
    return "\n".join(lines) + "\n"


def go_package_name(language: str) -> str:
    """Turn a language code into a Go package name: pt-BR -> pt_br."""
    name = GO_IDENT_INVALID.sub("_", language.lower())
    if not name or name[0].isdigit():
        name = f"lang_{name}"
    return name


def _go_string(value: str) -> str:
    # JSON string escapes are a subset of Go interpreted string literals
    return json.dumps(value, ensure_ascii=False)


def render_go(dictionary: Dictionary) -> str:
    """Render a Go source file, package named after the language."""
    lines = [
        f"// {BANNER}",
        "",
        f"package {go_package_name(dictionary.language)}",
        "",
        "// map of PoS to (map of Form to Lemma)",
        "var Dictionary = map[string]map[string]string{",
    ]
    for pos, forms in _sorted_entries(dictionary):
        lines.append(f"\t{_go_string(pos)}: {{")
        for form, lemma in forms:
            lines.append(f"\t\t{_go_string(form)}: {_go_string(lemma)},")
        lines.append("\t},")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_json(dictionary: Dictionary) -> str:
    """Render the same document Dictionary.save() writes."""
    return dictionary.to_json()


@dataclass(frozen=True)
class Renderer:
    """A named output format."""

    name: str
    extension: str
    render: Callable[[Dictionary], str]

    def filename(self) -> str:
        return f"dictionary{self.extension}"


RENDERERS: dict[str, Renderer] = {
    "python": Renderer("python", ".py", render_python),
    "go": Renderer("go", ".go", render_go),
    "json": Renderer("json", ".json", render_json),
}


def get_renderer(name: str) -> Renderer:
    """Get renderer by format name."""
    if name not in RENDERERS:
        raise ValueError(f"Unknown format: {name}. Available: {list(RENDERERS.keys())}")
    return RENDERERS[name]
