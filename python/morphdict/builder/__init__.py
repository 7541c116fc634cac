"""Dictionary builder module.

Builds generated dictionary outputs:
- Per-language merged lookup tables
- Python, Go or JSON sources via pluggable renderers
"""

from .dictionary import BuildStats, DictionaryBuilder
from .render import RENDERERS, Renderer, get_renderer

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
    "RENDERERS",
    "Renderer",
    "get_renderer",
]
