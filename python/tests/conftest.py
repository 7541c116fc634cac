"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_noun_content():
    """Sample FreeLing noun dictionary content."""
    return """canción canción NCFS000
canciones canción NCFP000
árbol árbol NCMS000
arbol arbolar VMIP3S0
casa casa NCFS000
casa casar VMIP3S0
"""


@pytest.fixture
def sample_mixed_content():
    """Sample content with skipped tags and blank lines."""
    return """el el DA0MS0

rápido rápido AQ0MS00
, , Fc
dos 2 Z
ay ay I
"""


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
