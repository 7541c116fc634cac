"""morphdict CLI - Morphological dictionary generator.

Usage:
    python -m morphdict.main
    python -m morphdict.main --language es --format go --output-dir corrector
    python -m morphdict.main --files data/es/MM.nom data/es/MM.verb
"""

import argparse
import sys
from pathlib import Path

from .ingest import freeling
from .builder.dictionary import DictionaryBuilder
from .builder.render import RENDERERS
from . import config as cfg


def resolve_files(language: str, data_dir: Path) -> list[Path]:
    """Input files for a language: config.json list first, then built-in."""
    names = cfg.get_language_files(language)
    if names:
        return [data_dir / language / name for name in names]
    return freeling.get_default_files(language, data_dir)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)

    parser = argparse.ArgumentParser(
        description="morphdict - Morphological dictionary generator"
    )
    parser.add_argument(
        "--language",
        "-l",
        type=str,
        default=defaults.get("language", "es"),
        help=f"Language code (default: {defaults.get('language', 'es')})",
    )
    parser.add_argument(
        "--data-dir",
        "-d",
        type=Path,
        default=Path(defaults.get("data_dir", "data")),
        help="Directory holding <language>/MM.* files",
    )
    parser.add_argument(
        "--files",
        nargs="+",
        type=Path,
        help="Explicit input files, loaded in order (overrides the language file list)",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=Path(defaults.get("output_dir", ".")),
        help="Output directory; the file goes to <output-dir>/<language>/",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=sorted(RENDERERS),
        default=defaults.get("format", "python"),
        help=f"Generated file format (default: {defaults.get('format', 'python')})",
    )

    args = parser.parse_args(argv)

    print("Starting dictionaries generation...")
    print(f"Language: {args.language}")
    print(f"Format: {args.format}")
    print(f"Output: {args.output_dir}")
    print()

    try:
        files = args.files or resolve_files(args.language, args.data_dir)
        builder = DictionaryBuilder(
            output_dir=args.output_dir,
            output_format=args.format,
        )
    except ValueError as e:
        print(f"ERROR - {e}")
        return 1

    print("[1/2] Loading dictionaries...")
    for filepath in files:
        print(f"  {filepath} ", end="")
        try:
            result = freeling.ingest(filepath, language=args.language)
        except (OSError, ValueError) as e:
            print(f"ERROR - {e}")
            return 1
        inserted = builder.add_result(result)
        print(f"OK - {result.total_valid:,} entries, {inserted:,} new forms")

    print("\n[2/2] Writing dictionaries...")
    try:
        stats = builder.build()
    except OSError as e:
        print(f"ERROR - {e}")
        return 1

    print(f"  Total forms: {stats.total_entries:,}")
    for pos, count in sorted(stats.by_pos.items()):
        print(f"    {pos}: {count:,}")
    for path in stats.files_written:
        print(f"  Wrote {path}")

    print("\nDictionaries loaded.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
