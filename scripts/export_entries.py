"""
Script to export the recorded entries without starting the GUI.

Usage:
    python scripts/export_entries.py csv|pdf [output_dir] [--lang de|en]
"""

import sys
import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.i18n import SUPPORTED_LANGUAGES, resolve_language
from app.infra.config import get_settings
from app.infra.db import init_db
from app.services import ExportLabels, ExportService, EntryStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="export_entries.py",
        description="Export all recorded time entries as CSV or PDF.",
    )
    parser.add_argument("format", choices=["csv", "pdf"])
    parser.add_argument("output_dir", nargs="?", type=Path,
                        help="Target folder (default: configured export folder)")
    parser.add_argument("--lang", choices=sorted(SUPPORTED_LANGUAGES),
                        help="Label language (default: configured language)")
    return parser


async def export(args: argparse.Namespace) -> Optional[Path]:
    settings = get_settings()
    output_dir = args.output_dir or settings.get_export_dir()
    lang = resolve_language(args.lang or settings.preferences.language)

    await init_db()
    store = EntryStore()
    entries = await store.load()

    exporter = ExportService(ExportLabels.for_language(lang))
    if args.format == "csv":
        output_file = exporter.export_csv(entries, output_dir)
    else:
        output_file = exporter.export_pdf(entries, output_dir)

    if output_file is None:
        print("No entries recorded, nothing exported.")
    else:
        print(f"{len(entries)} entries exported to: {output_file.absolute()}")
    return output_file


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    asyncio.run(export(args))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
