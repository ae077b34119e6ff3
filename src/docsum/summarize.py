from __future__ import annotations

import argparse
from pathlib import Path
import sys

from docsum.config import get_settings
from docsum.logging_setup import configure_logging
from docsum.services.summary import PypdfTextExtractor, SummaryOptions, summarize


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="docsum-summarize",
        description="Print the keyword summary of local PDF files",
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF files to summarize")
    parser.add_argument(
        "--length",
        type=int,
        default=settings.summary_length,
        help="Maximum number of keywords to print",
    )
    parser.add_argument(
        "--min-word-length",
        type=int,
        default=settings.min_word_length,
        help="Minimum keyword length in characters",
    )
    parser.add_argument(
        "--exclude-common",
        action="store_true",
        help="Drop common English words from the ranking",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    options = SummaryOptions(
        length=args.length,
        min_word_length=args.min_word_length,
        exclude_common=args.exclude_common,
    )
    extractor = PypdfTextExtractor()

    failed = False
    for path in args.files:
        try:
            text = extractor.extract_text(path)
        except Exception as exc:
            print(f"[docsum-summarize] {path}: {exc}", file=sys.stderr, flush=True)
            failed = True
            continue
        print(f"{path}: {summarize(text, options)}", flush=True)

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
