"""Command line interface for Rhyme Ninja."""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from tabulate import tabulate

from .datamuse import DEFAULT_DATAMUSE_MAX, DEFAULT_TIMEOUT, DatamuseClient
from .database import RhymeDatabase, load_lexicon
from .formatting import render
from .ingest import build_database
from .lookup import lookup
from .models import SUPPORTED_LANGUAGES, Goal, Lexicon, ResultKind
from .phonetics import to_pronunciation

LOGGER = logging.getLogger("rhyme_ninja")

DATABASE_ENV = "RHYME_NINJA_DB"
DATABASE_NAME = "rhyme_ninja.db"


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _default_database_path() -> Path:
    """Resolve the database location from env, working directory or XDG data dir."""

    override = os.environ.get(DATABASE_ENV)
    if override:
        return Path(override)
    local = Path.cwd() / DATABASE_NAME
    if local.exists():
        return local
    data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / "rhyme_ninja" / DATABASE_NAME


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--database", default=argparse.SUPPRESS, help="SQLite database path")
    common.add_argument("--verbose", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging")

    parser = argparse.ArgumentParser(description="Find rhymes and related words", parents=[common])
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser_ = subparsers.add_parser("build", parents=[common], help="Rebuild the rhyme dictionary")
    build_parser_.add_argument("--cmu", help="Path to a cmudict file (defaults to the NLTK corpus)")
    build_parser_.add_argument("--frequencies", help="Path to a lemma frequency list")
    build_parser_.add_argument("--blacklist", help="Path to a list of words to exclude")

    lookup_parser = subparsers.add_parser("lookup", parents=[common], help="Look up rhymes or related words")
    lookup_parser.add_argument("word1", nargs="?", default="", help="Focal word")
    lookup_parser.add_argument("word2", nargs="?", default="", help="Second word for two-word goals")
    lookup_parser.add_argument("--goal", choices=[goal.value for goal in Goal], default=Goal.RHYMES.value)
    lookup_parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default="en", help="Result language")
    lookup_parser.add_argument("--max", type=int, default=DEFAULT_DATAMUSE_MAX, help="Maximum Datamuse results")
    lookup_parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Datamuse timeout in seconds")
    lookup_parser.add_argument("--format", choices=["text", "html"], default="text", help="Output format")
    lookup_parser.add_argument("--show-frequencies", action="store_true", help="Print usage counts next to words")

    word_parser = subparsers.add_parser("word", parents=[common], help="Show pronunciations and rhyme keys for a word")
    word_parser.add_argument("word", help="Word to inspect")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    db_path = Path(args.database) if hasattr(args, "database") else _default_database_path()

    if args.command == "build":
        build_database(
            database_path=db_path,
            cmu_source=args.cmu,
            frequency_source=args.frequencies,
            blacklist_source=args.blacklist,
        )
        LOGGER.info("Database created at %s", db_path)
        return 0

    if not db_path.exists():
        parser.error(f"Database {db_path} does not exist. Run 'rhyme-ninja build' first.")
    lexicon = load_lexicon(db_path)

    if args.command == "lookup":
        client = DatamuseClient(max_results=args.max, timeout=args.timeout)
        result = lookup(lexicon, args.word1, args.word2, args.goal, language=args.lang, client=client)
        output = render(
            result,
            lexicon,
            output_format=args.format,
            language=args.lang,
            show_frequencies=args.show_frequencies,
        )
        if output:
            print(output)
        return 1 if result.kind is ResultKind.ERROR else 0

    if args.command == "word":
        db = RhymeDatabase(db_path)
        try:
            _print_word(db, lexicon, args.word.lower())
        finally:
            db.close()
    return 0


def _print_word(db: RhymeDatabase, lexicon: Lexicon, word: str) -> None:
    """Show each stored pronunciation with the signature saved at build time."""

    records = db.pronunciations_for_word(word)
    if not records:
        print(f"No rhymable pronunciations found for {word}")
        return
    print(f"{word} (frequency {records[0]['frequency']}):")
    rows = []
    for record in records:
        pron = to_pronunciation(record["pronunciation"])
        signature = record["rhyme_signature"]
        rows.append(
            [
                pron.text,
                pron.syllable_count,
                pron.stress_pattern,
                signature,
                len(lexicon.words_for_signature(signature)) - 1,
            ]
        )
    headers = ["Pronunciation", "Syllables", "Stress", "Rhyme signature", "Rhymes"]
    print(tabulate(rows, headers=headers))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
