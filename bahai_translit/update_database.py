"""Re-transliterate the texts in a writings database and store changed results."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import TextIO

from .dictionary import DictionaryError
from .dolt import DoltError, commit_changes, query_csv, update_text
from .script import Language
from .transliterator import Transliterator

COMMIT_MESSAGE = "Update transliterations with improved dictionary-based transliterator"

_RECORDS_QUERY = (
    "SELECT w2.version, w1.source_id, COALESCE(w1.name, '') as name, w1.text, "
    "w2.text as current_translit FROM writings w1 JOIN writings w2 "
    "ON w1.source = w2.source AND w1.source_id = w2.source_id "
    "WHERE w1.language = '{source}' AND w2.language = '{target}' ORDER BY w1.source_id"
)


@dataclass(frozen=True)
class Record:
    """A source text joined with the transliteration stored for it."""

    version: str
    source_id: str
    name: str
    text: str
    current_translit: str


@dataclass
class UpdateConfig:
    """Options for a database update run."""

    database_path: str
    dry_run: bool = False
    batch_size: int = 10
    language: str = "both"


def fetch_records(
    db_path: str | PathLike[str], source_lang: str, target_lang: str
) -> list[Record]:
    """Return every text in ``source_lang`` paired with its ``target_lang`` transliteration."""
    rows = query_csv(db_path, _RECORDS_QUERY.format(source=source_lang, target=target_lang))
    return [Record(*row[:5]) for row in rows if len(row) >= 5]


def update_language(
    transliterator: Transliterator,
    config: UpdateConfig,
    source_lang: str,
    target_lang: str,
    out: TextIO | None = None,
) -> tuple[int, int]:
    """Re-transliterate one language; return the counts of updated and unchanged records."""
    out = out if out is not None else sys.stdout
    if config.batch_size < 1:
        raise ValueError(f"batch size must be positive, got {config.batch_size}")
    print(f"\n=== Processing {source_lang} -> {target_lang} ===", file=out)

    try:
        records = fetch_records(config.database_path, source_lang, target_lang)
    except DoltError as exc:
        raise DoltError(f"failed to get records: {exc}") from exc
    print(f"Found {len(records)} records to process", file=out)

    lang = Language.PERSIAN if source_lang == "fa" else Language.ARABIC
    updated = unchanged = 0
    for index, record in enumerate(records):
        if index % config.batch_size == 0:
            end = min(index + config.batch_size, len(records))
            print(f"Processing batch {index + 1}-{end}...", file=out)

        new_translit = transliterator.transliterate(record.text, lang)
        if new_translit == record.current_translit:
            unchanged += 1
            continue
        print(f"  Updating {record.name} (source_id: {record.source_id})", file=out)
        if not config.dry_run:
            try:
                update_text(config.database_path, record.version, new_translit)
            except DoltError as exc:
                raise DoltError(f"failed to update record {record.version}: {exc}") from exc
        updated += 1

    print(f"\nSummary for {source_lang}:", file=out)
    print(f"  Updated: {updated} records", file=out)
    print(f"  Unchanged: {unchanged} records", file=out)
    print(f"  Total: {len(records)} records", file=out)
    return updated, unchanged


def update_database(
    config: UpdateConfig,
    transliterator: Transliterator | None = None,
    out: TextIO | None = None,
) -> None:
    """Update the Persian and/or Arabic transliterations selected by ``config``."""
    out = out if out is not None else sys.stdout
    if transliterator is None:
        transliterator = Transliterator.from_directory()

    if not (Path(config.database_path) / ".dolt").exists():
        raise DoltError(
            f"database path {config.database_path} does not appear to be a dolt repository"
        )

    print(f"Updating transliterations in database: {config.database_path}", file=out)
    print(f"Language filter: {config.language}", file=out)
    print(f"Dry run: {'true' if config.dry_run else 'false'}", file=out)
    print(f"Batch size: {config.batch_size}", file=out)

    if config.language in ("fa", "both"):
        try:
            update_language(transliterator, config, "fa", "fa-translit", out)
        except DoltError as exc:
            raise DoltError(f"failed to update Persian: {exc}") from exc

    if config.language in ("ar", "both"):
        try:
            update_language(transliterator, config, "ar", "ar-translit", out)
        except DoltError as exc:
            raise DoltError(f"failed to update Arabic: {exc}") from exc

    if not config.dry_run:
        print("\nCommitting changes to database...", file=out)
        try:
            commit_changes(config.database_path, COMMIT_MESSAGE, out)
        except DoltError as exc:
            raise DoltError(f"failed to commit changes: {exc}") from exc


_USAGE = (
    "Usage: update_database -db /path/to/bahaiwritings\n"
    "  -db string       Path to the bahaiwritings database directory\n"
    "  -dry-run         Show what would be updated without making changes\n"
    "  -batch-size int  Number of records to process in each batch (default 10)\n"
    "  -lang string     Language to update: 'fa', 'ar', or 'both' (default 'both')"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Update database transliterations from the command line."""
    parser = argparse.ArgumentParser(description="Update transliterations in a writings database.")
    parser.add_argument("-db", "--db", default="", help="path to the database directory")
    parser.add_argument("-dry-run", "--dry-run", action="store_true", help="make no changes")
    parser.add_argument("-batch-size", "--batch-size", type=int, default=10, help="batch size")
    parser.add_argument("-lang", "--lang", default="both", help="fa, ar, or both")
    parser.add_argument("-data-dir", "--data-dir", default="data", help="dictionary directory")
    args = parser.parse_args(argv)

    if not args.db:
        print(_USAGE)
        return 1

    config = UpdateConfig(
        database_path=args.db,
        dry_run=args.dry_run,
        batch_size=args.batch_size,
        language=args.lang,
    )
    try:
        transliterator = Transliterator.from_directory(args.data_dir)
        update_database(config, transliterator)
    except DictionaryError as exc:
        print(f"Error updating database: failed to initialize transliterator: {exc}", file=sys.stderr)
        return 1
    except (DoltError, ValueError) as exc:
        print(f"Error updating database: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())