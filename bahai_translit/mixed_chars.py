"""Find and repair transliterations that still contain Arabic-script characters."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from os import PathLike
from typing import TextIO

from .dictionary import DictionaryError
from .dolt import DoltError, commit_changes, query_csv, update_text
from .script import Language
from .transliterator import Transliterator

COMMIT_MESSAGE = "Fix mixed Arabic characters in transliterations"

_EXAMPLE_LIMIT = 5
_PREVIEW_LENGTH = 100

_ARABIC_RANGES = (
    (0x0600, 0x06FF),  # Arabic
    (0x0750, 0x077F),  # Arabic Supplement
    (0x08A0, 0x08FF),  # Arabic Extended-A
    (0xFB50, 0xFDFF),  # Arabic Presentation Forms-A
    (0xFE70, 0xFEFF),  # Arabic Presentation Forms-B
)

_TO_LATIN: dict[str, str] = {
    "\u06cc": "i",  # farsi yeh
    "\u0627": "a",  # alef
    "\u0639": "'",  # ain
    "\u062d": "h",
    "\u062e": "kh",
    "\u062f": "d",
    "\u0630": "dh",
    "\u0631": "r",
    "\u0632": "z",
    "\u0633": "s",
    "\u0634": "sh",
    "\u0635": "s",
    "\u0636": "d",
    "\u0637": "t",
    "\u0638": "z",
    "\u063a": "gh",
    "\u0641": "f",
    "\u0642": "q",
    "\u06a9": "k",
    "\u06af": "g",
    "\u0644": "l",
    "\u0645": "m",
    "\u0646": "n",
    "\u0647": "h",
    "\u0648": "w",
    "\u0621": "'",  # hamza
    "\u0624": "u'",
    "\u0626": "i'",
    "\u0629": "h",  # ta marbuta
    "\u0622": "a",
    "\u0623": "a",
    "\u0625": "i",
    "\u0698": "zh",
    "\u0686": "ch",
    "\u067e": "p",
    "\u06a4": "v",
    "\u064e": "a",  # fatha
    "\u0650": "i",  # kasra
    "\u064f": "u",  # damma
    "\u064b": "an",
    "\u064d": "in",
    "\u064c": "un",
    "\u0652": "",  # sukun
    "\u0651": "",  # shadda
    "\u0670": "a",  # superscript alef
}

_WHITESPACE = re.compile(r"[\t\n\f\r ]+")

_FILTERS = {
    "both": "WHERE language IN ('fa-translit', 'ar-translit')",
    "fa-translit": "WHERE language = 'fa-translit'",
    "ar-translit": "WHERE language = 'ar-translit'",
}


@dataclass(frozen=True)
class FixRecord:
    """A stored transliteration and what cleaning it would change."""

    version: str
    source_id: str
    language: str
    original_text: str
    cleaned_text: str = ""
    has_mixed_chars: bool = False
    arabic_chars: tuple[str, ...] = ()


@dataclass
class FixConfig:
    """Options for a mixed-character repair run."""

    database_path: str
    dry_run: bool = False
    batch_size: int = 20
    language: str = "both"
    data_dir: str = "data"


def is_arabic_script(char: str) -> bool:
    """Return True if ``char`` lies in one of the Arabic-script Unicode blocks."""
    code = ord(char)
    return any(low <= code <= high for low, high in _ARABIC_RANGES)


def clean_mixed_characters(text: str) -> str:
    """Replace Arabic-script characters with Latin ones, drop unknown ones and tidy spaces."""
    latin = "".join(
        _TO_LATIN.get(char, "") if is_arabic_script(char) else char for char in text
    )
    return _WHITESPACE.sub(" ", latin).strip()


def find_arabic_characters(text: str) -> list[str]:
    """Return the distinct Arabic-script characters of ``text`` in order of appearance."""
    return list(dict.fromkeys(char for char in text if is_arabic_script(char)))


def analyze_mixed_characters(record: FixRecord) -> FixRecord:
    """Return ``record`` with its cleaned text and the Arabic characters it contains."""
    cleaned = clean_mixed_characters(record.original_text)
    mixed = cleaned != record.original_text
    found = tuple(find_arabic_characters(record.original_text)) if mixed else ()
    return replace(record, cleaned_text=cleaned, has_mixed_chars=mixed, arabic_chars=found)


def truncate(text: str, max_len: int) -> str:
    """Shorten ``text`` to at most ``max_len`` UTF-8 bytes, marking the cut with '...'."""
    encoded = text.encode("utf-8")
    if len(encoded) <= max_len:
        return text
    return encoded[:max_len].decode("utf-8", errors="ignore") + "..."


def fetch_transliteration_records(
    db_path: str | PathLike[str], lang_filter: str
) -> list[FixRecord]:
    """Return the stored transliterations selected by ``lang_filter``."""
    try:
        where = _FILTERS[lang_filter]
    except KeyError:
        raise ValueError(f"invalid language filter: {lang_filter}") from None
    query = f"SELECT version, source_id, language, text FROM writings {where} ORDER BY source_id"
    return [FixRecord(*row[:4]) for row in query_csv(db_path, query) if len(row) >= 4]


def fetch_original_text(
    db_path: str | PathLike[str], source_id: str, translit_lang: str
) -> str:
    """Return the untransliterated text that a transliteration was made from."""
    original_lang = "fa" if translit_lang.startswith("fa") else "ar"
    escaped_id = source_id.replace("'", "''")
    query = (
        f"SELECT text FROM writings WHERE source_id = '{escaped_id}' "
        f"AND language = '{original_lang}' LIMIT 1"
    )
    rows = query_csv(db_path, query)
    if not rows or not rows[0]:
        raise DoltError(f"no original text found for source_id {source_id}")
    return rows[0][0]


def _print_examples(records: Sequence[FixRecord], out: TextIO) -> None:
    print("\nExamples of mixed character issues:", file=out)
    for record in records[:_EXAMPLE_LIMIT]:
        print(f"\nRecord {record.source_id} ({record.language}):", file=out)
        print(f"  Arabic chars found: [{' '.join(record.arabic_chars)}]", file=out)
        print(f"  Original: {truncate(record.original_text, _PREVIEW_LENGTH)}", file=out)
        print(f"  Cleaned:  {truncate(record.cleaned_text, _PREVIEW_LENGTH)}", file=out)


def fix_mixed_characters(
    config: FixConfig,
    transliterator: Transliterator | None = None,
    out: TextIO | None = None,
) -> list[FixRecord]:
    """Re-transliterate every record with mixed characters; return those records."""
    out = out if out is not None else sys.stdout
    print(
        f"Analyzing transliterations for mixed characters in database: {config.database_path}",
        file=out,
    )
    print(f"Language filter: {config.language}", file=out)
    print(f"Dry run: {'true' if config.dry_run else 'false'}", file=out)

    try:
        records = fetch_transliteration_records(config.database_path, config.language)
    except DoltError as exc:
        raise DoltError(f"failed to get records: {exc}") from exc
    print(f"Found {len(records)} transliteration records to analyze", file=out)

    problems = [
        analyzed
        for analyzed in map(analyze_mixed_characters, records)
        if analyzed.has_mixed_chars
    ]
    print(f"\nFound {len(problems)} records with mixed characters", file=out)
    if not problems:
        print("No mixed character issues found!", file=out)
        return problems

    _print_examples(problems, out)

    if config.dry_run:
        print(f"\nDry run complete. {len(problems)} records would be updated.", file=out)
        return problems

    if config.batch_size < 1:
        raise ValueError(f"batch size must be positive, got {config.batch_size}")
    if transliterator is None:
        transliterator = Transliterator.from_directory(config.data_dir)

    print(f"\nUpdating {len(problems)} records...", file=out)
    updated = 0
    for index, record in enumerate(problems):
        if index % config.batch_size == 0:
            end = min(index + config.batch_size, len(problems))
            print(f"Processing batch {index + 1}-{end}...", file=out)

        try:
            original = fetch_original_text(
                config.database_path, record.source_id, record.language
            )
        except DoltError as exc:
            print(
                f"  Warning: Could not get original text for {record.source_id}: {exc}",
                file=out,
            )
            continue

        lang = Language.PERSIAN if record.language.startswith("fa") else Language.ARABIC
        cleaned = clean_mixed_characters(transliterator.transliterate(original, lang))

        print(f"  Updating {record.source_id}", file=out)
        try:
            update_text(config.database_path, record.version, cleaned)
        except DoltError as exc:
            raise DoltError(f"failed to update record {record.version}: {exc}") from exc
        updated += 1

    print(f"\nSuccessfully updated {updated} records", file=out)
    print("\nCommitting changes to database...", file=out)
    try:
        commit_changes(config.database_path, COMMIT_MESSAGE, out)
    except DoltError as exc:
        raise DoltError(f"failed to commit changes: {exc}") from exc
    return problems


_USAGE = (
    "Usage: fix_mixed_chars -db /path/to/bahaiwritings\n"
    "  -db string       Path to the bahaiwritings database directory\n"
    "  -dry-run         Show what would be fixed without making changes\n"
    "  -batch-size int  Number of records to process in each batch (default 20)\n"
    "  -lang string     Language to fix: 'fa-translit', 'ar-translit', or 'both' (default 'both')"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Repair mixed-character transliterations from the command line."""
    parser = argparse.ArgumentParser(
        description="Fix transliterations that contain Arabic-script characters."
    )
    parser.add_argument("-db", "--db", default="", help="path to the database directory")
    parser.add_argument("-dry-run", "--dry-run", action="store_true", help="make no changes")
    parser.add_argument("-batch-size", "--batch-size", type=int, default=20, help="batch size")
    parser.add_argument("-lang", "--lang", default="both", help="fa-translit, ar-translit, or both")
    parser.add_argument("-data-dir", "--data-dir", default="data", help="dictionary directory")
    args = parser.parse_args(argv)

    if not args.db:
        print(_USAGE)
        return 1

    config = FixConfig(
        database_path=args.db,
        dry_run=args.dry_run,
        batch_size=args.batch_size,
        language=args.lang,
        data_dir=args.data_dir,
    )
    try:
        fix_mixed_characters(config)
    except DictionaryError as exc:
        print(
            f"Error fixing mixed characters: failed to initialize transliterator: {exc}",
            file=sys.stderr,
        )
        return 1
    except (DoltError, ValueError) as exc:
        print(f"Error fixing mixed characters: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())