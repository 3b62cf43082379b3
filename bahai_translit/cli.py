"""Command-line interface for transliterating Arabic and Persian text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .dictionary import DictionaryError
from .script import Language, auto_detect_language
from .transliterator import Transliterator

_NAMES = {
    "arabic": Language.ARABIC,
    "ar": Language.ARABIC,
    "persian": Language.PERSIAN,
    "fa": Language.PERSIAN,
    "farsi": Language.PERSIAN,
}


def parse_language(name: str, text: str) -> Language:
    """Resolve a language name, detecting it from ``text`` when ``name`` is ``auto``."""
    key = name.lower()
    if key == "auto":
        return auto_detect_language(text)
    try:
        return _NAMES[key]
    except KeyError:
        raise ValueError(f"Invalid language: {name}") from None


def _read_stdin() -> str:
    lines = sys.stdin.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return "\n".join(line.removesuffix("\r") for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Transliterate a file or standard input and print the result."""
    parser = argparse.ArgumentParser(description="Transliterate Arabic or Persian text.")
    parser.add_argument("-lang", "--lang", default="auto", help="arabic, persian, or auto")
    parser.add_argument("-file", "--file", default="", help="input file (default: stdin)")
    parser.add_argument("-verbose", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("-data-dir", "--data-dir", default="data", help="dictionary directory")
    args = parser.parse_args(argv)

    try:
        transliterator = Transliterator.from_directory(args.data_dir)
    except DictionaryError as exc:
        print(f"Error initializing transliterator: {exc}", file=sys.stderr)
        return 1

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading file: {exc}", file=sys.stderr)
            return 1
    else:
        try:
            text = _read_stdin()
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading stdin: {exc}", file=sys.stderr)
            return 1

    try:
        lang = parse_language(args.lang, text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    if args.verbose and args.lang.lower() == "auto":
        name = "Persian" if lang is Language.PERSIAN else "Arabic"
        print(f"Detected language: {name}", file=sys.stderr)

    result = transliterator.transliterate(text, lang)

    if args.verbose:
        print(f"Input length: {len(text.encode('utf-8'))} characters", file=sys.stderr)
        print(f"Output length: {len(result.encode('utf-8'))} characters", file=sys.stderr)
        print("---", file=sys.stderr)

    sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())