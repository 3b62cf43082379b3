"""Transliteration dictionaries loaded from JSON files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

ARABIC_DICTIONARY_FILE = "arabic_dictionary.json"
PERSIAN_DICTIONARY_FILE = "persian_dictionary.json"


class DictionaryError(Exception):
    """Raised when a dictionary cannot be read or does not have the expected shape."""


def _text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DictionaryError(f"{where}: expected a string, got {type(value).__name__}")
    return value


def _object(value: Any, where: str) -> Mapping[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise DictionaryError(f"{where}: expected an object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class WordEntry:
    """A single dictionary word and its transliteration."""

    transliteration: str = ""
    category: str = ""
    notes: str = ""
    root: str = ""
    meaning: str = ""

    @classmethod
    def _from_json(cls, value: Any, where: str) -> WordEntry:
        data = _object(value, where) or {}
        return cls(
            transliteration=_text(data.get("transliteration"), f"{where}.transliteration"),
            category=_text(data.get("category"), f"{where}.category"),
            notes=_text(data.get("notes"), f"{where}.notes"),
            root=_text(data.get("root"), f"{where}.root"),
            meaning=_text(data.get("meaning"), f"{where}.meaning"),
        )


@dataclass(frozen=True)
class Pattern:
    """A text pattern together with the transliteration that replaces it."""

    pattern: str = ""
    transliteration: str = ""
    notes: str = ""

    @classmethod
    def _from_json(cls, value: Any, where: str) -> Pattern:
        data = _object(value, where) or {}
        return cls(
            pattern=_text(data.get("pattern"), f"{where}.pattern"),
            transliteration=_text(data.get("transliteration"), f"{where}.transliteration"),
            notes=_text(data.get("notes"), f"{where}.notes"),
        )


def _entries(data: Mapping[str, Any], key: str, kind: type) -> dict[str, Any]:
    section = _object(data.get(key), key) or {}
    return {word: kind._from_json(value, f"{key}[{word!r}]") for word, value in section.items()}


def _raw(data: Mapping[str, Any], key: str) -> dict[str, Any] | None:
    section = _object(data.get(key), key)
    return None if section is None else dict(section)


@dataclass
class Dictionary:
    """Words, phrases and rule sections for one source language.

    The free-form rule sections are ``None`` when the file does not provide them.
    """

    version: str = ""
    description: str = ""
    last_updated: str = ""
    common_words: dict[str, WordEntry] = field(default_factory=dict)
    divine_names: dict[str, WordEntry] = field(default_factory=dict)
    common_phrases: dict[str, Pattern] = field(default_factory=dict)
    vowel_patterns: dict[str, Pattern] = field(default_factory=dict)
    verbal_prefixes: dict[str, WordEntry] = field(default_factory=dict)
    article_rules: dict[str, Any] | None = None
    ezafe_rules: dict[str, Any] | None = None
    heuristics: dict[str, Any] | None = None
    suffixes: dict[str, Any] | None = None
    stress_patterns: dict[str, Any] | None = None
    morphological_patterns: dict[str, Any] | None = None
    consonant_changes: dict[str, Any] | None = None

    @classmethod
    def from_mapping(cls, data: Any) -> Dictionary:
        """Build a dictionary from decoded JSON data."""
        if not isinstance(data, Mapping):
            raise DictionaryError("dictionary must be a JSON object")
        metadata = _object(data.get("metadata"), "metadata") or {}
        return cls(
            version=_text(metadata.get("version"), "metadata.version"),
            description=_text(metadata.get("description"), "metadata.description"),
            last_updated=_text(metadata.get("last_updated"), "metadata.last_updated"),
            common_words=_entries(data, "common_words", WordEntry),
            divine_names=_entries(data, "divine_names", WordEntry),
            common_phrases=_entries(data, "common_phrases", Pattern),
            vowel_patterns=_entries(data, "vowel_patterns", Pattern),
            verbal_prefixes=_entries(data, "verbal_prefixes", WordEntry),
            article_rules=_raw(data, "article_rules"),
            ezafe_rules=_raw(data, "ezafe_rules"),
            heuristics=_raw(data, "heuristics"),
            suffixes=_raw(data, "suffixes"),
            stress_patterns=_raw(data, "stress_patterns"),
            morphological_patterns=_raw(data, "morphological_patterns"),
            consonant_changes=_raw(data, "consonant_changes"),
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Dictionary:
        """Read and parse a dictionary JSON file."""
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise DictionaryError(f"failed to read {path}: {exc}") from exc
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DictionaryError(f"failed to parse {path}: {exc}") from exc
        return cls.from_mapping(data)


def load_dictionaries(data_dir: str | PathLike[str] = "data") -> tuple[Dictionary, Dictionary]:
    """Load the Arabic and Persian dictionaries from ``data_dir``."""
    directory = Path(data_dir)
    try:
        arabic = Dictionary.load(directory / ARABIC_DICTIONARY_FILE)
    except DictionaryError as exc:
        raise DictionaryError(f"failed to load Arabic dictionary: {exc}") from exc
    try:
        persian = Dictionary.load(directory / PERSIAN_DICTIONARY_FILE)
    except DictionaryError as exc:
        raise DictionaryError(f"failed to load Persian dictionary: {exc}") from exc
    return arabic, persian