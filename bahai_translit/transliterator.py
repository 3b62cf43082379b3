"""Dictionary-first transliteration of Arabic and Persian text."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from os import PathLike

from .dictionary import Dictionary, load_dictionaries
from .script import (
    ARABIC_LETTERS,
    PERSIAN_LETTERS,
    VOWEL_MARKS,
    Language,
    clean_arabic_characters,
    contains_arabic_script,
    is_vowel,
    remove_diacritics,
)

ZWNJ = "\u200c"

_LONG_VOWELS = frozenset("áíú")
_EMPHATIC = frozenset("ṭḍṣẓḥ")
_WS = r"[\t\n\f\r ]"


def _capitalize_after_space(match: re.Match[str]) -> str:
    parts = match.group(0).split(" ")
    if len(parts) >= 2 and parts[-1]:
        last = parts[-1]
        parts[-1] = last[:1].upper() + last[1:]
    return " ".join(parts)


_POST_PROCESSING: tuple[tuple[re.Pattern[str], str | Callable[[re.Match[str]], str]], ...] = (
    (re.compile(_WS + "+"), " "),
    (re.compile(_WS + "*-" + _WS + "*"), "-"),
    (re.compile(_WS + r"+([,.!?;:])"), r"\1"),
    (re.compile("'" + _WS + "+"), "'"),
    (re.compile(_WS + "+'"), "'"),
    (re.compile(ZWNJ), "-"),
    (re.compile(r"(\. +)([a-z])"), _capitalize_after_space),
    (re.compile(r"(\n)([a-z])"), _capitalize_after_space),
)


def guess_vowel(current: str, position: int, chars: Sequence[str]) -> str:
    """Guess the short vowel that follows ``current`` at ``position`` in ``chars``."""
    if current in _LONG_VOWELS:
        return ""
    last = len(chars) - 1
    if current == "m":
        return "a"
    if current == "l":
        if position + 1 < len(chars) and chars[position + 1] == "k":
            return "i"
        return "a"
    if current in ("n", "r"):
        return "a"
    if current in ("b", "t", "d", "g"):
        if 0 < position < len(chars) - 2:
            return "i"
        return "a"
    if current == "k":
        return "" if position == last else "a"
    if current in ("f", "s", "h", "q", "'"):
        return "a"
    if current in _EMPHATIC:
        return "a"
    return "a" if position < last else ""


def insert_statistical_vowels(text: str) -> str:
    """Insert guessed short vowels between consecutive consonants."""
    if not text:
        return text
    chars = clean_arabic_characters(text)
    pieces: list[str] = []
    last = len(chars) - 1
    for position, char in enumerate(chars):
        pieces.append(char)
        if position == last or is_vowel(char):
            continue
        if is_vowel(chars[position + 1]):
            continue
        pieces.append(guess_vowel(char, position, chars))
    return "".join(pieces)


class Transliterator:
    """Transliterates Arabic and Persian text, preferring dictionary entries over heuristics."""

    def __init__(self, arabic: Dictionary, persian: Dictionary) -> None:
        self.arabic = arabic
        self.persian = persian

    @classmethod
    def from_directory(cls, data_dir: str | PathLike[str] = "data") -> Transliterator:
        """Create a transliterator from the dictionary files in ``data_dir``."""
        arabic, persian = load_dictionaries(data_dir)
        return cls(arabic, persian)

    def dictionary_for(self, lang: Language) -> Dictionary:
        """Return the dictionary used for ``lang``."""
        return self.persian if lang is Language.PERSIAN else self.arabic

    def letters_for(self, lang: Language) -> dict[str, str]:
        """Return the fallback letter table used for ``lang``."""
        return PERSIAN_LETTERS if lang is Language.PERSIAN else ARABIC_LETTERS

    def transliterate(self, text: str, lang: Language) -> str:
        """Transliterate ``text`` written in ``lang`` into Latin script."""
        text = self.replace_phrases(text, lang)
        output = " ".join(self.transliterate_word(word, lang) for word in text.split())
        return self.post_process(output, lang).strip()

    def replace_phrases(self, text: str, lang: Language) -> str:
        """Replace known multi-word phrases, longest first."""
        phrases = self.dictionary_for(lang).common_phrases
        ordered = sorted(phrases, key=lambda phrase: (-len(phrase.encode("utf-8")), phrase))
        for phrase in ordered:
            text = text.replace(phrase, phrases[phrase].transliteration)
        return text

    def transliterate_word(self, word: str, lang: Language) -> str:
        """Transliterate a single whitespace-free word."""
        if not contains_arabic_script(word):
            return word
        dictionary = self.dictionary_for(lang)
        clean = remove_diacritics(word)

        entry = dictionary.common_words.get(clean)
        if entry is not None:
            return entry.transliteration
        entry = dictionary.divine_names.get(clean)
        if entry is not None:
            return entry.transliteration

        compound = self._analyze_compound(clean, dictionary, lang)
        if compound:
            return compound

        letters = self.letters_for(lang)
        if dictionary.heuristics is not None:
            return self._apply_dictionary_heuristics(word, dictionary, letters)
        return self.basic_heuristic(word, letters)

    def _analyze_compound(self, word: str, dictionary: Dictionary, lang: Language) -> str:
        for prefix, prefix_entry in dictionary.verbal_prefixes.items():
            if word.startswith(prefix):
                entry = dictionary.common_words.get(word[len(prefix):])
                if entry is not None:
                    return f"{prefix_entry.transliteration}-{entry.transliteration}"
        if lang is Language.PERSIAN and ZWNJ in word:
            return "-".join(
                dictionary.common_words[part].transliteration
                if part in dictionary.common_words
                else self.basic_heuristic(part, PERSIAN_LETTERS)
                for part in word.split(ZWNJ)
            )
        return ""

    def _apply_dictionary_heuristics(
        self, word: str, dictionary: Dictionary, letters: dict[str, str]
    ) -> str:
        result = self.basic_heuristic(word, letters)
        for pattern, replacement in dictionary.vowel_patterns.items():
            if pattern and replacement.transliteration:
                result = result.replace(pattern, replacement.transliteration)
        return result

    def basic_heuristic(self, word: str, letter_map: dict[str, str]) -> str:
        """Transliterate ``word`` letter by letter, then guess missing vowels."""
        pieces: list[str] = []
        for char in word:
            if char in VOWEL_MARKS:
                pieces.append(VOWEL_MARKS[char])
            elif char in letter_map:
                pieces.append(letter_map[char])
            elif not contains_arabic_script(char):
                pieces.append(char)
        return insert_statistical_vowels("".join(pieces))

    def post_process(self, text: str, lang: Language) -> str:
        """Normalise spacing and punctuation and capitalise sentence starts."""
        for regex, replacement in _POST_PROCESSING:
            text = regex.sub(replacement, text)
        if lang is Language.PERSIAN and self.persian.ezafe_rules is not None:
            text = text.replace(ZWNJ, "-")
        return text