"""Arabic-script character tables and language detection."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """Source language of a text."""

    ARABIC = 0
    PERSIAN = 1


ARABIC_LETTERS: dict[str, str] = {
    "\u0627": "á",  # alef
    "\u0623": "a",  # alef with hamza above
    "\u0625": "i",  # alef with hamza below
    "\u0622": "á",  # alef with madda
    "\u0628": "b",
    "\u062a": "t",
    "\u062b": "th",
    "\u062c": "j",
    "\u062d": "ḥ",
    "\u062e": "kh",
    "\u062f": "d",
    "\u0630": "dh",
    "\u0631": "r",
    "\u0632": "z",
    "\u0633": "s",
    "\u0634": "sh",
    "\u0635": "ṣ",
    "\u0636": "ḍ",
    "\u0637": "ṭ",
    "\u0638": "ẓ",
    "\u0639": "'",
    "\u063a": "gh",
    "\u0641": "f",
    "\u0642": "q",
    "\u0643": "k",  # arabic kaf
    "\u06a9": "k",  # keheh
    "\u0644": "l",
    "\u0645": "m",
    "\u0646": "n",
    "\u0647": "h",
    "\u0648": "w",
    "\u064a": "y",
    "\u0649": "á",  # alef maksura
    "\u0629": "h",  # ta marbuta
    "\u0621": "'",  # hamza
    "\u0624": "u'",
    "\u0626": "i'",
}

PERSIAN_LETTERS: dict[str, str] = {
    "\u0627": "á",
    "\u0628": "b",
    "\u067e": "p",
    "\u062a": "t",
    "\u062b": "th",
    "\u062c": "j",
    "\u0686": "ch",
    "\u062d": "ḥ",
    "\u062e": "kh",
    "\u062f": "d",
    "\u0630": "dh",
    "\u0631": "r",
    "\u0632": "z",
    "\u0698": "zh",
    "\u0633": "s",
    "\u0634": "sh",
    "\u0635": "ṣ",
    "\u0636": "ḍ",
    "\u0637": "ṭ",
    "\u0638": "ẓ",
    "\u0639": "'",
    "\u063a": "gh",
    "\u0641": "f",
    "\u0642": "q",
    "\u06a9": "k",
    "\u06af": "g",
    "\u0644": "l",
    "\u0645": "m",
    "\u0646": "n",
    "\u0648": "v",
    "\u0647": "h",
    "\u06cc": "í",  # farsi yeh
    "\u0649": "á",
    "\u0629": "h",
    "\u0621": "'",
}

VOWEL_MARKS: dict[str, str] = {
    "\u064e": "a",  # fatha
    "\u0650": "i",  # kasra
    "\u064f": "u",  # damma
    "\u064b": "an",  # fathatan
    "\u064d": "in",  # kasratan
    "\u064c": "un",  # dammatan
    "\u0652": "",  # sukun
    "\u0651": "",  # shadda
    "\u0653": "",  # maddah above
    "\u0654": "",  # hamza above
    "\u0655": "",  # hamza below
}

_LEFTOVER_TO_LATIN: dict[str, str] = {
    "\u06cc": "i",
    "\u0627": "a",
    "\u0639": "'",
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
    "\u0621": "'",
    "\u0624": "u'",
    "\u0626": "i'",
    "\u0629": "h",
    "\u0622": "a",
    "\u0623": "a",
    "\u0625": "i",
    "\u0698": "zh",
    "\u0686": "ch",
    "\u067e": "p",
    "\u06a4": "v",
    "\u064e": "a",
    "\u0650": "i",
    "\u064f": "u",
    "\u064b": "an",
    "\u064d": "in",
    "\u064c": "un",
    "\u0652": "",
    "\u0651": "",
    "\u0670": "a",  # superscript alef
    "\u0640": "",  # tatweel
    "\u060c": ",",
    "\u061b": ";",
    "\u061f": "?",
    **{chr(0x06F0 + digit): str(digit) for digit in range(10)},
    "\u06c0": "h",  # heh with yeh above
}

_ARABIC_RANGES = (
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
)

_VOWELS = frozenset("aeiouáíúāīū")

_PERSIAN_MARKERS = frozenset("\u067e\u0686\u0698\u06af")
_ARABIC_MARKERS = frozenset(
    "\u0636\u0635\u062b\u0642\u0641\u063a\u0639\u0647\u062e\u062d\u062c\u062f\u0630"
    "\u0631\u0632\u0633\u0634\u062a\u0637\u0638\u0644\u0646\u0645\u0643\u0648\u064a"
)


def _is_arabic_char(char: str) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in _ARABIC_RANGES)


def contains_arabic_script(text: str) -> bool:
    """Return True if any character of ``text`` is in an Arabic-script block."""
    return any(_is_arabic_char(char) for char in text)


def is_vowel(char: str) -> bool:
    """Return True if ``char`` is a Latin vowel used in transliterations."""
    return char in _VOWELS


def clean_arabic_characters(text: str) -> str:
    """Replace leftover Arabic-script characters with Latin ones, dropping unknown ones."""
    return "".join(
        _LEFTOVER_TO_LATIN[char]
        if char in _LEFTOVER_TO_LATIN
        else ("" if _is_arabic_char(char) else char)
        for char in text
    )


def remove_diacritics(word: str) -> str:
    """Strip vowel marks and other diacritics from ``word``."""
    return "".join(char for char in word if char not in VOWEL_MARKS)


def is_arabic(text: str) -> bool:
    """Return True if Arabic marker letters outnumber Persian-only letters."""
    arabic = sum(char in _ARABIC_MARKERS for char in text)
    persian = sum(char in _PERSIAN_MARKERS for char in text)
    return arabic > persian


def is_persian(text: str) -> bool:
    """Return True if ``text`` is not detected as Arabic."""
    return not is_arabic(text)


def auto_detect_language(text: str) -> Language:
    """Guess whether ``text`` is Arabic or Persian."""
    return Language.ARABIC if is_arabic(text) else Language.PERSIAN