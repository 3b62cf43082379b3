import json

import pytest

from bahai_translit.dictionary import Dictionary, DictionaryError, Pattern, WordEntry
from bahai_translit.script import ARABIC_LETTERS, PERSIAN_LETTERS, Language
from bahai_translit.transliterator import (
    Transliterator,
    guess_vowel,
    insert_statistical_vowels,
)


def _words(mapping):
    return {word: WordEntry(transliteration=value) for word, value in mapping.items()}


def _phrases(mapping):
    return {phrase: Pattern(pattern=phrase, transliteration=value) for phrase, value in mapping.items()}


@pytest.fixture
def trans():
    arabic = Dictionary(
        common_words=_words({"الله": "Alláh", "والله": "wa'lláh"}),
        divine_names=_words({"رب": "Rabb"}),
        common_phrases=_phrases({"لا إله إلا الله": "lá iláha illá'lláh"}),
    )
    persian = Dictionary(
        common_words=_words({"خدا": "Khudá", "پروردگار": "Parvardigár", "داند": "dánad"}),
        verbal_prefixes=_words({"می": "mí"}),
    )
    return Transliterator(arabic, persian)


@pytest.mark.parametrize(
    "text, expected, lang",
    [
        ("الله", "Alláh", Language.ARABIC),
        ("والله", "wa'lláh", Language.ARABIC),
        ("لا إله إلا الله", "lá iláha illá'lláh", Language.ARABIC),
        ("خدا", "Khudá", Language.PERSIAN),
        ("پروردگار", "Parvardigár", Language.PERSIAN),
    ],
)
def test_common_patterns(trans, text, expected, lang):
    assert trans.transliterate(text, lang) == expected


@pytest.mark.parametrize(
    "word, expected, lang",
    [
        ("مالك", "málik", Language.ARABIC),
        ("كتاب", "katáb", Language.ARABIC),
        ("حكيم", "ḥakayam", Language.ARABIC),
        ("ملکوت", "malikavat", Language.PERSIAN),
        ("کریم", "karím", Language.PERSIAN),
    ],
)
def test_heuristic_quality_words(trans, word, expected, lang):
    result = trans.basic_heuristic(word, trans.letters_for(lang))
    assert result == expected
    assert insert_statistical_vowels(result) == expected


def test_heuristic_keeps_written_vowels(trans):
    assert trans.basic_heuristic("كَتَبَ", ARABIC_LETTERS) == "kataba"


def test_heuristic_drops_unmapped_arabic_letters(trans):
    assert trans.basic_heuristic("بی", ARABIC_LETTERS) == "b"


def test_longest_phrase_replaced_first(trans):
    assert trans.replace_phrases("لا إله إلا الله", Language.ARABIC) == "lá iláha illá'lláh"


def test_divine_names_matched_without_diacritics(trans):
    assert trans.transliterate("رَبِّ", Language.ARABIC) == "Rabb"


def test_verbal_prefix_compound(trans):
    assert trans.transliterate_word("میداند", Language.PERSIAN) == "mí-dánad"


def test_persian_zwnj_compound(trans):
    assert trans.transliterate_word("می\u200cداند", Language.PERSIAN) == "mí-dánad"


def test_latin_words_pass_through(trans):
    assert trans.transliterate("hello   world", Language.ARABIC) == "hello world"


def test_lines_are_joined_with_spaces(trans):
    assert trans.transliterate("خدا\nپروردگار", Language.PERSIAN) == "Khudá Parvardigár"


def test_vowel_patterns_apply_only_with_heuristics():
    patterns = {"kat": Pattern(pattern="kat", transliteration="kit")}
    with_rules = Transliterator(Dictionary(heuristics={}, vowel_patterns=patterns), Dictionary())
    without_rules = Transliterator(Dictionary(vowel_patterns=patterns), Dictionary())
    assert with_rules.transliterate("كتاب", Language.ARABIC) == "kitáb"
    assert without_rules.transliterate("كتاب", Language.ARABIC) == "katáb"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a , b", "a, b"),
        ("a - b", "a-b"),
        ("x ' y", "x'y"),
        ("end. next", "end. Next"),
        ("a\u200cb", "a-b"),
        ("a \t  b", "a b"),
    ],
)
def test_post_process(trans, text, expected):
    assert trans.post_process(text, Language.ARABIC) == expected


def test_dictionary_and_letters_for(trans):
    assert trans.dictionary_for(Language.PERSIAN) is trans.persian
    assert trans.dictionary_for(Language.ARABIC) is trans.arabic
    assert trans.letters_for(Language.PERSIAN) is PERSIAN_LETTERS
    assert trans.letters_for(Language.ARABIC) is ARABIC_LETTERS


@pytest.mark.parametrize(
    "current, position, chars, expected",
    [
        ("l", 0, "lk", "i"),
        ("l", 0, "lm", "a"),
        ("b", 1, "abcd", "i"),
        ("b", 0, "bcd", "a"),
        ("k", 2, "abk", ""),
        ("k", 0, "kb", "a"),
        ("x", 0, "xy", "a"),
        ("x", 1, "yx", ""),
        ("ḥ", 1, "aḥ", "a"),
        ("á", 0, "áb", ""),
    ],
)
def test_guess_vowel(current, position, chars, expected):
    assert guess_vowel(current, position, chars) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("", ""), ("b", "b"), ("btk", "batak"), ("ktáb", "katáb")],
)
def test_insert_statistical_vowels(text, expected):
    assert insert_statistical_vowels(text) == expected


def test_from_directory(tmp_path):
    (tmp_path / "arabic_dictionary.json").write_text(
        json.dumps({"common_words": {"الله": {"transliteration": "Alláh"}}}), encoding="utf-8"
    )
    (tmp_path / "persian_dictionary.json").write_text(
        json.dumps({"common_words": {"خدا": {"transliteration": "Khudá"}}}), encoding="utf-8"
    )
    trans = Transliterator.from_directory(tmp_path)
    assert trans.transliterate("الله", Language.ARABIC) == "Alláh"
    assert trans.transliterate("خدا", Language.PERSIAN) == "Khudá"


def test_from_directory_missing_files(tmp_path):
    with pytest.raises(DictionaryError):
        Transliterator.from_directory(tmp_path)