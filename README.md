# bahai-translit

Transliterates Arabic and Persian text into Latin script. Each word is looked
up in JSON dictionaries first (common words, divine names, verbal prefixes,
and for Persian the parts of words joined by a zero-width non-joiner); known
multi-word phrases are replaced before that. Anything not found falls back to
a letter-by-letter mapping with statistical vowel insertion. The result then
gets light clean-up of spacing, hyphens, punctuation and capitalisation after
sentence ends and line breaks.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Dictionaries

The transliterator reads two dictionary files from a data directory:

- `arabic_dictionary.json`
- `persian_dictionary.json`

Each file is a JSON object. The sections used are `common_words`,
`divine_names`, `verbal_prefixes` (word entries with `transliteration` and
optional `category`, `notes`, `root`, `meaning`) and `common_phrases`,
`vowel_patterns` (entries with `pattern`, `transliteration`, `notes`). The
sections `article_rules`, `ezafe_rules`, `heuristics`, `suffixes`,
`stress_patterns`, `morphological_patterns` and `consonant_changes` are kept
as plain data; only whether `heuristics` and `ezafe_rules` are present changes
the output (`heuristics` enables the `vowel_patterns` replacements in the
fallback). Optional `metadata` gives `version`, `description` and
`last_updated`.

A missing, unreadable or malformed file raises
`bahai_translit.dictionary.DictionaryError`. `load_dictionaries(data_dir)`
returns the Arabic and Persian `Dictionary` objects; `Dictionary.load(path)`
and `Dictionary.from_mapping(data)` read a single one.

All commands look for the files in `data/` under the current working
directory unless `--data-dir` is given.

## Library use

```python
from bahai_translit.transliterator import Transliterator
from bahai_translit.script import Language, auto_detect_language

translit = Transliterator.from_directory("data")

print(translit.transliterate("الله", Language.ARABIC))

persian = "پروردگار چه کنم"
print(translit.transliterate(persian, auto_detect_language(persian)))
```

`Transliterator(arabic, persian)` can also be built directly from two
`Dictionary` objects. Besides `transliterate`, it offers
`transliterate_word`, `replace_phrases`, `basic_heuristic` and
`post_process` for the individual steps.

Helpers in `bahai_translit.script`:

- `Language` – `Language.ARABIC` or `Language.PERSIAN`.
- `auto_detect_language(text)` – `Language.ARABIC` when common Arabic-script
  letters outnumber the Persian-specific letters `پ چ ژ گ`, otherwise
  `Language.PERSIAN`. `is_arabic` and `is_persian` give the same test as a
  boolean.
- `contains_arabic_script(text)` – whether any character lies in the Arabic
  script blocks.
- `clean_arabic_characters(text)` – maps stray Arabic letters, marks,
  Persian digits and punctuation to Latin equivalents and drops the rest.
- `remove_diacritics(word)` – strips vowel marks before dictionary lookup.

## Command line

Transliterate standard input or a file and print the result:

```
echo "الله" | bahai-translit --lang arabic
bahai-translit --file prayer.txt --lang auto --verbose
```

`--lang` accepts `arabic`/`ar`, `persian`/`fa`/`farsi` or `auto` (the
default), in any letter case. With `--verbose`, the detected language (for
`auto`) and the input and output lengths in UTF-8 bytes are written to
standard error. An unknown language name, an unreadable file or missing
dictionaries exit with status 1.

Compare the transliterator against the built-in sample prayers and write the
results as JSON:

```
bahai-translit-samples
bahai-translit-samples --output results.json
```

The default output file is `database_test_results.json`.

### Working with a Dolt database

Two commands operate on a Dolt repository holding a `writings` table. They
run the `dolt` executable, which must be on the `PATH`. Without `--db` they
print their usage and exit with status 1.

Re-transliterate all `fa`/`ar` texts and update the matching
`fa-translit`/`ar-translit` rows that differ, then add, commit and push:

```
bahai-translit-update-db --db /path/to/writings --lang both --dry-run
```

`--lang` is `fa`, `ar` or `both`. The directory must contain `.dolt`. With
`--dry-run` it only reports which records would change.

Find transliterations that still contain Arabic-script characters and
regenerate them from the original text, then add, commit and push:

```
bahai-translit-fix-mixed --db /path/to/writings --lang fa-translit --dry-run
```

`--lang` is `fa-translit`, `ar-translit` or `both`. With `--dry-run` it lists
up to five examples and the number of records that would be updated.

`--batch-size` controls how often progress is reported (10 and 20 by
default, respectively).