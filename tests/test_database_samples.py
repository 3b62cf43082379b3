import io
import json

import pytest

from bahai_translit.database_samples import (
    DatabaseTestCase,
    arabic_samples,
    evaluate_samples,
    main,
    persian_samples,
    run_database_tests,
    save_results,
)
from bahai_translit.dictionary import Dictionary
from bahai_translit.script import Language
from bahai_translit.transliterator import Transliterator


@pytest.fixture
def transliterator():
    return Transliterator(Dictionary(), Dictionary())


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    for name in ("arabic_dictionary.json", "persian_dictionary.json"):
        (directory / name).write_text(json.dumps({"common_words": {}}), encoding="utf-8")
    return directory


def test_sample_sets_have_source_ids():
    assert [s.source_id for s in persian_samples()] == ["1544", "1543", "1395", "1496", "1381"]
    assert [s.source_id for s in arabic_samples()] == ["3266", "3287"]


def test_samples_carry_language_and_start_unevaluated():
    samples = persian_samples() + arabic_samples()
    assert {s.language for s in persian_samples()} == {"fa"}
    assert {s.language for s in arabic_samples()} == {"ar"}
    assert all(s.new_translit == "" and s.improved is False for s in samples)


def test_persian_samples_keep_zero_width_non_joiner():
    assert "\u200c" in persian_samples()[0].original


def test_evaluate_samples_uses_transliterator(transliterator):
    samples = arabic_samples()
    results = evaluate_samples(transliterator, samples, Language.ARABIC, io.StringIO())
    for sample, result in zip(samples, results):
        expected = transliterator.transliterate(sample.original, Language.ARABIC)
        assert result.new_translit == expected
        assert result.improved == (bool(expected) and expected != sample.current_translit)
    assert samples[0].new_translit == ""


def test_evaluate_samples_same_when_output_matches(transliterator):
    text = "hello world"
    current = transliterator.transliterate(text, Language.PERSIAN)
    sample = DatabaseTestCase("1", "fa", text, current)
    out = io.StringIO()
    [result] = evaluate_samples(transliterator, [sample], Language.PERSIAN, out)
    assert result.improved is False
    assert "*** SAME: No significant improvement" in out.getvalue()
    assert "--- Persian Sample 1 (Source ID: 1) ---" in out.getvalue()


def test_evaluate_samples_empty_output_is_not_improved(transliterator):
    sample = DatabaseTestCase("2", "ar", "", "something")
    [result] = evaluate_samples(transliterator, [sample], Language.ARABIC, io.StringIO())
    assert result.new_translit == ""
    assert result.improved is False


def test_evaluate_samples_reports_improvement(transliterator):
    sample = DatabaseTestCase("3", "ar", "abc", "xyz")
    out = io.StringIO()
    [result] = evaluate_samples(transliterator, [sample], Language.ARABIC, out)
    assert result.improved is True
    assert "*** IMPROVED: New transliteration differs from current" in out.getvalue()


def test_save_results_round_trip(tmp_path):
    path = tmp_path / "results.json"
    persian = persian_samples()
    arabic = arabic_samples()
    save_results(path, persian, arabic)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["arabic_samples", "persian_samples"]
    assert [DatabaseTestCase(**item) for item in data["persian_samples"]] == persian
    assert [DatabaseTestCase(**item) for item in data["arabic_samples"]] == arabic


def test_run_database_tests_summary(tmp_path, transliterator):
    out = io.StringIO()
    path = tmp_path / "out.json"
    persian, arabic = run_database_tests(transliterator, path, out)
    text = out.getvalue()
    assert len(persian) == len(persian_samples())
    assert len(arabic) == len(arabic_samples())
    p = sum(s.improved for s in persian)
    a = sum(s.improved for s in arabic)
    assert f"Persian: {p}/{len(persian)} samples improved" in text
    assert f"Arabic: {a}/{len(arabic)} samples improved" in text
    assert f"Total: {p + a}/{len(persian) + len(arabic)} samples improved" in text
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert [item["new_translit"] for item in saved["persian_samples"]] == [
        s.new_translit for s in persian
    ]


def test_main_writes_results(tmp_path, data_dir, capsys):
    output = tmp_path / "results.json"
    assert main(["--data-dir", str(data_dir), "--output", str(output)]) == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["persian_samples"]) == len(persian_samples())
    assert "=== SUMMARY ===" in capsys.readouterr().out


def test_main_reports_missing_dictionaries(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path / "missing"), "--output", str(tmp_path / "r.json")]) == 1
    assert "Error initializing transliterator" in capsys.readouterr().out
    assert not (tmp_path / "r.json").exists()