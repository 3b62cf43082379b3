import io
import subprocess
from unittest import mock

import pytest

from bahai_translit.dictionary import Dictionary
from bahai_translit.dolt import DoltError
from bahai_translit.transliterator import Transliterator
from bahai_translit.update_database import (
    COMMIT_MESSAGE,
    Record,
    UpdateConfig,
    fetch_records,
    main,
    update_database,
    update_language,
)

HEADER = "version,source_id,name,text,current_translit\n"


class FakeDolt:
    def __init__(self, csv_output=HEADER):
        self.csv_output = csv_output
        self.calls = []

    def __call__(self, args, **kwargs):
        args = list(args)
        self.calls.append(args)
        if args[:2] == ["dolt", "sql"] and "-r" in args:
            return subprocess.CompletedProcess(args, 0, stdout=self.csv_output, stderr="")
        return subprocess.CompletedProcess(args, 0, stdout="", stderr=None)

    def updates(self):
        return [call for call in self.calls if call[:2] == ["dolt", "sql"] and "-r" not in call]


@pytest.fixture
def transliterator():
    return Transliterator(Dictionary(), Dictionary())


@pytest.fixture
def db(tmp_path):
    (tmp_path / ".dolt").mkdir()
    return tmp_path


def test_fetch_records_parses_rows_and_skips_short_ones(tmp_path):
    fake = FakeDolt(HEADER + "v1,10,Prayer,hello,hello\nbroken,row\n")
    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=fake):
        records = fetch_records(tmp_path, "fa", "fa-translit")
    assert records == [Record("v1", "10", "Prayer", "hello", "hello")]
    query = fake.calls[0][3]
    assert "w1.language = 'fa'" in query
    assert "w2.language = 'fa-translit'" in query


def test_update_language_dry_run_counts_without_writing(db, transliterator):
    fake = FakeDolt(HEADER + "v1,1,Same,hello,hello\nv2,2,Prayer,hello,old\n")
    out = io.StringIO()
    config = UpdateConfig(str(db), dry_run=True)
    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=fake):
        counts = update_language(transliterator, config, "fa", "fa-translit", out)
    assert counts == (1, 1)
    assert fake.updates() == []
    text = out.getvalue()
    assert "Updating Prayer (source_id: 2)" in text
    assert "Found 2 records to process" in text
    assert "Processing batch 1-2..." in text


def test_update_language_writes_changed_records(db, transliterator):
    fake = FakeDolt(HEADER + "v1,1,Same,hello,hello\nv2,2,Prayer,hello,old\n")
    config = UpdateConfig(str(db))
    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=fake):
        counts = update_language(transliterator, config, "ar", "ar-translit", io.StringIO())
    assert counts == (1, 1)
    updates = fake.updates()
    assert len(updates) == 1
    assert updates[0][3] == "UPDATE writings SET text = 'hello' WHERE version = 'v2'"


def test_update_language_batches(db, transliterator):
    rows = "".join(f"v{n},{n},N{n},hello,hello\n" for n in range(1, 4))
    fake = FakeDolt(HEADER + rows)
    out = io.StringIO()
    config = UpdateConfig(str(db), dry_run=True, batch_size=2)
    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=fake):
        update_language(transliterator, config, "fa", "fa-translit", out)
    text = out.getvalue()
    assert "Processing batch 1-2..." in text
    assert "Processing batch 3-3..." in text


def test_update_language_rejects_nonpositive_batch(db, transliterator):
    with pytest.raises(ValueError):
        update_language(transliterator, UpdateConfig(str(db), batch_size=0), "fa", "fa-translit")


def test_update_database_requires_dolt_repository(tmp_path, transliterator):
    with mock.patch("bahai_translit.dolt.subprocess.run") as run:
        with pytest.raises(DoltError, match="does not appear to be a dolt repository"):
            update_database(UpdateConfig(str(tmp_path)), transliterator, io.StringIO())
    assert run.call_count == 0


def test_update_database_arabic_then_commits(db, transliterator):
    fake = FakeDolt(HEADER + "v2,2,Prayer,hello,old\n")
    out = io.StringIO()
    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=fake):
        update_database(UpdateConfig(str(db), language="ar"), transliterator, out)
    text = out.getvalue()
    assert "Updating Prayer (source_id: 2)" in text
    assert text.count("Found 1 records to process") == 1
    assert "Executing: dolt add ." in text
    queries = [call[3] for call in fake.calls if "-r" in call]
    assert len(queries) == 1
    assert "w1.language = 'ar'" in queries[0]
    assert fake.calls[-3:] == [
        ["dolt", "add", "."],
        ["dolt", "commit", "-m", COMMIT_MESSAGE],
        ["dolt", "push"],
    ]


def test_update_database_both_languages_dry_run(db, transliterator):
    fake = FakeDolt()
    out = io.StringIO()
    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=fake):
        update_database(UpdateConfig(str(db), dry_run=True), transliterator, out)
    text = out.getvalue()
    assert text.count("Found 0 records to process") == 2
    assert "Executing:" not in text
    assert len(fake.calls) == 2
    assert all("-r" in call for call in fake.calls)


def test_update_database_wraps_query_failure(db, transliterator):
    def failing(args, **kwargs):
        return subprocess.CompletedProcess(list(args), 1, stdout="", stderr="bad")

    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=failing):
        with pytest.raises(DoltError, match="failed to update Persian"):
            update_database(UpdateConfig(str(db), language="fa"), transliterator, io.StringIO())


def test_main_without_db_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage: update_database" in capsys.readouterr().out


def test_main_dry_run(db, tmp_path_factory, capsys):
    data_dir = tmp_path_factory.mktemp("data")
    (data_dir / "arabic_dictionary.json").write_text("{}", encoding="utf-8")
    (data_dir / "persian_dictionary.json").write_text("{}", encoding="utf-8")
    fake = FakeDolt()
    with mock.patch("bahai_translit.dolt.subprocess.run", side_effect=fake):
        code = main(["-db", str(db), "-dry-run", "-lang", "fa", "-data-dir", str(data_dir)])
    assert code == 0
    assert "Found 0 records to process" in capsys.readouterr().out


def test_main_reports_missing_repository(tmp_path, tmp_path_factory, capsys):
    data_dir = tmp_path_factory.mktemp("data")
    (data_dir / "arabic_dictionary.json").write_text("{}", encoding="utf-8")
    (data_dir / "persian_dictionary.json").write_text("{}", encoding="utf-8")
    assert main(["-db", str(tmp_path), "-data-dir", str(data_dir)]) == 1
    assert "does not appear to be a dolt repository" in capsys.readouterr().err