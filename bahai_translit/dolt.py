"""Running SQL and version-control commands against a Dolt database."""

from __future__ import annotations

import csv
import io
import subprocess
import sys
from collections.abc import Sequence
from os import PathLike
from typing import TextIO


class DoltError(Exception):
    """Raised when a dolt command fails or its output cannot be read."""


def _run(
    db_path: str | PathLike[str], args: Sequence[str], *, combine: bool
) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(
            list(args),
            cwd=db_path,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if combine else subprocess.PIPE,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except OSError as exc:
        raise DoltError(f"failed to execute {' '.join(args)}: {exc}") from exc


def query_csv(db_path: str | PathLike[str], query: str) -> list[list[str]]:
    """Run a SQL query and return its result rows as CSV fields, without the header row."""
    completed = _run(db_path, ["dolt", "sql", "-q", query, "-r", "csv"], combine=False)
    if completed.returncode != 0:
        detail = (completed.stderr or "").strip()
        raise DoltError(
            f"failed to execute dolt sql: exit status {completed.returncode}: {detail}"
        )
    try:
        rows = [row for row in csv.reader(io.StringIO(completed.stdout or "")) if row]
    except csv.Error as exc:
        raise DoltError(f"failed to parse CSV output: {exc}") from exc
    return rows[1:]


def execute(db_path: str | PathLike[str], query: str) -> str:
    """Run a SQL statement and return its combined output."""
    completed = _run(db_path, ["dolt", "sql", "-q", query], combine=True)
    output = completed.stdout or ""
    if completed.returncode != 0:
        raise DoltError(
            f"failed to execute dolt sql: exit status {completed.returncode}, output: {output}"
        )
    return output


def update_text(db_path: str | PathLike[str], version: str, text: str) -> None:
    """Set the text of the writing identified by ``version``."""
    escaped_text = text.replace("'", "''")
    escaped_version = version.replace("'", "''")
    query = f"UPDATE writings SET text = '{escaped_text}' WHERE version = '{escaped_version}'"
    try:
        execute(db_path, query)
    except DoltError as exc:
        raise DoltError(f"failed to update record: {exc}") from exc


def commit_changes(
    db_path: str | PathLike[str], message: str, out: TextIO | None = None
) -> None:
    """Stage, commit and push all changes in the database."""
    out = out if out is not None else sys.stdout
    commands = (
        ("dolt", "add", "."),
        ("dolt", "commit", "-m", message),
        ("dolt", "push"),
    )
    for command in commands:
        joined = " ".join(command)
        print(f"Executing: {joined}", file=out)
        completed = _run(db_path, command, combine=True)
        output = completed.stdout or ""
        if completed.returncode != 0:
            raise DoltError(
                f"failed to execute {joined}: exit status {completed.returncode}, output: {output}"
            )
        if output:
            print(f"Output: {output}", file=out)