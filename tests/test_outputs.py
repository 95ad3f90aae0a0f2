"""Tests for run outputs and failure annotations."""

import io
from pathlib import Path

from verbump.outputs import RunOutputs, report_failure


def test_outputs_written_to_file(tmp_path: Path) -> None:
    path = tmp_path / "output"
    outputs = RunOutputs(path)

    outputs.set("pull-request-number", 21)
    outputs.set("is-prerelease", True)
    outputs.set("labels", "")

    assert path.read_text() == "pull-request-number=21\nis-prerelease=true\nlabels=\n"
    assert outputs.values == {"pull-request-number": "21", "is-prerelease": "true", "labels": ""}


def test_multiline_value_uses_delimiter(tmp_path: Path) -> None:
    path = tmp_path / "output"
    RunOutputs(path).set("notes", "line 1\nline 2")

    lines = path.read_text().splitlines()
    assert lines[0].startswith("notes<<")
    delimiter = lines[0][len("notes<<") :]
    assert lines[1:] == ["line 1", "line 2", delimiter]


def test_outputs_without_file_are_kept_in_memory() -> None:
    outputs = RunOutputs()
    outputs.update({"a": "1", "b": False})
    assert outputs.values == {"a": "1", "b": "false"}


def test_report_failure_escapes_newlines() -> None:
    stream = io.StringIO()
    report_failure("first\nsecond 100%", stream)
    assert stream.getvalue() == "::error::first%0Asecond 100%25\n"
