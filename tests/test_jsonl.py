"""Tests for prd_beads.pm.jsonl module."""

import json
from unittest.mock import patch

import pytest

from prd_beads.lib.validate import ValidationError
from prd_beads.pm.jsonl import SerializationError, to_jsonl, write_jsonl
from prd_beads.pm.models import BeadsIssue

STAMP = "2026-01-02T03:04:05.678Z"


def make_issue(**overrides) -> BeadsIssue:
    data = dict(
        id="US-1",
        title="T",
        description="D",
        status="open",
        priority=2,
        issue_type="task",
        labels=["pnpm-migration"],
        created_at=STAMP,
        created_by="prd-import",
        updated_at=STAMP,
        blocks=[],
    )
    data.update(overrides)
    return BeadsIssue(**data)


class TestToJsonl:
    """Test JSONL rendering."""

    def test_empty_is_single_newline(self):
        assert to_jsonl([]) == "\n"

    def test_one_compact_line_per_issue(self):
        text = to_jsonl([make_issue(id="a"), make_issue(id="b")])
        assert text.endswith("\n")
        assert not text.endswith("\n\n")
        lines = text.split("\n")[:-1]
        assert [json.loads(line)["id"] for line in lines] == ["a", "b"]
        assert ", " not in lines[0] and ": " not in lines[0]

    def test_key_order(self):
        line = to_jsonl([make_issue()]).rstrip("\n")
        assert list(json.loads(line)) == [
            "id", "title", "description", "status", "priority", "issue_type",
            "labels", "created_at", "created_by", "updated_at", "blocks",
        ]

    def test_newlines_in_description_stay_escaped(self):
        text = to_jsonl([make_issue(description="a\nb")])
        assert text.count("\n") == 1
        assert json.loads(text)["description"] == "a\nb"

    def test_non_ascii_kept(self):
        assert "café" in to_jsonl([make_issue(title="café")])

    def test_unserializable_value_raises(self):
        with pytest.raises(SerializationError, match="US-1"):
            to_jsonl([make_issue(blocks=[object()])])

    def test_nan_raises(self):
        with pytest.raises(SerializationError, match="US-1"):
            to_jsonl([make_issue(blocks=[float("nan")])])

    def test_infinity_raises(self):
        with pytest.raises(SerializationError):
            to_jsonl([make_issue(blocks=[float("inf")])])

    def test_lone_surrogate_raises(self):
        with pytest.raises(SerializationError, match="US-1"):
            to_jsonl([make_issue(title="\ud800")])


class TestWriteJsonl:
    """Test writing the import file."""

    def test_writes_file(self, tmp_path):
        path = tmp_path / "prd-beads.jsonl"
        write_jsonl(path, [make_issue()])
        assert path.read_text(encoding="utf-8") == to_jsonl([make_issue()])

    def test_empty_file_has_one_newline(self, tmp_path):
        path = tmp_path / "prd-beads.jsonl"
        write_jsonl(path, [])
        assert path.read_bytes() == b"\n"

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "prd-beads.jsonl"
        path.write_text("stale\n")
        write_jsonl(path, [make_issue()])
        assert "stale" not in path.read_text()

    def test_no_temp_files_left(self, tmp_path):
        write_jsonl(tmp_path / "out.jsonl", [make_issue()])
        assert [p.name for p in tmp_path.iterdir()] == ["out.jsonl"]

    def test_serialization_failure_writes_nothing(self, tmp_path):
        path = tmp_path / "out.jsonl"
        path.write_text("previous\n")
        with pytest.raises(SerializationError):
            write_jsonl(path, [make_issue(), make_issue(id="bad", blocks=[object()])])
        assert path.read_text() == "previous\n"
        assert len(list(tmp_path.iterdir())) == 1

    def test_unencodable_text_leaves_no_files(self, tmp_path):
        path = tmp_path / "prd-beads.jsonl"
        with pytest.raises(SerializationError):
            write_jsonl(path, [make_issue(title="\ud800")])
        assert list(tmp_path.iterdir()) == []

    def test_failed_replace_removes_temp_file(self, tmp_path):
        path = tmp_path / "prd-beads.jsonl"
        with patch("prd_beads.pm.jsonl.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                write_jsonl(path, [make_issue()])
        assert list(tmp_path.iterdir()) == []

    def test_refuses_invalid_issue(self, tmp_path):
        path = tmp_path / "out.jsonl"
        with pytest.raises(ValidationError, match="Refusing to write"):
            write_jsonl(path, [make_issue(priority=7)])
        assert not path.exists()

    def test_creates_parent_dir(self, tmp_path):
        path = tmp_path / "tasks" / "out.jsonl"
        write_jsonl(path, [make_issue()])
        assert path.exists()
