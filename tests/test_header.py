"""Tests for license header insertion."""

from datetime import datetime, timedelta, timezone

from licensehdr.clock import FixedClock
from licensehdr.header import YEAR_PLACEHOLDER, HeaderWriter
from licensehdr.versioning import FileChange

NOW_2020 = 1577836800
TEMPLATE = "/* Copyright {year} Example Corp, see {LICENSE} */"


def make_tree(root, files):
    for path, content in files.items():
        file_path = root / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)


class TestRender:
    """Test header rendering."""

    def test_render_with_change(self, temp_dir):
        writer = HeaderWriter(TEMPLATE, [], root=temp_dir)

        header = writer.render(FileChange("a.go", 2017, 2018))

        assert header == "/* Copyright 2017-2018 Example Corp, see {LICENSE} */"

    def test_render_without_change_uses_clock(self, temp_dir):
        writer = HeaderWriter(TEMPLATE, [], root=temp_dir, clock=FixedClock(NOW_2020))

        assert writer.render() == "/* Copyright 2020 Example Corp, see {LICENSE} */"

    def test_render_without_change_uses_utc_year(self, temp_dir):
        class SydneyNewYearClock:
            def now(self):
                # 2020-12-31T19:00:00Z
                return datetime(2021, 1, 1, 5, 0, tzinfo=timezone(timedelta(hours=10)))

        writer = HeaderWriter(TEMPLATE, [], root=temp_dir, clock=SydneyNewYearClock())

        assert writer.render() == "/* Copyright 2020 Example Corp, see {LICENSE} */"

    def test_template_without_placeholder(self, temp_dir):
        writer = HeaderWriter("// Licensed under MIT", [], root=temp_dir)

        assert YEAR_PLACEHOLDER not in writer.render(FileChange("a.go", 2017, 2018))
        assert writer.render(FileChange("a.go", 2017, 2018)) == "// Licensed under MIT"


class TestExpandIncludes:
    """Test include pattern expansion."""

    def test_globs_are_relative_sorted_and_unique(self, temp_dir):
        make_tree(temp_dir, {
            "main.go": "package main\n",
            "core/line_comment.go": "package core\n",
            "core/notes.txt": "notes\n",
            "build.sh": "#!/bin/sh\n",
        })
        writer = HeaderWriter(TEMPLATE, ["**/*.go", "*.go", "*.sh"], root=temp_dir)

        assert writer.expand_includes() == ["build.sh", "core/line_comment.go", "main.go"]

    def test_directories_skipped(self, temp_dir):
        make_tree(temp_dir, {"pkg.go/inner.txt": "x\n", "a.go": "package a\n"})
        writer = HeaderWriter(TEMPLATE, ["*.go"], root=temp_dir)

        assert writer.expand_includes() == ["a.go"]


class TestInsert:
    """Test header insertion."""

    def test_insert_all_matched_files(self, temp_dir):
        make_tree(temp_dir, {"a.go": "package a\n", "b.go": "package b\n"})
        writer = HeaderWriter(TEMPLATE, ["*.go"], root=temp_dir, clock=FixedClock(NOW_2020))

        updated = writer.insert()

        assert updated == ["a.go", "b.go"]
        assert (temp_dir / "a.go").read_text() == (
            "/* Copyright 2020 Example Corp, see {LICENSE} */\npackage a\n"
        )

    def test_existing_header_left_alone(self, temp_dir):
        existing = "/* Copyright 2020 Example Corp, see {LICENSE} */\npackage a\n"
        make_tree(temp_dir, {"a.go": existing})
        writer = HeaderWriter(TEMPLATE, ["*.go"], root=temp_dir, clock=FixedClock(NOW_2020))

        assert writer.insert() == []
        assert (temp_dir / "a.go").read_text() == existing

    def test_insert_is_idempotent(self, temp_dir):
        make_tree(temp_dir, {"a.go": "package a\n"})
        writer = HeaderWriter(TEMPLATE, ["*.go"], root=temp_dir, clock=FixedClock(NOW_2020))

        writer.insert()
        assert writer.insert() == []

    def test_insert_restricted_to_changes(self, temp_dir):
        make_tree(temp_dir, {
            "changed.go": "package changed\n",
            "untouched.go": "package untouched\n",
            "notes.txt": "not included\n",
        })
        writer = HeaderWriter("// (c) {year}", ["*.go"], root=temp_dir)
        changes = [FileChange("changed.go", 2017, 2019), FileChange("notes.txt", 2018, 2018)]

        updated = writer.insert(changes)

        assert updated == ["changed.go"]
        assert (temp_dir / "changed.go").read_text() == "// (c) 2017-2019\npackage changed\n"
        assert (temp_dir / "untouched.go").read_text() == "package untouched\n"
        assert (temp_dir / "notes.txt").read_text() == "not included\n"

    def test_empty_change_list_updates_nothing(self, temp_dir):
        make_tree(temp_dir, {"a.go": "package a\n"})
        writer = HeaderWriter(TEMPLATE, ["*.go"], root=temp_dir)

        assert writer.insert([]) == []

    def test_binary_contents_preserved(self, temp_dir):
        (temp_dir / "blob.bin").write_bytes(b"\x00\xff\x10")
        writer = HeaderWriter("# {year}", ["*.bin"], root=temp_dir, clock=FixedClock(NOW_2020))

        writer.insert()

        assert (temp_dir / "blob.bin").read_bytes() == b"# 2020\n\x00\xff\x10"
