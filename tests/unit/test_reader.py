"""
Unit tests for input reading (ga_events.reader).
"""

from __future__ import annotations

import pytest

from ga_events.reader import list_tables, normalize_newlines, read_table_text, table_name


class TestNormalizeNewlines:
    def test_crlf(self):
        assert normalize_newlines("a\r\nb\r\n") == "a\nb\n"

    def test_lone_cr_untouched(self):
        assert normalize_newlines("a\rb") == "a\rb"


class TestTableName:
    def test_extension_stripped(self):
        assert table_name("ga/home_screen.csv") == "home_screen"


class TestListTables:
    """Tests for list_tables()."""

    def test_only_matching_files(self, tmp_path, make_table):
        make_table("a.csv", "name\n")
        make_table("b.CSV", "name\n")
        make_table("notes.txt", "ignored")
        make_table(".hidden.csv", "name\n")
        (tmp_path / "ga" / "sub.csv").mkdir()

        names = sorted(p.name for p in list_tables(tmp_path / "ga"))
        assert names == ["a.csv", "b.CSV"]

    def test_sorted(self, tmp_path, make_table):
        for name in ["zeta.csv", "alpha.csv", "mid.csv"]:
            make_table(name, "name\n")
        paths = list_tables(tmp_path / "ga", sort=True)
        assert [p.stem for p in paths] == ["alpha", "mid", "zeta"]

    def test_custom_extension(self, tmp_path, make_table):
        make_table("a.tsv", "name\n")
        make_table("b.csv", "name\n")
        paths = list_tables(tmp_path / "ga", extension=".tsv")
        assert [p.name for p in paths] == ["a.tsv"]

    def test_empty_directory(self, tmp_path):
        (tmp_path / "empty").mkdir()
        assert list_tables(tmp_path / "empty") == []

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list_tables(tmp_path / "nope")


class TestReadTableText:
    """Tests for read_table_text()."""

    def test_crlf_normalized(self, make_table):
        path = make_table("t.csv", "a,b\r\n1,2\r\n")
        assert read_table_text(path) == "a,b\n1,2\n"

    def test_utf8(self, make_table):
        path = make_table("t.csv", "name,label\n로그인,클릭\n")
        assert "로그인" in read_table_text(path)

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_bytes(b"name\n\xff\xfe\n")
        with pytest.raises(UnicodeDecodeError):
            read_table_text(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_table_text(tmp_path / "missing.csv")

    def test_byte_order_mark_dropped(self, make_table):
        path = make_table("t.csv", "\ufeffname,foo\r\nhome,bar\r\n")
        assert read_table_text(path) == "name,foo\nhome,bar\n"

    def test_bom_in_middle_is_kept(self, make_table):
        path = make_table("t.csv", "name\n\ufeffhome\n")
        assert read_table_text(path) == "name\n\ufeffhome\n"
