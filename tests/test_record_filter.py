"""Tests for record_filter module."""

import pytest

from RestCLI.models import Record
from RestCLI.path_decoder import MalformedPathError
from RestCLI.record_filter import (
    PatternError,
    compile_patterns,
    filter_records,
    split_patterns,
)

RECORDS = [
    Record("/languages/go", {"GC": "yes"}),
    Record("/languages/go/applications/etcd", {"category": "database"}),
    Record("/languages/gopher", {"GC": "maybe"}),
    Record("/languages/C%2FC++", {"GC": "no"}),
    Record("/languages/C%2FC++/applications/linux", {"category": "kernel"}),
]


class TestSplitPatterns:
    def test_empty_string(self):
        assert split_patterns("") == []

    def test_whitespace_only(self):
        assert split_patterns("   ") == []

    def test_multiple_patterns(self):
        assert split_patterns("go, rust ,C%2F") == ["go", "rust", "C%2F"]

    def test_empty_segments_ignored(self):
        assert split_patterns("go,,rust,") == ["go", "rust"]


class TestCompilePatterns:
    def test_compiles_valid(self):
        assert len(compile_patterns([r"go$", r"rust"])) == 2

    def test_reports_every_invalid_pattern(self):
        with pytest.raises(PatternError) as exc_info:
            compile_patterns(["go", "[bad", "(unclosed"])
        errors = exc_info.value.errors
        assert len(errors) == 2
        assert "[bad" in errors[0]
        assert "(unclosed" in errors[1]


class TestFilterRecords:
    def test_defaults_keep_everything(self):
        assert filter_records(RECORDS) == RECORDS

    def test_segment_prefix(self):
        paths = [r.path for r in filter_records(RECORDS, prefix="/languages/go")]
        assert paths == ["/languages/go", "/languages/go/applications/etcd"]

    def test_decoded_prefix(self):
        paths = [r.path for r in filter_records(RECORDS, prefix="/languages/C%2fC++/")]
        assert paths == [
            "/languages/C%2FC++",
            "/languages/C%2FC++/applications/linux",
        ]

    def test_no_match(self):
        assert filter_records(RECORDS, prefix="/nothing") == []

    def test_patterns_search_raw_path(self):
        selected = filter_records(RECORDS, patterns=[r"C%2FC\+\+/"])
        assert [r.path for r in selected] == ["/languages/C%2FC++/applications/linux"]

    def test_prefix_and_patterns(self):
        selected = filter_records(RECORDS, prefix="/languages/go", patterns=["etcd"])
        assert [r.path for r in selected] == ["/languages/go/applications/etcd"]

    def test_malformed_prefix(self):
        with pytest.raises(MalformedPathError):
            filter_records(RECORDS, prefix="languages")

    def test_invalid_pattern(self):
        with pytest.raises(PatternError):
            filter_records(RECORDS, patterns=["[bad"])

    def test_malformed_record_excluded_by_pattern_still_rejected(self):
        records = RECORDS + [Record("languages/bad", {"k": "v"})]
        with pytest.raises(MalformedPathError) as exc_info:
            filter_records(records, patterns=["etcd"])
        assert exc_info.value.path == "languages/bad"

    def test_malformed_record_outside_prefix_still_rejected(self):
        records = RECORDS + [Record("/c%zz")]
        with pytest.raises(MalformedPathError):
            filter_records(records, prefix="/languages/go")
