"""Tests for tree_builder module."""

import pytest

from RestCLI.models import Record
from RestCLI.path_decoder import MalformedPathError
from RestCLI.tree_builder import build_tree


class TestBuildTree:
    def test_empty(self):
        root = build_tree([])
        assert root.name == ""
        assert root.attributes == {}
        assert root.children == {}

    def test_intermediate_nodes_created(self):
        root = build_tree([Record("/a/b/c", {"k": "v"})])
        a = root.children["a"]
        b = a.children["b"]
        c = b.children["c"]
        assert a.attributes == {}
        assert b.attributes == {}
        assert c.attributes == {"k": "v"}
        assert c.children == {}

    def test_leaf_attributes_round_trip(self):
        attrs = {"category": "database", "company": "CoreOS"}
        root = build_tree([
            Record("/languages/go", {"GC": "yes"}),
            Record("/languages/go/applications/etcd", attrs),
        ])
        assert root.find(["languages", "go", "applications", "etcd"]).attributes == attrs

    def test_decoded_names(self):
        root = build_tree([Record("/languages/C%2FC++", {"GC": "no"})])
        assert list(root.children["languages"].children) == ["C/C++"]

    def test_shared_prefix_reused(self):
        root = build_tree([
            Record("/languages/go/applications/etcd"),
            Record("/languages/go/applications/kubernetes"),
        ])
        apps = root.find(["languages", "go", "applications"])
        assert list(apps.children) == ["etcd", "kubernetes"]
        assert len(root.children) == 1

    def test_children_in_insertion_order(self):
        root = build_tree([Record("/z"), Record("/a"), Record("/m")])
        assert list(root.children) == ["z", "a", "m"]

    def test_find_missing(self):
        root = build_tree([Record("/a/b")])
        assert root.find(["a", "x"]) is None
        assert root.find([]) is root


class TestLastWriteWins:
    def test_later_value_wins(self):
        root = build_tree([
            Record("/languages/rust", {"GC": "yes"}),
            Record("/languages/rust", {"GC": "no"}),
        ])
        assert root.find(["languages", "rust"]).attributes == {"GC": "no"}

    def test_overwritten_key_keeps_position(self):
        root = build_tree([
            Record("/x", {"a": "1", "b": "2"}),
            Record("/x", {"c": "3", "a": "9"}),
        ])
        attrs = root.find(["x"]).attributes
        assert list(attrs.items()) == [("a", "9"), ("b", "2"), ("c", "3")]

    def test_encoded_and_plain_paths_merge(self):
        root = build_tree([
            Record("/a%62", {"k": "1"}),
            Record("/ab", {"k": "2"}),
        ])
        assert list(root.children) == ["ab"]
        assert root.children["ab"].attributes == {"k": "2"}


class TestBuildErrors:
    def test_malformed_path_fails_whole_build(self):
        records = [
            Record("/languages/rust", {"GC": "no"}),
            Record("languages/go", {"GC": "yes"}),
        ]
        with pytest.raises(MalformedPathError) as exc_info:
            build_tree(records)
        assert exc_info.value.path == "languages/go"


class TestDeterminism:
    def test_same_input_same_tree(self):
        records = [
            Record("/b/c", {"x": "1"}),
            Record("/a", {"y": "2"}),
            Record("/b", {"z": "3"}),
        ]
        assert build_tree(records) == build_tree(records)
