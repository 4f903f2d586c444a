"""Tests for the entry model."""

import dataclasses

import pytest

from docindex.entry import EntryKind, IndexEntry, is_documentation_title
from docindex.errors import IndexFormatError, UnknownEntryKind


class TestEntryKind:
    @pytest.mark.parametrize("tag, kind", [
        ("markupTitle", EntryKind.MARKUP_TITLE),
        ("nimTitle", EntryKind.NIM_TITLE),
        ("heading", EntryKind.HEADING),
        ("idx", EntryKind.IDX_ROLE),
        ("nim", EntryKind.SYMBOL),
        ("nimgrp", EntryKind.SYMBOL_GROUP),
    ])
    def test_tag_table(self, tag, kind):
        assert EntryKind.from_tag(tag) is kind
        assert str(kind) == tag
        assert kind.tag == tag

    def test_tag_table_is_bijective(self):
        tags = [kind.tag for kind in EntryKind]
        assert len(set(tags)) == len(EntryKind) == 6
        assert all(EntryKind.from_tag(kind.tag) is kind for kind in EntryKind)

    def test_unknown_tag(self):
        with pytest.raises(UnknownEntryKind) as exc_info:
            EntryKind.from_tag("bogus")
        assert exc_info.value.tag == "bogus"
        assert isinstance(exc_info.value, IndexFormatError)
        assert isinstance(exc_info.value, ValueError)

    def test_tags_are_case_sensitive(self):
        with pytest.raises(UnknownEntryKind):
            EntryKind.from_tag("NimTitle")

    def test_title_kinds(self):
        titles = {kind for kind in EntryKind if kind.is_title}
        assert titles == {EntryKind.MARKUP_TITLE, EntryKind.NIM_TITLE}

    def test_escaped_kinds(self):
        escaped = {kind for kind in EntryKind if kind.is_escaped}
        assert escaped == {EntryKind.MARKUP_TITLE, EntryKind.HEADING, EntryKind.IDX_ROLE}


class TestIndexEntry:
    def test_defaults(self):
        entry = IndexEntry()
        assert entry.keyword == ""
        assert entry.link == ""
        assert entry.line == 0
        assert entry.module == ""
        assert entry.aux == ""

    def test_immutable(self):
        entry = IndexEntry(keyword="split")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.keyword = "join"

    def test_str(self):
        entry = IndexEntry(
            keyword="split",
            link="strutils.html#split",
            link_title="split(s)",
            link_desc="Splits",
            line=40,
        )
        assert str(entry) == '("split", "strutils.html#split", "split(s)", "Splits", 40)'

    def test_fragment(self):
        assert IndexEntry(link="strutils.html#split").fragment == "split"
        assert IndexEntry(link="strutils.html").fragment == ""

    def test_is_title(self):
        assert IndexEntry(kind=EntryKind.NIM_TITLE).is_title
        assert not IndexEntry(kind=EntryKind.HEADING).is_title

    def test_usable_in_sets(self):
        a = IndexEntry(keyword="split", link="s.html#a")
        b = IndexEntry(keyword="split", link="s.html#a")
        assert len({a, b}) == 1


class TestIsDocumentationTitle:
    def test_without_fragment(self):
        assert is_documentation_title("foo.html")

    def test_with_fragment(self):
        assert not is_documentation_title("foo.html#bar")

    def test_empty_fragment(self):
        assert not is_documentation_title("foo.html#")
