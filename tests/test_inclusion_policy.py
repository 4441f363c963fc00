# Path: tests/test_inclusion_policy.py
"""Tests for the inclusion policy tiers."""

import copy

import pytest

from resource_lister.engine.inclusion_policy import filter_entries, get_extension, should_include
from resource_lister.engine.result import InclusionPolicy, ResourceEntry


class TestGetExtension:

    def test_lowercases_final_suffix(self):
        assert get_extension('/Client/Paks/pakchunk0.PAK') == '.pak'

    def test_only_last_dot_counts(self):
        assert get_extension('archive.tar.gz') == '.gz'

    def test_no_dot_uses_whole_path(self):
        assert get_extension('/Client/LICENSE') == './client/license'


class TestIncludeAllFiles:

    def test_size_floor_is_inclusive(self):
        policy = InclusionPolicy(include_all_files=True, min_file_size=1024)

        assert not should_include(ResourceEntry('a.bin', 1023, 'x'), policy)
        assert should_include(ResourceEntry('a.bin', 1024, 'x'), policy)

    def test_ignores_extension_and_big_pak_settings(self):
        policy = InclusionPolicy(
            include_all_files=True,
            big_paks_only=True,
            big_paks_min_size=10**9,
            include_extensions=frozenset({'.png'}),
            min_file_size=10,
        )

        assert should_include(ResourceEntry('notes.txt', 20, 'x'), policy)
        assert should_include(ResourceEntry('small.pak', 20, 'x'), policy)


class TestBigPaksOnly:

    @pytest.fixture
    def policy(self):
        return InclusionPolicy(
            include_all_files=False,
            big_paks_only=True,
            big_paks_min_size=100_000_000,
        )

    def test_big_pak_included(self, policy):
        assert should_include(ResourceEntry('a.pak', 100_000_000, 'x'), policy)

    def test_wrong_extension_excluded(self, policy):
        assert not should_include(ResourceEntry('a.pck', 999_000_000, 'x'), policy)

    def test_small_pak_excluded(self, policy):
        assert not should_include(ResourceEntry('a.pak', 99_999_999, 'x'), policy)

    def test_takes_precedence_over_extension_list(self, policy):
        policy = InclusionPolicy(
            include_all_files=False,
            big_paks_only=True,
            big_paks_min_size=100,
            include_extensions=frozenset({'.png'}),
            min_file_size=1,
        )

        assert not should_include(ResourceEntry('image.png', 5000, 'x'), policy)


class TestExtensionAllowList:

    @pytest.fixture
    def policy(self):
        return InclusionPolicy(
            include_all_files=False,
            include_extensions=frozenset({'.png'}),
            min_file_size=1024,
        )

    def test_extension_match_is_case_insensitive(self, policy):
        assert should_include(ResourceEntry('x.PNG', 2048, 'x'), policy)

    def test_configured_extensions_are_normalized(self):
        policy = InclusionPolicy(
            include_all_files=False,
            include_extensions=frozenset({'.PNG'}),
            min_file_size=0,
        )

        assert should_include(ResourceEntry('x.png', 1, 'x'), policy)

    def test_below_floor_excluded(self, policy):
        assert not should_include(ResourceEntry('x.png', 1023, 'x'), policy)

    def test_unlisted_extension_excluded(self, policy):
        assert not should_include(ResourceEntry('x.jpg', 4096, 'x'), policy)

    def test_dotless_destination_compared_as_whole_path(self, policy):
        assert not should_include(ResourceEntry('/Client/png', 4096, 'x'), policy)
        assert should_include(ResourceEntry('png', 4096, 'x'), policy)


def test_should_include_is_pure():
    entry = ResourceEntry('/a/b.pak', 5000, 'abc')
    policy = InclusionPolicy(
        include_all_files=False,
        include_extensions=frozenset({'.pak'}),
        min_file_size=1000,
    )
    entry_before = copy.deepcopy(entry)
    policy_before = copy.deepcopy(policy)

    first = should_include(entry, policy)
    second = should_include(entry, policy)

    assert first == second
    assert entry == entry_before
    assert policy == policy_before


def test_filter_entries_preserves_order():
    entries = [
        ResourceEntry('c.pak', 3000, '3'),
        ResourceEntry('a.pak', 10, '1'),
        ResourceEntry('b.pak', 2000, '2'),
    ]
    policy = InclusionPolicy(include_all_files=True, min_file_size=1000)

    assert [e.destination for e in filter_entries(entries, policy)] == ['c.pak', 'b.pak']
