"""Tests for issue key extraction and JQL building."""

import pytest

from git_jira.models.branch import Branch
from git_jira.operations.key_extractor import (
    build_jql,
    extract_key,
    extract_keys,
    to_branches,
    unique_keys,
)


@pytest.mark.parametrize("name, expected", [
    ("PROJ-123-fix-bug", "PROJ-123"),
    ("feature/PROJ-7", "PROJ-7"),
    ("* PROJ-1-foo", "PROJ-1"),
    ("ABC-1-and-DEF-2", "ABC-1"),
    ("hotfix-OPS-42", "OPS-42"),
    ("no-key-here", None),
    ("proj-123-lowercase", None),
    ("PROJ-", None),
    ("master", None),
    ("", None),
])
def test_extract_key(name, expected):
    assert extract_key(name) == expected


def test_extract_key_takes_uppercase_run_before_hyphen():
    assert extract_key("myPROJ-5") == "PROJ-5"


def test_extract_keys_preserves_order():
    names = ["PROJ-2-bar", "master", "PROJ-1-foo"]
    assert extract_keys(names) == ["PROJ-2", None, "PROJ-1"]


def test_to_branches_pairs_names_with_keys():
    assert to_branches(["PROJ-1-foo", "master"]) == [
        Branch("PROJ-1-foo", "PROJ-1"),
        Branch("master", None),
    ]


def test_unique_keys_drops_none_and_duplicates():
    assert unique_keys(["PROJ-2", None, "PROJ-1", "PROJ-2"]) == ["PROJ-2", "PROJ-1"]


def test_build_jql_from_branch_names():
    keys = extract_keys(["PROJ-1-foo", "no-key-here", "PROJ-2-bar"])
    assert build_jql(keys) == "key in (PROJ-1,PROJ-2)"


def test_build_jql_with_no_keys():
    assert build_jql([None, None]) == "key in ()"
