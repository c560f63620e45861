"""Tests for the summary lookup and response parsing."""

from unittest.mock import Mock

import pytest

from conftest import SAMPLE_RESPONSE
from git_jira.operations.summary_lookup import SummaryLookup, parse_summaries
from git_jira.utils.api_client import JiraClient
from git_jira.utils.errors import ResponseFormatError


def test_execute_searches_distinct_keys(config):
    client = Mock(spec=JiraClient)
    client.search.return_value = SAMPLE_RESPONSE

    summaries = SummaryLookup(config, client).execute(["PROJ-1", None, "PROJ-2", "PROJ-1"])

    client.search.assert_called_once_with("key in (PROJ-1,PROJ-2)", fields="summary")
    assert summaries == {"PROJ-1": "Fix login", "PROJ-2": "Add logout"}


def test_execute_without_keys_skips_request(config):
    client = Mock(spec=JiraClient)

    assert SummaryLookup(config, client).execute([None, None]) == {}
    client.search.assert_not_called()


def test_parse_summaries_with_no_issues():
    assert parse_summaries({"issues": []}) == {}


@pytest.mark.parametrize("data", [
    [],
    {},
    {"issues": {}},
    {"issues": [{"fields": {"summary": "x"}}]},
    {"issues": [{"key": "PROJ-1"}]},
    {"issues": [{"key": "PROJ-1", "fields": {"summary": None}}]},
    {"issues": [{"key": 1, "fields": {"summary": "x"}}]},
    {"issues": ["PROJ-1"]},
])
def test_parse_summaries_rejects_bad_shapes(data):
    with pytest.raises(ResponseFormatError):
        parse_summaries(data)
