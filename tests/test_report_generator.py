"""Tests for the branch report."""

import io

import pytest

from git_jira.models.branch import Branch
from git_jira.operations.report_generator import ReportGenerator
from git_jira.utils.debug_logger import DebugLogger
from git_jira.utils.errors import MissingIssueError


SUMMARIES = {"PROJ-1": "Fix login", "PROJ-2": "Add logout"}

BRANCHES = [
    Branch("PROJ-1-foo", "PROJ-1"),
    Branch("no-key-here"),
    Branch("PROJ-2-bar", "PROJ-2"),
]


def test_report_lines_in_branch_order(config):
    stream = io.StringIO()
    ReportGenerator(config, stream=stream).execute(BRANCHES, SUMMARIES)

    assert stream.getvalue() == (
        "PROJ-1-foo \tFix login\n"
        "no-key-here \t\n"
        "PROJ-2-bar \tAdd logout\n"
    )


def test_missing_issue_renders_empty_summary(config, capsys):
    logger = DebugLogger()
    lines = ReportGenerator(config, logger, stream=io.StringIO()).build_lines(
        [Branch("PROJ-3-gone", "PROJ-3")], SUMMARIES
    )

    assert lines == ["PROJ-3-gone \t"]
    assert "PROJ-3" in capsys.readouterr().err


def test_missing_issue_in_strict_mode_prints_nothing(config):
    config.strict = True
    stream = io.StringIO()

    with pytest.raises(MissingIssueError) as excinfo:
        ReportGenerator(config, stream=stream).execute(BRANCHES + [Branch("PROJ-3-gone", "PROJ-3")], SUMMARIES)

    assert excinfo.value.key == "PROJ-3"
    assert stream.getvalue() == ""


def test_same_input_gives_same_report(config):
    generator = ReportGenerator(config, stream=io.StringIO())
    assert generator.build_lines(BRANCHES, SUMMARIES) == generator.build_lines(BRANCHES, SUMMARIES)
