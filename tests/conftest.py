"""Shared fixtures."""

import io
import subprocess

import pytest
from unittest.mock import Mock

from git_jira.models.credential import Credential
from git_jira.utils.config import Config
from git_jira.utils.config_store import CREDENTIAL_KEY, URL_KEY, MemoryConfigStore


SAMPLE_RESPONSE = {
    "issues": [
        {"key": "PROJ-1", "fields": {"summary": "Fix login"}},
        {"key": "PROJ-2", "fields": {"summary": "Add logout"}},
    ]
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own settings out of the tests."""
    for name in (
        "GIT_JIRA_DEBUG",
        "GIT_JIRA_STRICT",
        "GIT_JIRA_LOG_FILE",
        "GIT_JIRA_TIMEOUT",
        "GIT_JIRA_MAX_RETRIES",
        "GIT_JIRA_RETRY_DELAY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def credential():
    return Credential("alice", "s3cret")


@pytest.fixture
def config(credential):
    config = Config()
    config.base_url = "https://jira.example.com"
    config.credential = credential
    config.retry_delay = 0
    return config


@pytest.fixture
def configured_store(credential):
    """Store that already holds a URL and credential."""
    return MemoryConfigStore({
        URL_KEY: "https://jira.example.com",
        CREDENTIAL_KEY: credential.to_header_value(),
    })


class FakePrompter:
    """Prompter answering from a dict and recording every question."""

    def __init__(self, answers=None):
        self.answers = dict(answers or {})
        self.asked = []

    def ask(self, label):
        self.asked.append(label)
        return self.answers[label]

    def ask_secret(self, label):
        return self.ask(label)


@pytest.fixture
def prompter():
    return FakePrompter({
        "JIRA URL": "https://jira.example.com",
        "Username": "alice",
        "Password": "s3cret",
    })


def completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


def json_response(data, status_code=200, url="https://jira.example.com/rest/api/2/search"):
    """requests.Response stand-in returning data."""
    response = Mock()
    response.status_code = status_code
    response.url = url
    response.json.return_value = data
    return response


@pytest.fixture
def stderr():
    return io.StringIO()
