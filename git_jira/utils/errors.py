"""Error types raised by git-jira operations."""


class GitJiraError(Exception):
    """Base class for all git-jira failures."""


class ConfigError(GitJiraError):
    """Configuration is missing, invalid or could not be obtained."""


class ConfigStoreError(ConfigError):
    """Reading from or writing to the configuration store failed."""


class GitCommandError(GitJiraError):
    """The git executable could not be run."""


class TrackerError(GitJiraError):
    """The JIRA search request failed."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(TrackerError):
    """The JIRA response was not shaped the way we expect."""


class MissingIssueError(GitJiraError):
    """An extracted issue key has no summary in the JIRA response."""

    def __init__(self, key):
        super().__init__(f"Issue {key} was not returned by JIRA")
        self.key = key
