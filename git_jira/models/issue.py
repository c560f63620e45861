"""Issue data model."""

from git_jira.utils.errors import ResponseFormatError

class Issue:
    """Represents a JIRA issue as returned by the search endpoint."""
    
    def __init__(self, key, summary):
        """Initialize an Issue.
        
        Args:
            key (str): The issue key, e.g. PROJ-123
            summary (str): The issue title
        """
        self.key = key
        self.summary = summary
    
    def to_dict(self):
        """Convert to the search endpoint's issue shape."""
        return {
            'key': self.key,
            'fields': {'summary': self.summary}
        }
    
    @classmethod
    def from_dict(cls, data):
        """Create Issue from a search result entry.
        
        Raises:
            ResponseFormatError: If the entry lacks a string key or summary
        """
        if not isinstance(data, dict):
            raise ResponseFormatError(f"Expected issue object, got {type(data).__name__}")
        key = data.get('key')
        fields = data.get('fields')
        summary = fields.get('summary') if isinstance(fields, dict) else None
        if not isinstance(key, str):
            raise ResponseFormatError("Issue entry has no string 'key'")
        if not isinstance(summary, str):
            raise ResponseFormatError(f"Issue {key} has no string 'fields.summary'")
        return cls(key=key, summary=summary)
    
    def __repr__(self):
        return f"Issue(key={self.key}, summary={self.summary})"
