"""Branch data model."""

class Branch:
    """Represents a local git branch and the issue key found in its name."""
    
    def __init__(self, name, issue_key=None):
        """Initialize a Branch.
        
        Args:
            name (str): The branch line as listed by git
            issue_key (str, optional): The issue key extracted from the name
        """
        self.name = name
        self.issue_key = issue_key
    
    def to_dict(self):
        """Convert to dictionary."""
        return {
            'name': self.name,
            'issue_key': self.issue_key
        }
    
    @classmethod
    def from_dict(cls, data):
        """Create Branch from dictionary."""
        return cls(
            name=data['name'],
            issue_key=data.get('issue_key')
        )
    
    def __eq__(self, other):
        if not isinstance(other, Branch):
            return NotImplemented
        return self.name == other.name and self.issue_key == other.issue_key
    
    def __repr__(self):
        return f"Branch(name={self.name}, issue_key={self.issue_key})"
