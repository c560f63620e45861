"""Credential data model."""

import base64
import binascii

class Credential:
    """Username and optional password for HTTP Basic authentication."""
    
    def __init__(self, username, password=None):
        """Initialize a Credential.
        
        Args:
            username (str): The JIRA username
            password (str, optional): The JIRA password or API token
        """
        self.username = username
        self.password = password
    
    def to_header_value(self):
        """Serialize to the Basic scheme's wire text, base64("user:password")."""
        text = f"{self.username}:{self.password or ''}"
        return base64.b64encode(text.encode('utf-8')).decode('ascii')
    
    @classmethod
    def parse(cls, text):
        """Parse the Basic scheme's wire text.
        
        Args:
            text (str): Base64 encoded "user:password"
            
        Returns:
            Credential: The decoded credential
            
        Raises:
            ValueError: If the text is not a valid Basic credential
        """
        try:
            decoded = base64.b64decode(text.strip(), validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError(f"Invalid credential encoding: {e}") from e
        
        username, sep, password = decoded.partition(':')
        if not username:
            raise ValueError("Credential has no username")
        return cls(username=username, password=password if sep and password else None)
    
    def __eq__(self, other):
        if not isinstance(other, Credential):
            return NotImplemented
        return self.username == other.username and self.password == other.password
    
    def __repr__(self):
        # Never expose the password
        return f"Credential(username={self.username})"
