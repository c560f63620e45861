"""Interactive prompting and credential resolution."""

import getpass
import sys
from git_jira.models.credential import Credential
from git_jira.utils.config_store import CREDENTIAL_KEY
from git_jira.utils.errors import ConfigError

class Prompter:
    """Read configuration values interactively from stdin."""
    
    def __init__(self, stdin=None, stdout=None, password_reader=None):
        """Initialize the prompter.
        
        Args:
            stdin (file, optional): Input stream. Defaults to sys.stdin
            stdout (file, optional): Output stream for prompts. Defaults to sys.stdout
            password_reader (callable, optional): Reads a secret given a prompt.
                Defaults to getpass.getpass
        """
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.password_reader = password_reader or getpass.getpass
    
    def ask(self, label):
        """Prompt for a value and return the stripped answer.
        
        Raises:
            ConfigError: If stdin is closed before an answer is given
        """
        self.stdout.write(f"{label}: ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise ConfigError(f"No value entered for {label}")
        return line.strip()
    
    def ask_secret(self, label):
        """Prompt for a value without echoing it."""
        try:
            return self.password_reader(f"{label}: ").strip()
        except EOFError as e:
            raise ConfigError(f"No value entered for {label}") from e


class StoredCredentialProvider:
    """Load the credential persisted in the configuration store."""
    
    def __init__(self, store, debug_logger=None):
        self.store = store
        self.logger = debug_logger
    
    def get_credential(self):
        """Return the stored credential, or None if absent or unparsable."""
        value = self.store.load(CREDENTIAL_KEY)
        if value is None:
            return None
        
        try:
            return Credential.parse(value)
        except ValueError as e:
            if self.logger:
                self.logger.log(f"Ignoring stored credential: {e}")
            return None


class PromptCredentialProvider:
    """Ask the user for a credential and persist it through the store."""
    
    def __init__(self, store, prompter, debug_logger=None):
        self.store = store
        self.prompter = prompter
        self.logger = debug_logger
    
    def get_credential(self):
        username = self.prompter.ask("Username")
        password = self.prompter.ask_secret("Password")
        credential = Credential(username=username, password=password)
        self.store.save(CREDENTIAL_KEY, credential.to_header_value())
        if self.logger:
            self.logger.log(f"Stored credential for {username}")
        return credential


class CredentialResolver:
    """Resolve a credential from the first provider that yields one."""
    
    def __init__(self, providers):
        """Initialize the resolver.
        
        Args:
            providers (list): Providers exposing get_credential(), tried in order
        """
        self.providers = providers
    
    @classmethod
    def default(cls, store, prompter, debug_logger=None):
        """Stored credential first, interactive prompt as fallback."""
        return cls([
            StoredCredentialProvider(store, debug_logger),
            PromptCredentialProvider(store, prompter, debug_logger)
        ])
    
    def resolve(self):
        """Return the first available credential.
        
        Raises:
            ConfigError: If no provider yields a credential
        """
        for provider in self.providers:
            credential = provider.get_credential()
            if credential is not None:
                return credential
        raise ConfigError("No JIRA credential available")
