"""Key-value configuration stores backing the persisted JIRA settings."""

import subprocess
from git_jira.utils.errors import ConfigStoreError

URL_KEY = 'com.spoqa.jira.url'
CREDENTIAL_KEY = 'com.spoqa.jira.credential'

class ConfigStore:
    """Base class for configuration stores."""
    
    def load(self, key):
        """Return the stored value for key, or None if it is absent or empty."""
        raise NotImplementedError("ConfigStore must implement load method")
    
    def save(self, key, value):
        """Persist value under key.
        
        Raises:
            ConfigStoreError: If the value could not be stored
        """
        raise NotImplementedError("ConfigStore must implement save method")
    
    def read_or_prompt(self, key, prompt_label, prompter):
        """Return the stored value, prompting for and saving it when absent.
        
        Args:
            key (str): Configuration key
            prompt_label (str): Label shown to the user
            prompter (Prompter): Interactive input source
            
        Returns:
            str: The stored or newly entered value
        """
        value = self.load(key)
        if value is not None:
            return value
        
        value = prompter.ask(prompt_label)
        self.save(key, value)
        return value


class GitConfigStore(ConfigStore):
    """Configuration store backed by `git config`."""
    
    def __init__(self, git_executable='git', debug_logger=None):
        """Initialize the store.
        
        Args:
            git_executable (str): git binary to invoke
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.git = git_executable
        self.logger = debug_logger
    
    def _run(self, args):
        try:
            return subprocess.run(
                [self.git] + args,
                capture_output=True,
                text=True
            )
        except OSError as e:
            raise ConfigStoreError(f"Failed to execute git config: {e}") from e
    
    def load(self, key):
        result = self._run(['config', key])
        if result.returncode != 0:
            if self.logger:
                self.logger.log(f"git config {key}: not set")
            return None
        
        value = result.stdout.strip()
        return value or None
    
    def save(self, key, value):
        result = self._run(['config', '--global', key, value])
        if result.returncode != 0:
            raise ConfigStoreError(
                f"Failed to save {key} to global git config: {result.stderr.strip()}"
            )
        if self.logger:
            self.logger.log(f"Saved {key} to global git config")


class MemoryConfigStore(ConfigStore):
    """In-memory configuration store."""
    
    def __init__(self, values=None):
        self.values = dict(values or {})
    
    def load(self, key):
        value = (self.values.get(key) or '').strip()
        return value or None
    
    def save(self, key, value):
        self.values[key] = value
