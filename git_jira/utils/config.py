import os
from urllib.parse import urlparse
from dotenv import load_dotenv
from git_jira.utils.auth import CredentialResolver
from git_jira.utils.config_store import URL_KEY

class Config:
    def __init__(self):
        """Initialize configuration with default values."""
        # Tracker
        self.base_url = None
        self.credential = None
        
        # General
        self.debug = False
        self.log_file = None
        
        # API settings
        self.request_timeout = 30
        self.max_retries = 1
        self.retry_delay = 2.0
        
        # Report
        self.strict = False

    @classmethod
    def from_args(cls, args, config=None):
        """Apply command line arguments over a configuration.
        
        Args:
            args: Parsed command line arguments
            config (Config, optional): Configuration to update. A new one is created if omitted
        """
        config = config or cls()
        
        if getattr(args, 'debug', False):
            config.debug = True
        if getattr(args, 'strict', False):
            config.strict = True
        if getattr(args, 'timeout', None):
            config.request_timeout = args.timeout
            
        return config

    @classmethod
    def from_env(cls, env_file='.env'):
        """Create configuration from environment variables.
        
        Args:
            env_file (str): Path to environment file (default: '.env')
        """
        load_dotenv(env_file)  # Load specified .env file if it exists
        
        config = cls()
        config.debug = os.getenv('GIT_JIRA_DEBUG', '').lower() == 'true'
        config.strict = os.getenv('GIT_JIRA_STRICT', '').lower() == 'true'
        config.log_file = os.getenv('GIT_JIRA_LOG_FILE') or None
        
        if os.getenv('GIT_JIRA_TIMEOUT'):
            config.request_timeout = float(os.getenv('GIT_JIRA_TIMEOUT'))
        if os.getenv('GIT_JIRA_MAX_RETRIES'):
            config.max_retries = int(os.getenv('GIT_JIRA_MAX_RETRIES'))
        if os.getenv('GIT_JIRA_RETRY_DELAY'):
            config.retry_delay = float(os.getenv('GIT_JIRA_RETRY_DELAY'))
            
        return config

    def load_tracker_settings(self, store, prompter, debug_logger=None):
        """Fill in the JIRA URL and credential from the store, prompting when missing.
        
        Args:
            store (ConfigStore): Persisted configuration store
            prompter (Prompter): Interactive input source
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.base_url = store.read_or_prompt(URL_KEY, "JIRA URL", prompter)
        self.credential = CredentialResolver.default(store, prompter, debug_logger).resolve()
        return self

    def validate(self):
        """Validate the configuration.
        
        Returns:
            tuple: (bool, str) - (is_valid, error_message)
        """
        if not self.base_url:
            return False, "JIRA URL is required"
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            return False, f"JIRA URL must be an absolute http(s) URL: {self.base_url}"
        if self.credential is None or not self.credential.username:
            return False, "JIRA username is required"
        if self.request_timeout <= 0:
            return False, "Request timeout must be positive"
        if self.max_retries < 1:
            return False, "Max retries must be at least 1"
        return True, None
