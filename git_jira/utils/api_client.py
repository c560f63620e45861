"""HTTP client for the JIRA REST API."""

import time
import requests
from requests.auth import HTTPBasicAuth
from git_jira.utils.errors import ResponseFormatError, TrackerError

SEARCH_ENDPOINT = '/rest/api/2/search'

class JiraClient:
    """HTTP client for JIRA with Basic authentication and timeout handling."""
    
    def __init__(self, config, debug_logger=None):
        """Initialize the API client.
        
        Args:
            config (Config): Configuration instance with base_url and credential
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.base_url = config.base_url.rstrip('/')
        self.credential = config.credential
        self.config = config
        self.logger = debug_logger
    
    def _auth(self):
        return HTTPBasicAuth(self.credential.username, self.credential.password or '')
    
    def search(self, jql, fields='summary'):
        """Run a JQL search.
        
        Args:
            jql (str): JQL expression
            fields (str): Comma separated list of fields to return
            
        Returns:
            dict: Decoded JSON response
        """
        return self.get(SEARCH_ENDPOINT, params={'jql': jql, 'fields': fields})
    
    def get(self, endpoint, params=None):
        """Make a GET request, retrying connection failures.
        
        Args:
            endpoint (str): API endpoint path
            params (dict, optional): Query parameters
            
        Returns:
            dict or list: Response data
            
        Raises:
            TrackerError: On connection failure or non-2xx status
            ResponseFormatError: If the body is not JSON
        """
        url = f"{self.base_url}{endpoint}"
        
        for attempt in range(self.config.max_retries):
            try:
                response = requests.get(
                    url,
                    auth=self._auth(),
                    headers={'Accept': 'application/json'},
                    params=params,
                    timeout=self.config.request_timeout
                )
                break
                
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                if attempt < self.config.max_retries - 1:
                    wait_time = self.config.retry_delay * (2 ** attempt)
                    if self.logger:
                        self.logger.log(f"Error: {e}. Retrying in {wait_time}s...")
                    time.sleep(wait_time)
                else:
                    raise TrackerError(
                        f"Request to {url} failed after {self.config.max_retries} attempt(s): {e}"
                    ) from e
                    
            except requests.exceptions.RequestException as e:
                raise TrackerError(f"Request to {url} failed: {e}") from e
        
        if self.logger:
            self.logger.log(f"URL: {response.url}")
        
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise TrackerError(
                f"JIRA returned HTTP {response.status_code} for {url}",
                status_code=response.status_code
            ) from e
        
        try:
            return response.json()
        except ValueError as e:
            raise ResponseFormatError(f"JIRA returned invalid JSON: {e}") from e
