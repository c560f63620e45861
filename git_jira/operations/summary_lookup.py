"""Issue summary lookup operation."""

import json
from git_jira.models.issue import Issue
from git_jira.operations.base import Operation
from git_jira.operations.key_extractor import build_jql, unique_keys
from git_jira.utils.errors import ResponseFormatError

class SummaryLookup(Operation):
    """Fetch summaries for a batch of issue keys with a single search."""
    
    def execute(self, keys):
        """Execute the lookup.
        
        Args:
            keys (list): Extracted keys, None entries allowed
            
        Returns:
            dict: Issue key to summary
        """
        if not unique_keys(keys):
            # JIRA rejects "key in ()", so there is nothing to ask for
            if self.logger:
                self.logger.log("No issue keys found in branch names; skipping JIRA search")
            return {}

        jql = build_jql(keys)
        if self.logger:
            self.logger.log(f"JQL: {jql}")
        
        response_data = self.api_client.search(jql, fields='summary')
        
        if self.logger:
            self.logger.log(f"response JSON:\n{json.dumps(response_data, indent=2, ensure_ascii=False)}")
        
        return parse_summaries(response_data)

def parse_summaries(response_data):
    """Turn a search response into a key to summary mapping.
    
    Raises:
        ResponseFormatError: If the response does not carry an issues array
            of {key, fields: {summary}} objects
    """
    if not isinstance(response_data, dict):
        raise ResponseFormatError("Expected a JSON object from the search endpoint")
    issues = response_data.get('issues')
    if not isinstance(issues, list):
        raise ResponseFormatError("Search response has no 'issues' array")
    
    summaries = {}
    for issue_data in issues:
        issue = Issue.from_dict(issue_data)
        summaries[issue.key] = issue.summary
    return summaries
