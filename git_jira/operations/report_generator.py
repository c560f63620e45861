"""Branch report generation."""

import sys
from git_jira.operations.base import Operation
from git_jira.utils.errors import MissingIssueError

class ReportGenerator(Operation):
    """Join branches with their issue summaries and print them."""
    
    def __init__(self, config, debug_logger=None, stream=None):
        super().__init__(config, debug_logger=debug_logger)
        self.stream = stream or sys.stdout
    
    def build_lines(self, branches, summaries):
        """Build report lines.
        
        Args:
            branches (list): Branch objects in listing order
            summaries (dict): Issue key to summary
            
        Returns:
            list: One "<branch> \\t<summary>" line per branch
            
        Raises:
            MissingIssueError: In strict mode, if a key has no summary
        """
        lines = []
        for branch in branches:
            summary = ''
            if branch.issue_key is not None:
                if branch.issue_key in summaries:
                    summary = summaries[branch.issue_key]
                elif self.config.strict:
                    raise MissingIssueError(branch.issue_key)
                elif self.logger:
                    self.logger.warning(f"No summary returned for {branch.issue_key}")
            lines.append(f"{branch.name} \t{summary}")
        return lines
    
    def execute(self, branches, summaries):
        """Print the report. Nothing is printed if strict mode fails."""
        lines = self.build_lines(branches, summaries)
        for line in lines:
            print(line, file=self.stream)
        return lines
