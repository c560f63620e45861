"""Branch listing operation."""

import subprocess
import sys
from git_jira.operations.base import Operation
from git_jira.utils.errors import GitCommandError

BRANCH_COMMAND = ['branch', '--list', '--no-column']

class BranchLister(Operation):
    """List local branches with `git branch`."""
    
    def __init__(self, config, debug_logger=None, git_executable='git', stderr=None):
        super().__init__(config, debug_logger=debug_logger)
        self.git = git_executable
        self.stderr = stderr or sys.stderr
    
    def execute(self):
        """Execute the branch listing.
        
        Returns:
            list: Branch lines in git's order, or None if git reported an error.
                git's own error output is forwarded to stderr in that case.
            
        Raises:
            GitCommandError: If git could not be executed at all
        """
        command = [self.git] + BRANCH_COMMAND
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise GitCommandError(f"failed to execute process: {e}") from e
        
        if result.returncode != 0:
            if self.logger:
                self.logger.log(f"{' '.join(command)} exited with {result.returncode}")
            self.stderr.write(result.stderr)
            self.stderr.flush()
            return None
        
        branches = [line for line in result.stdout.splitlines() if line.strip()]
        
        if self.logger:
            self.logger.log(f"Found {len(branches)} branches")
        
        return branches
