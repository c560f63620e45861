#!/usr/bin/env python3
"""
git-jira

Lists local git branches next to the summary of the JIRA issue named in each branch.
"""

import sys
import argparse
from git_jira.utils.auth import Prompter
from git_jira.utils.config import Config
from git_jira.utils.config_store import GitConfigStore
from git_jira.utils.api_client import JiraClient
from git_jira.utils.debug_logger import DebugLogger
from git_jira.utils.errors import GitJiraError
from git_jira.operations.branch_lister import BranchLister
from git_jira.operations.key_extractor import to_branches
from git_jira.operations.summary_lookup import SummaryLookup
from git_jira.operations.report_generator import ReportGenerator

def build_parser():
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='git-jira',
        description='Annotate local git branches with the summary of their JIRA issues'
    )
    parser.add_argument('--env-file', default='.env', help='Path to environment file (default: .env)')
    parser.add_argument('--debug', action='store_true', help='Enable debug output on stderr')
    parser.add_argument('--strict', action='store_true',
                        help='Fail if JIRA does not return an issue named by a branch')
    parser.add_argument('--timeout', type=float, help='JIRA request timeout in seconds')
    
    subparsers = parser.add_subparsers(dest='command', metavar='command')
    subparsers.required = True
    subparsers.add_parser('branch', help='List branches with their issue summaries')
    return parser

def parse_args(argv=None):
    """Parse command line arguments."""
    return build_parser().parse_args(argv)

def branch(config, debug_logger, stdout=None, stderr=None):
    """Print every local branch with its issue summary.
    
    Args:
        config (Config): Validated configuration
        debug_logger (DebugLogger): Debug logger instance
        stdout (file, optional): Report stream
        stderr (file, optional): Stream receiving git's error output
        
    Returns:
        list: Report lines, or None if git could not list branches
    """
    branch_names = BranchLister(config, debug_logger, stderr=stderr).execute()
    if branch_names is None:
        return None
    
    branches = to_branches(branch_names)
    api_client = JiraClient(config, debug_logger)
    summaries = SummaryLookup(config, api_client, debug_logger).execute(
        [b.issue_key for b in branches]
    )
    return ReportGenerator(config, debug_logger, stream=stdout).execute(branches, summaries)

def main(argv=None, store=None, prompter=None):
    """Main entry point.
    
    Returns:
        int: Process exit status
    """
    args = parse_args(argv)
    
    config = Config.from_env(args.env_file)
    config = Config.from_args(args, config)
    
    debug_logger = DebugLogger(config.log_file, console_debug=config.debug)
    
    try:
        store = store or GitConfigStore(debug_logger=debug_logger)
        prompter = prompter or Prompter()
        config.load_tracker_settings(store, prompter, debug_logger)
        
        is_valid, error = config.validate()
        if not is_valid:
            print(f"Configuration error: {error}", file=sys.stderr)
            debug_logger.log(f"Configuration error: {error}")
            return 1
        
        debug_logger.log(f"JIRA URL: {config.base_url}")
        debug_logger.log(f"JIRA user: {config.credential.username}")
        
        if args.command == 'branch':
            branch(config, debug_logger)
        return 0
        
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.", file=sys.stderr)
        debug_logger.log("INTERRUPTED: Operation cancelled by user")
        return 1
    except GitJiraError as e:
        print(f"Error: {e}", file=sys.stderr)
        debug_logger.log(f"FATAL ERROR: {e}")
        return 1
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        debug_logger.log(f"FATAL ERROR: {e}")
        if config.debug:
            import traceback
            debug_logger.log(f"Traceback: {traceback.format_exc()}")
        return 1
    finally:
        debug_logger.close()

def run():
    """Console script entry point."""
    sys.exit(main())

if __name__ == "__main__":
    run()
