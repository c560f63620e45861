"""Issue key extraction from branch names."""

import re
from git_jira.models.branch import Branch

ISSUE_KEY_PATTERN = re.compile(r'[A-Z]+-\d+')

def extract_key(branch_name):
    """Return the first issue key in branch_name, or None."""
    match = ISSUE_KEY_PATTERN.search(branch_name)
    return match.group(0) if match else None

def extract_keys(branch_names):
    """Return one optional key per branch name, in the same order."""
    return [extract_key(name) for name in branch_names]

def to_branches(branch_names):
    """Pair every branch name with its extracted key."""
    return [Branch(name, extract_key(name)) for name in branch_names]

def unique_keys(keys):
    """Distinct non-None keys in first-seen order."""
    seen = []
    for key in keys:
        if key is not None and key not in seen:
            seen.append(key)
    return seen

def build_jql(keys):
    """Build the JQL expression selecting the given keys."""
    return f"key in ({','.join(unique_keys(keys))})"
