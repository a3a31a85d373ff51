COMPLETION = "Create a branch from an issue"
HELP = """Create a branch from an issue

Checks out the base branch, pulls, and creates the issue's branch.

Options:
  -f  Refresh the cached issue list

Search:
  M       only issues assigned to me
  N       only unassigned issues
  other   matches identifier or title

An existing branch name gets a -2, -3, ... suffix."""
