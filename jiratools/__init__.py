"""jiratools - command-line utilities for Jira.

- jiratools.cli: issue, update, transition, edit and dispatch commands
- jiratools.queue: file-based comment queue (compose, dispatch, archive)
- jiratools.updater: comment and assignee updates for one issue
- jiratools.jira_client: thin wrapper around the jira library
- jiratools.common: shared utilities
"""

__version__ = "1.0.0"
