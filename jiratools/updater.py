"""Applies a comment and/or an assignee change to one issue.

Assignment and comment are two separate REST calls rather than one issue
edit, so a user holding only the assign permission or only the comment
permission can still perform that half.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .exceptions import ConfigurationError, RemoteCallError, UnsupportedAssigneeError
from .jira_client import DEFAULT_ASSIGNEE, UNASSIGNED, JiraClient

logger = logging.getLogger(__name__)


class UpdateResult(BaseModel):
    """Outcome of one update."""
    issue_key: str
    assignee: Optional[str] = None
    assigned: bool = False
    commented: bool = False
    success: bool = True
    failed_call: Optional[Literal["assign", "comment"]] = Field(default=None, description="Call that failed, if any")
    reason: Optional[str] = None


def check_assignee(assignee: Optional[str]) -> Optional[str]:
    """Reject assignee values Jira will not accept for a reassignment."""
    if assignee is not None and assignee.lower() == UNASSIGNED:
        raise UnsupportedAssigneeError(
            f"Assignee '{assignee}' is not supported: Jira rejects an empty assignee here. "
            f"Use '{DEFAULT_ASSIGNEE}' to revert to the default assignee instead."
        )
    return assignee


class UpdateExecutor:
    """Performs the assign and comment calls for a single issue."""

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def update(self, issue_key: str, comment: Optional[str] = None, assignee: Optional[str] = None) -> UpdateResult:
        if not issue_key:
            raise ConfigurationError("No issue key given")
        if comment is None and assignee is None:
            raise ConfigurationError(f"Nothing to do for {issue_key}: give a comment, an assignee or both")
        check_assignee(assignee)

        result = UpdateResult(issue_key=issue_key, assignee=assignee)

        if assignee is not None:
            try:
                self.client.assign_issue(issue_key, assignee)
            except RemoteCallError as e:
                return result.model_copy(update={"success": False, "failed_call": "assign", "reason": str(e)})
            result.assigned = True

        if comment is not None:
            try:
                self.client.add_comment(issue_key, comment)
            except RemoteCallError as e:
                return result.model_copy(update={"success": False, "failed_call": "comment", "reason": str(e)})
            result.commented = True

        logger.info(f"Updated {issue_key} (assigned={result.assigned}, commented={result.commented})")
        return result
