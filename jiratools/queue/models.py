"""Queue models for the comment work queue."""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class WorkItem(BaseModel):
    """A pending comment file read from the scan directory."""
    filename: str  # Name inside the scan directory (e.g. "ABC-123.jdoe.txt")
    path: Path
    issue_key: str  # Jira issue key (e.g. "ABC-123")
    assignee: Optional[str] = None  # None leaves the assignee unchanged
    comment_body: str = ""  # File content, posted verbatim
    state: Literal["pending", "processed"] = "pending"

    @property
    def comment(self) -> Optional[str]:
        """Comment to post, or None for an assignment-only item."""
        return self.comment_body if self.comment_body.strip() else None


class DispatchOutcome(BaseModel):
    """What happened to one work item during a run."""
    filename: str
    issue_key: str
    assignee: Optional[str] = None
    status: Literal["dispatched", "would-dispatch"]
    archived_to: Optional[Path] = None


class DispatchReport(BaseModel):
    """Summary of a dispatch run."""
    dry_run: bool = False
    outcomes: List[DispatchOutcome] = Field(default_factory=list)
    purged: List[str] = Field(default_factory=list, description="Processed files removed by the retention sweep")
