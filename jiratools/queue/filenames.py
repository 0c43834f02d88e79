"""Filename protocol for queued comment files.

A pending item is named ``ISSUEKEY[.ASSIGNEE].txt``:

- ``ABC-123.txt``          comment only, assignee unchanged
- ``ABC-123.jdoe.txt``     comment and reassign to ``jdoe``
- ``ABC-123.j_doe.txt``    reassign to ``j.doe`` (``.`` is the separator, so it is stored as ``_``)
- ``ABC-123..txt``         explicit unassign (the ``unassigned`` sentinel)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..exceptions import MalformedFilenameError, QueueValidationError
from ..jira_client import UNASSIGNED

SUFFIX = ".txt"
SEPARATOR = "."

ISSUE_KEY_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*-[0-9]+$")
ASSIGNEE_PATTERN = re.compile(r"^[A-Za-z0-9.-]+$")


@dataclass(frozen=True)
class WorkItemName:
    """Decoded form of a work item filename."""

    issue_key: str
    assignee: Optional[str] = None

    @property
    def filename(self) -> str:
        return encode_filename(self.issue_key, self.assignee)


def validate_issue_key(issue_key: str, filename: Optional[str] = None) -> str:
    if not ISSUE_KEY_PATTERN.match(issue_key or ""):
        where = f" in {filename}" if filename else ""
        raise QueueValidationError(f"Invalid issue key '{issue_key}'{where}", filename=filename, value=issue_key)
    return issue_key


def validate_assignee(assignee: str, filename: Optional[str] = None) -> str:
    if not ASSIGNEE_PATTERN.match(assignee):
        where = f" in {filename}" if filename else ""
        raise QueueValidationError(
            f"Invalid assignee '{assignee}'{where}: only letters, digits, '.' and '-' are allowed",
            filename=filename,
            value=assignee,
        )
    return assignee


def encode_filename(issue_key: str, assignee: Optional[str] = None) -> str:
    if assignee is None:
        return f"{issue_key}{SUFFIX}"
    return f"{issue_key}{SEPARATOR}{assignee.replace('.', '_')}{SUFFIX}"


def parse_filename(filename: str) -> WorkItemName:
    """Decode and validate ``filename``.

    Raises MalformedFilenameError when the name does not follow the pattern
    and QueueValidationError when the issue key or assignee is invalid.
    """
    if not filename.endswith(SUFFIX) or len(filename) == len(SUFFIX):
        raise MalformedFilenameError(f"Not a work item filename: {filename}", filename=filename)

    parts = filename[:-len(SUFFIX)].split(SEPARATOR)
    if len(parts) > 2:
        raise MalformedFilenameError(
            f"Too many '{SEPARATOR}' separators in {filename}; write dots in assignees as '_'",
            filename=filename,
        )

    issue_key = validate_issue_key(parts[0], filename)
    if len(parts) == 1:
        return WorkItemName(issue_key=issue_key)

    assignee = parts[1].replace("_", ".") or UNASSIGNED
    return WorkItemName(issue_key=issue_key, assignee=validate_assignee(assignee, filename))
