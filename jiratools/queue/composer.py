"""Writes a pending comment file into the scan directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import click

from ..exceptions import ComposeAbortedError
from ..updater import check_assignee
from .filenames import encode_filename, validate_assignee, validate_issue_key

logger = logging.getLogger(__name__)

EditFn = Callable[..., Optional[str]]


class CommentComposer:
    """Creates work items for the comment queue."""

    def __init__(self, scan_dir: Path, editor: Optional[str] = None, edit: Optional[EditFn] = None) -> None:
        self.scan_dir = Path(scan_dir)
        self.editor = editor
        self._edit = edit or click.edit

    def path_for(self, issue_key: str, assignee: Optional[str] = None) -> Path:
        validate_issue_key(issue_key)
        if assignee is not None:
            validate_assignee(assignee)
            check_assignee(assignee)
        return self.scan_dir / encode_filename(issue_key, assignee)

    def compose(self, issue_key: str, assignee: Optional[str] = None, text: Optional[str] = None) -> Path:
        """Write the comment for ``issue_key`` and return the file path.

        Without ``text`` the editor is opened, preloaded with any pending
        comment of the same name so it is amended rather than replaced.
        """
        path = self.path_for(issue_key, assignee)

        if text is None:
            existing = path.read_text(encoding="utf-8") if path.is_file() else ""
            text = self._edit(text=existing, editor=self.editor, extension=".txt", require_save=True)

        if text is None or not text.strip():
            raise ComposeAbortedError(f"No comment written for {issue_key}; nothing queued")

        self.scan_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Queued {path.name} in {self.scan_dir}")
        return path
