"""Scans the queue directory and applies every pending comment file.

Items are handled in descending lexicographic filename order, so
``ABC-123.txt`` (comment only) is applied before ``ABC-123.jdoe.txt``
(comment plus reassignment) in the same run. Any invalid filename aborts the
run before anything is dispatched, and the first failed update aborts the
rest of the run with the failed file left in place for the next attempt.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..exceptions import DispatchError, QueueValidationError, UnsupportedAssigneeError
from ..updater import UpdateExecutor
from .archiver import RETENTION_DAYS, archive, purge_expired
from .filenames import SUFFIX, parse_filename
from .models import DispatchOutcome, DispatchReport, WorkItem
from .settings import QueueSettings

logger = logging.getLogger(__name__)


class QueueDispatcher:
    """Dispatches pending work items from the scan directory."""

    def __init__(
        self,
        executor: Optional[UpdateExecutor],
        settings: QueueSettings,
        retention_days: int = RETENTION_DAYS,
        dry_run: bool = False,
        clock: Callable[[], datetime] = datetime.now,
        announce: Optional[Callable[[str], None]] = None,
    ) -> None:
        if executor is None and not dry_run:
            raise ValueError("An executor is required unless dry_run is set")
        self.executor = executor
        self.scan_dir = settings.scan_dir
        self.processed_dir = settings.processed_dir
        self.retention_days = retention_days
        self.dry_run = dry_run
        self.clock = clock
        self.announce = announce or (lambda message: None)

    def pending_filenames(self) -> List[str]:
        """Names of pending items, in processing order."""
        if not self.scan_dir.is_dir():
            return []
        names = [
            entry.name
            for entry in self.scan_dir.iterdir()
            if entry.name.endswith(SUFFIX) and entry.is_file()
        ]
        return sorted(names, reverse=True)

    def scan(self) -> List[WorkItem]:
        """Parse, validate and read every pending item."""
        items = []
        for filename in self.pending_filenames():
            name = parse_filename(filename)
            path = self.scan_dir / filename
            try:
                body = path.read_bytes().decode("utf-8")
            except UnicodeDecodeError as e:
                raise QueueValidationError(f"{filename} is not valid UTF-8 text: {e}", filename=filename) from e

            item = WorkItem(
                filename=filename,
                path=path,
                issue_key=name.issue_key,
                assignee=name.assignee,
                comment_body=body,
            )
            if item.comment is None and item.assignee is None:
                raise QueueValidationError(f"{filename} is empty and names no assignee", filename=filename)
            items.append(item)
        return items

    def dispatch(self, item: WorkItem) -> DispatchOutcome:
        """Apply one item and archive it."""
        try:
            result = self.executor.update(item.issue_key, comment=item.comment, assignee=item.assignee)
        except UnsupportedAssigneeError as e:
            raise UnsupportedAssigneeError(f"{item.filename}: {e}") from e

        if not result.success:
            raise DispatchError(
                f"Failed to update {item.issue_key} from {item.filename} ({result.failed_call}): {result.reason}",
                filename=item.filename,
                call=result.failed_call,
            )

        target = archive(item.path, self.processed_dir)
        return DispatchOutcome(
            filename=item.filename,
            issue_key=item.issue_key,
            assignee=item.assignee,
            status="dispatched",
            archived_to=target,
        )

    def run(self) -> DispatchReport:
        """Process every pending item, then sweep expired processed items.

        The retention sweep runs even when the run is aborted.
        """
        report = DispatchReport(dry_run=self.dry_run)
        try:
            items = self.scan()
            logger.info(f"Found {len(items)} pending item(s) in {self.scan_dir}")
            for item in items:
                target = item.assignee if item.assignee is not None else "assignee unchanged"
                if self.dry_run:
                    self.announce(f"Would update {item.issue_key} from {item.filename} ({target})")
                    report.outcomes.append(DispatchOutcome(
                        filename=item.filename,
                        issue_key=item.issue_key,
                        assignee=item.assignee,
                        status="would-dispatch",
                    ))
                    continue

                self.announce(f"Updating {item.issue_key} from {item.filename} ({target})")
                report.outcomes.append(self.dispatch(item))
        finally:
            expired = purge_expired(
                self.processed_dir,
                now=self.clock(),
                retention_days=self.retention_days,
                dry_run=self.dry_run,
            )
            report.purged = [path.name for path in expired]
            for path in expired:
                verb = "Would purge" if self.dry_run else "Purged"
                self.announce(f"{verb} {path.name}")

        return report
