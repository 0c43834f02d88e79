"""File-based comment queue.

- filenames: ISSUEKEY[.ASSIGNEE].txt encoding and parsing
- settings: remembered scan and processed directories
- composer: writes pending comment files
- dispatcher: applies pending files in order
- archiver: moves dispatched files aside and purges old ones
"""

from .archiver import RETENTION_DAYS, archive, purge_expired
from .composer import CommentComposer
from .dispatcher import QueueDispatcher
from .filenames import WorkItemName, encode_filename, parse_filename
from .models import DispatchOutcome, DispatchReport, WorkItem
from .settings import QueueSettings, QueueSettingsStore

__all__ = [
    "RETENTION_DAYS",
    "archive",
    "purge_expired",
    "CommentComposer",
    "QueueDispatcher",
    "WorkItemName",
    "encode_filename",
    "parse_filename",
    "DispatchOutcome",
    "DispatchReport",
    "WorkItem",
    "QueueSettings",
    "QueueSettingsStore",
]
