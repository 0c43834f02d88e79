"""Moves dispatched items aside and purges old ones."""

from __future__ import annotations

import logging
import shutil
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

RETENTION_DAYS = 5


def archive(path: Path, processed_dir: Path) -> Path:
    """Move ``path`` into ``processed_dir``, creating it if needed."""
    processed_dir.mkdir(parents=True, exist_ok=True)
    target = processed_dir / path.name
    if target.exists():
        logger.warning(f"Replacing earlier processed copy of {path.name} in {processed_dir}")
    shutil.move(str(path), str(target))
    logger.info(f"Archived {path.name} to {processed_dir}")
    return target


def purge_expired(
    processed_dir: Path,
    now: Optional[datetime] = None,
    retention_days: int = RETENTION_DAYS,
    dry_run: bool = False,
) -> List[Path]:
    """Delete files in ``processed_dir`` last modified before ``now - retention_days``.

    A file modified exactly at the cutoff is kept. Returns the expired paths,
    which are only reported, not deleted, when ``dry_run`` is set.
    """
    if not processed_dir.is_dir():
        return []

    cutoff = ((now or datetime.now()) - timedelta(days=retention_days)).timestamp()
    expired = []
    for entry in sorted(processed_dir.iterdir()):
        if not entry.is_file():
            continue
        if entry.stat().st_mtime < cutoff:
            expired.append(entry)
            if not dry_run:
                entry.unlink()
                logger.info(f"Purged {entry.name} from {processed_dir}")
    return expired
