"""Remembered queue directories.

The scan and processed directories are each kept as a single-line file in the
user's config directory. A directory given explicitly is saved for later
runs; an omitted one falls back to the last saved value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SCAN_DIR_FILE = "scan_dir"
PROCESSED_DIR_FILE = "processed_dir"


@dataclass
class QueueSettings:
    """Directories used by the comment queue."""

    scan_dir: Optional[Path] = None
    processed_dir: Optional[Path] = None


def _normalise(path: str | Path) -> Path:
    return Path(path).expanduser().absolute()


class QueueSettingsStore:
    """Reads and writes the remembered queue directories."""

    def __init__(self, config_dir: str | Path) -> None:
        self.config_dir = Path(config_dir)

    def _read(self, name: str) -> Optional[Path]:
        path = self.config_dir / name
        if not path.is_file():
            return None
        value = path.read_text(encoding="utf-8").strip()
        return Path(value) if value else None

    def _write(self, name: str, value: Path) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        (self.config_dir / name).write_text(f"{value}\n", encoding="utf-8")
        logger.debug(f"Saved {name}={value} in {self.config_dir}")

    def load(self) -> QueueSettings:
        return QueueSettings(
            scan_dir=self._read(SCAN_DIR_FILE),
            processed_dir=self._read(PROCESSED_DIR_FILE),
        )

    def save(self, settings: QueueSettings) -> None:
        """Persist every directory that is set; unset fields are left untouched."""
        if settings.scan_dir is not None:
            self._write(SCAN_DIR_FILE, settings.scan_dir)
        if settings.processed_dir is not None:
            self._write(PROCESSED_DIR_FILE, settings.processed_dir)

    def resolve(
        self,
        scan_dir: str | Path | None = None,
        processed_dir: str | Path | None = None,
        require_processed: bool = True,
    ) -> QueueSettings:
        """Combine explicit directories with the saved ones.

        Nothing is saved unless every required directory resolves.
        """
        given = QueueSettings(
            scan_dir=_normalise(scan_dir) if scan_dir else None,
            processed_dir=_normalise(processed_dir) if processed_dir else None,
        )
        saved = self.load()
        resolved = QueueSettings(
            scan_dir=given.scan_dir or saved.scan_dir,
            processed_dir=given.processed_dir or saved.processed_dir,
        )

        if resolved.scan_dir is None:
            raise ConfigurationError("No scan directory given and none remembered; pass --scan-dir")
        if require_processed and resolved.processed_dir is None:
            raise ConfigurationError("No processed directory given and none remembered; pass --processed-dir")

        self.save(given)
        return resolved
