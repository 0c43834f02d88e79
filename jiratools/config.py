from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from .credentials import CredentialStore
from .exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "jiratools"
DEFAULT_NETRC = Path.home() / ".netrc"
DEFAULT_RETENTION_DAYS = 5


def _number(kind, name: str, value: str):
    try:
        return kind(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got '{value}'") from e


@dataclass
class JiraConfig:
    """Settings required to connect to Jira."""

    url: str
    user_id: str
    token: str = ""
    timeout: Optional[float] = None

    @property
    def hostname(self) -> str:
        return urlparse(self.url).hostname or ""


@dataclass
class ToolsConfig:
    """Configuration shared by every jiratools command."""

    config_dir: Path = field(default_factory=lambda: DEFAULT_CONFIG_DIR)
    netrc_path: Path = field(default_factory=lambda: DEFAULT_NETRC)
    retention_days: int = DEFAULT_RETENTION_DAYS
    scheme: str = "https"
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "ToolsConfig":
        """Create configuration from environment variables."""
        timeout = os.getenv("JIRATOOLS_TIMEOUT")
        return cls(
            config_dir=Path(os.getenv("JIRATOOLS_CONFIG_DIR", str(DEFAULT_CONFIG_DIR))).expanduser(),
            netrc_path=Path(os.getenv("JIRATOOLS_NETRC", str(DEFAULT_NETRC))).expanduser(),
            retention_days=_number(
                int, "JIRATOOLS_RETENTION_DAYS", os.getenv("JIRATOOLS_RETENTION_DAYS", str(DEFAULT_RETENTION_DAYS))
            ),
            scheme=os.getenv("JIRATOOLS_SCHEME", "https"),
            timeout=_number(float, "JIRATOOLS_TIMEOUT", timeout) if timeout else None,
        )

    def server_url(self, host: str) -> str:
        """Return the base URL for ``host``, which may be a bare hostname or a full URL."""

        host = (host or "").strip()
        if not host:
            raise ConfigurationError("No Jira host given")
        if "://" in host:
            return host.rstrip("/")
        return f"{self.scheme}://{host}".rstrip("/")

    def jira_for_host(self, host: str) -> JiraConfig:
        """Build the connection settings for ``host`` using the credential store."""

        url = self.server_url(host)
        hostname = urlparse(url).hostname or host
        creds = CredentialStore(self.netrc_path).lookup(hostname)
        return JiraConfig(url=url, user_id=creds.username, token=creds.password, timeout=self.timeout)
