"""Per-host username/password lookup.

Credentials come from a ``.netrc``-format file keyed by the Jira hostname.
When both ``JIRA_USER`` and ``JIRA_API_TOKEN`` are set in the environment
they win, so secrets can live in a ``.env`` file instead.
"""

from __future__ import annotations

import logging
import netrc
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class Credentials:
    """Basic-auth credentials for one host."""

    username: str
    password: str


class CredentialStore:
    """Looks up credentials for a host."""

    def __init__(self, netrc_path: str | Path) -> None:
        self.netrc_path = Path(netrc_path)

    def lookup(self, host: str) -> Credentials:
        user = os.getenv("JIRA_USER")
        token = os.getenv("JIRA_API_TOKEN")
        if user and token:
            logger.debug(f"Using credentials from environment for {host}")
            return Credentials(username=user, password=token)

        if not self.netrc_path.exists():
            raise ConfigurationError(
                f"No credentials for {host}: {self.netrc_path} does not exist "
                "and JIRA_USER/JIRA_API_TOKEN are not set"
            )

        try:
            auth = netrc.netrc(str(self.netrc_path)).authenticators(host)
        except netrc.NetrcParseError as e:
            raise ConfigurationError(f"Cannot parse {self.netrc_path}: {e}") from e

        if not auth:
            raise ConfigurationError(f"No entry for machine {host} in {self.netrc_path}")

        login, _account, password = auth
        if not login or not password:
            raise ConfigurationError(f"Incomplete entry for machine {host} in {self.netrc_path}")

        logger.debug(f"Using credentials from {self.netrc_path} for {host}")
        return Credentials(username=login, password=password)
