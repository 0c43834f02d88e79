"""Thin wrapper around the Jira API"""

import json
import logging
from typing import Any, Dict, List, Optional

from jira import JIRA
from jira.exceptions import JIRAError
from requests.exceptions import RequestException

from .config import JiraConfig
from .exceptions import FieldNotFoundError, RemoteCallError, TransitionNotFoundError

logger = logging.getLogger(__name__)

# Assignee value asking Jira to fall back to the project's default assignee
DEFAULT_ASSIGNEE = "-1"
# Explicit-unassign sentinel used by the comment queue
UNASSIGNED = "unassigned"

# Jira answered with an error, or the HTTP request itself failed
REMOTE_ERRORS = (JIRAError, RequestException)


def parse_jira_error(error: JIRAError) -> str:
    """Turn a Jira error response into a readable message"""
    try:
        response = getattr(error, 'response', None)
        if response is not None and response.text:
            try:
                error_data = json.loads(response.text)
            except (json.JSONDecodeError, AttributeError, TypeError):
                error_data = {}

            if error_data.get('errorMessages'):
                return "; ".join(error_data['errorMessages'])

            if error_data.get('errors'):
                return "; ".join(f"{field}: {message}" for field, message in error_data['errors'].items())

        if error.status_code and error.text:
            return f"HTTP {error.status_code}: {error.text}"
        return str(error)

    except Exception:
        return str(error)


def describe_error(error: Exception) -> str:
    if isinstance(error, JIRAError):
        return parse_jira_error(error)
    return f"{type(error).__name__}: {error}"


def find_transition(transitions: List[Dict[str, Any]], name: str) -> Dict[str, Any]:
    """Return the first transition whose name contains ``name``, ignoring case.

    Transitions are scanned in the order Jira returned them, so when several
    names match the result depends on that order.
    """
    wanted = name.strip().lower()
    for transition in transitions:
        if wanted in transition['name'].lower():
            return transition
    available = ", ".join(t['name'] for t in transitions) or "none"
    raise TransitionNotFoundError(f"No transition matching '{name}'. Available: {available}")


def find_field(fields: List[Dict[str, Any]], name: str) -> Dict[str, Any]:
    """Return the first field whose id equals ``name`` or whose display name matches it, ignoring case"""
    wanted = name.strip().lower()
    for field in fields:
        if field['id'] == name or field.get('name', '').lower() == wanted:
            return field
    raise FieldNotFoundError(f"No field named '{name}'")


class JiraClient:
    """Thin wrapper around the Jira API."""

    def __init__(self, config: JiraConfig):
        self.config = config
        self._client = None
        self._connect()

    def _connect(self):
        """Establish connection to Jira"""
        options = {}
        if self.config.timeout:
            options['timeout'] = self.config.timeout
        try:
            self._client = JIRA(
                server=self.config.url,
                basic_auth=(self.config.user_id, self.config.token),
                max_retries=0,
                **options
            )
            logger.info(f"Connected to Jira at {self.config.url}")
        except REMOTE_ERRORS as e:
            logger.error(f"Failed to connect to Jira: {e}")
            raise RemoteCallError(f"Failed to connect to {self.config.url}: {describe_error(e)}", call="connect") from e

    def issue_url(self, issue_key: str) -> str:
        return f"{self.config.url}/browse/{issue_key}"

    def fetch_issue(self, issue_key: str, expand: Optional[str] = None) -> Any:
        """Get a specific issue by key"""
        try:
            return self._client.issue(issue_key, expand=expand)
        except REMOTE_ERRORS as e:
            logger.error(f"Failed to get issue {issue_key}: {e}")
            raise RemoteCallError(f"Failed to get issue {issue_key}: {describe_error(e)}", call="issue") from e

    def get_fields(self) -> List[Dict[str, Any]]:
        """Get every field definition known to the server"""
        try:
            return self._client.fields()
        except REMOTE_ERRORS as e:
            logger.error(f"Failed to get fields: {e}")
            raise RemoteCallError(f"Failed to get fields: {describe_error(e)}", call="fields") from e

    def find_field(self, name: str) -> Dict[str, Any]:
        return find_field(self.get_fields(), name)

    def add_comment(self, issue_key: str, comment: str) -> None:
        """Append a comment to an issue"""
        try:
            self._client.add_comment(issue_key, comment)
            logger.info(f"Added comment to {issue_key}")
        except REMOTE_ERRORS as e:
            logger.error(f"Failed to comment on {issue_key}: {e}")
            raise RemoteCallError(f"Failed to comment on {issue_key}: {describe_error(e)}", call="comment") from e

    def assign_issue(self, issue_key: str, assignee: str) -> None:
        """Set the assignee of an issue; ``-1`` requests the default assignee"""
        try:
            self._client.assign_issue(issue_key, assignee)
            logger.info(f"Assigned {issue_key} to {assignee}")
        except REMOTE_ERRORS as e:
            logger.error(f"Failed to assign {issue_key} to {assignee}: {e}")
            raise RemoteCallError(
                f"Failed to assign {issue_key} to {assignee}: {describe_error(e)}", call="assign"
            ) from e

    def get_transitions(self, issue_key: str) -> List[Dict[str, Any]]:
        """Get available transitions for an issue, in the order Jira returns them"""
        try:
            transitions = self._client.transitions(issue_key)
        except REMOTE_ERRORS as e:
            logger.error(f"Failed to get transitions for {issue_key}: {e}")
            raise RemoteCallError(
                f"Failed to get transitions for {issue_key}: {describe_error(e)}", call="transitions"
            ) from e
        return [
            {
                'id': transition['id'],
                'name': transition['name'],
                'to': (transition.get('to') or {}).get('name', ''),
            }
            for transition in transitions
        ]

    def transition_issue(self, issue_key: str, transition_id: str) -> None:
        """Move an issue through a workflow transition"""
        try:
            self._client.transition_issue(issue_key, transition_id)
            logger.info(f"Transitioned issue {issue_key} with transition {transition_id}")
        except REMOTE_ERRORS as e:
            logger.error(f"Failed to transition issue {issue_key}: {e}")
            raise RemoteCallError(
                f"Failed to transition {issue_key}: {describe_error(e)}", call="transition"
            ) from e
