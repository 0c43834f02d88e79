"""Shared fixtures for jiratools tests."""

from pathlib import Path
from types import SimpleNamespace

import pytest

from jiratools.exceptions import RemoteCallError
from jiratools.queue import QueueSettings


class FakeJiraClient:
    """Stands in for JiraClient and records every call in order."""

    def __init__(self, fail_on=None, transitions=None, issue=None, fields=None):
        self.calls = []
        self.fail_on = set(fail_on or ())
        self.transitions = transitions or []
        self.issue = issue
        self.fields = fields or []

    def _maybe_fail(self, call, issue_key):
        if (call, issue_key) in self.fail_on:
            raise RemoteCallError(f"{call} rejected for {issue_key}", call=call)

    def assign_issue(self, issue_key, assignee):
        self._maybe_fail("assign", issue_key)
        self.calls.append(("assign", issue_key, assignee))

    def add_comment(self, issue_key, comment):
        self._maybe_fail("comment", issue_key)
        self.calls.append(("comment", issue_key, comment))

    def get_transitions(self, issue_key):
        self.calls.append(("transitions", issue_key))
        return self.transitions

    def transition_issue(self, issue_key, transition_id):
        self._maybe_fail("transition", issue_key)
        self.calls.append(("transition", issue_key, transition_id))

    def fetch_issue(self, issue_key, expand=None):
        self._maybe_fail("issue", issue_key)
        self.calls.append(("issue", issue_key))
        return self.issue

    def get_fields(self):
        return self.fields

    def issue_url(self, issue_key):
        return f"https://jira.example.com/browse/{issue_key}"


@pytest.fixture
def fake_client():
    return FakeJiraClient()


@pytest.fixture
def queue_dirs(tmp_path) -> QueueSettings:
    scan_dir = tmp_path / "queue"
    scan_dir.mkdir()
    return QueueSettings(scan_dir=scan_dir, processed_dir=tmp_path / "processed")


@pytest.fixture
def tools_env(tmp_path, monkeypatch) -> Path:
    """Point jiratools at a throwaway config directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("JIRATOOLS_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("JIRATOOLS_NETRC", str(tmp_path / "netrc"))
    monkeypatch.delenv("JIRATOOLS_LOG_DIR", raising=False)
    monkeypatch.delenv("JIRATOOLS_RETENTION_DAYS", raising=False)
    monkeypatch.delenv("JIRA_HOST", raising=False)
    monkeypatch.delenv("JIRA_USER", raising=False)
    monkeypatch.delenv("JIRA_API_TOKEN", raising=False)
    return config_dir


def write_item(scan_dir: Path, filename: str, body: str = "A comment") -> Path:
    path = scan_dir / filename
    path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture
def sample_issue():
    fields = SimpleNamespace(
        summary="Fix authentication system vulnerability",
        description="Tokens are accepted after [logout].",
        status=SimpleNamespace(name="In Progress"),
        priority=SimpleNamespace(name="High"),
        assignee=SimpleNamespace(displayName="John Doe"),
        reporter=SimpleNamespace(displayName="Jane Smith"),
        created="2024-01-10T09:15:00.000+0000",
        updated="2024-01-15T14:30:00.000+0000",
        issuetype=SimpleNamespace(name="Bug"),
        comment=SimpleNamespace(comments=[
            SimpleNamespace(
                author=SimpleNamespace(displayName="Jane Smith"),
                created="2024-01-11T10:00:00.000+0000",
                body="Reproduced on staging.",
            ),
        ]),
    )
    raw = {
        "key": "BTS-15",
        "fields": {
            "summary": fields.summary,
            "customfield_10010": {"value": "Gold"},
            "labels": ["security", "auth"],
        },
    }
    return SimpleNamespace(key="BTS-15", fields=fields, raw=raw)
