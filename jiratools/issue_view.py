"""Formatting of issues for display"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def _name(value: Any, attr: str = 'name', default: str = 'None') -> str:
    return getattr(value, attr, default) if value else default


def format_issue(issue: Any, url: str) -> Dict[str, Any]:
    """Format Jira issue object to dictionary"""
    fields = issue.fields
    return {
        'key': issue.key,
        'summary': fields.summary or '',
        'description': getattr(fields, 'description', None) or '',
        'status': _name(fields.status),
        'priority': _name(getattr(fields, 'priority', None)),
        'assignee': _name(getattr(fields, 'assignee', None), 'displayName', 'Unassigned'),
        'reporter': _name(getattr(fields, 'reporter', None), 'displayName', 'Unknown'),
        'created': fields.created or '',
        'updated': fields.updated or '',
        'issue_type': _name(fields.issuetype),
        'url': url,
    }


def format_comments(issue: Any) -> List[Dict[str, Any]]:
    comment_field = getattr(issue.fields, 'comment', None)
    comments = getattr(comment_field, 'comments', None) or []
    return [
        {
            'author': _name(getattr(comment, 'author', None), 'displayName', 'Unknown'),
            'created': comment.created or '',
            'body': comment.body or '',
        }
        for comment in comments
    ]


def _display(value: Any) -> str:
    if isinstance(value, dict):
        for key in ('displayName', 'name', 'value', 'key'):
            if key in value:
                return str(value[key])
    return str(value)


def field_value(issue: Any, field_id: str) -> str:
    """Render the raw value of one field as text"""
    value = issue.raw.get('fields', {}).get(field_id)
    if value is None:
        return ''
    if isinstance(value, list):
        return ", ".join(_display(item) for item in value)
    return _display(value)


def render_issue(
    console: Console,
    issue: Dict[str, Any],
    extra_fields: Optional[List[tuple]] = None,
    comments: Optional[List[Dict[str, Any]]] = None,
) -> None:
    """Print an issue as rich panels"""
    info_table = Table.grid(padding=1)
    info_table.add_column(style="cyan", justify="right")
    info_table.add_column(style="white")

    info_table.add_row("Key:", Text(issue['key']))
    info_table.add_row("Summary:", Text(issue['summary']))
    info_table.add_row("Status:", Text(issue['status']))
    info_table.add_row("Type:", Text(issue['issue_type']))
    info_table.add_row("Priority:", Text(issue['priority']))
    info_table.add_row("Assignee:", Text(issue['assignee']))
    info_table.add_row("Reporter:", Text(issue['reporter']))
    info_table.add_row("Created:", Text(issue['created'][:10]))
    info_table.add_row("Updated:", Text(issue['updated'][:10]))
    info_table.add_row("URL:", Text(issue['url']))
    for label, value in extra_fields or []:
        info_table.add_row(f"{label}:", Text(value))

    console.print(Panel(info_table, title=f"Issue {issue['key']}", border_style="blue"))

    if issue['description']:
        console.print(Panel(Text(issue['description']), title="Description", border_style="green"))

    for comment in comments or []:
        title = f"{comment['author']} - {comment['created'][:16]}"
        console.print(Panel(Text(comment['body']), title=Text(title), border_style="yellow"))
