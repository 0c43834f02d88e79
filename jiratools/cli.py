#!/usr/bin/env python3
"""CLI tools for Jira issues and the comment queue."""

import functools
import json
import sys

import click
from rich.console import Console
from rich.table import Table

from .common import setup_logging
from .config import ToolsConfig
from .exceptions import JiraToolsError
from .issue_view import field_value, format_comments, format_issue, render_issue
from .jira_client import DEFAULT_ASSIGNEE, JiraClient, find_field, find_transition
from .queue import CommentComposer, QueueDispatcher, QueueSettingsStore
from .updater import UpdateExecutor

console = Console()
err_console = Console(stderr=True)


def common_options(func):
    """Logging options shared by every command."""

    @click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
    @click.option("--log-dir", envvar="JIRATOOLS_LOG_DIR", help="Also write jiratools.log to this directory")
    @functools.wraps(func)
    def wrapper(*args, verbose, log_dir, **kwargs):
        setup_logging(log_dir, verbose=verbose)
        return func(*args, **kwargs)

    return wrapper


def host_option(func):
    return click.option(
        "--host", "-H", required=True, envvar="JIRA_HOST",
        help="Jira host name or base URL (credentials are looked up by host)",
    )(func)


def fail(message: str) -> None:
    err_console.print(f"❌ {message}", style="red", highlight=False, markup=False, soft_wrap=True)
    sys.exit(1)


def _client(config: ToolsConfig, host: str) -> JiraClient:
    return JiraClient(config.jira_for_host(host))


@click.group()
def cli():
    """Jira command-line tools."""
    pass


@cli.command("issue")
@host_option
@click.argument("issue_key")
@click.option("--field", "-f", "field_names", multiple=True, help="Also show this field (display name or id)")
@click.option("--comments", "show_comments", is_flag=True, help="Show the issue's comments")
@click.option("--json", "as_json", is_flag=True, help="Print the raw issue JSON")
@common_options
def issue(host, issue_key, field_names, show_comments, as_json):
    """Show detailed information about a specific issue."""
    try:
        config = ToolsConfig.from_env()
        client = _client(config, host)
        jira_issue = client.fetch_issue(issue_key)

        if as_json:
            click.echo(json.dumps(jira_issue.raw, indent=2, sort_keys=True))
            return

        extra_fields = []
        if field_names:
            fields = client.get_fields()
            for name in field_names:
                field = find_field(fields, name)
                extra_fields.append((field.get('name', field['id']), field_value(jira_issue, field['id'])))

        render_issue(
            console,
            format_issue(jira_issue, client.issue_url(issue_key)),
            extra_fields=extra_fields,
            comments=format_comments(jira_issue) if show_comments else None,
        )

    except JiraToolsError as e:
        fail(f"Error showing issue: {e}")


@cli.command("update")
@host_option
@click.option("--issue", "-i", "issue_key", required=True, help="Issue key, e.g. ABC-123")
@click.option("--comment", "-c", help="Comment text")
@click.option("--comment-file", "-f", type=click.File("rb"),
              help="Read the comment from this file ('-' for stdin)")
@click.option("--assignee", "-a", help=f"New assignee user name ('{DEFAULT_ASSIGNEE}' for the default assignee)")
@common_options
def update(host, issue_key, comment, comment_file, assignee):
    """Post a comment to an issue and/or reassign it."""
    if comment is not None and comment_file is not None:
        raise click.UsageError("--comment and --comment-file are mutually exclusive")
    if comment_file is not None:
        try:
            comment = comment_file.read().decode("utf-8")
        except UnicodeDecodeError as e:
            raise click.BadParameter(f"not valid UTF-8 text: {e}", param_hint="--comment-file") from e
    if comment is None and assignee is None:
        raise click.UsageError("Give --comment, --comment-file or --assignee")

    try:
        config = ToolsConfig.from_env()
        executor = UpdateExecutor(_client(config, host))
        result = executor.update(issue_key, comment=comment, assignee=assignee)
        if not result.success:
            fail(f"{result.failed_call} failed for {issue_key}: {result.reason}")

        if result.assigned:
            console.print(f"✅ {issue_key} assigned to {assignee}")
        if result.commented:
            console.print(f"✅ Comment added to {issue_key}")

    except JiraToolsError as e:
        fail(f"Error updating issue: {e}")


@cli.command("transition")
@host_option
@click.option("--issue", "-i", "issue_key", required=True, help="Issue key, e.g. ABC-123")
@click.option("--transition", "-t", "transition_name", help="Transition name or part of it")
@click.option("--list", "list_only", is_flag=True, help="List available transitions and exit")
@click.option("--comment", "-c", help="Comment to add after the transition")
@common_options
def transition(host, issue_key, transition_name, list_only, comment):
    """Move an issue through a workflow transition.

    The first available transition whose name contains the given text
    (ignoring case) is used, in the order Jira lists them. When several
    transitions match, the pick depends on that order, which Jira does not
    guarantee; use --list and a more specific name to be sure.
    """
    if not list_only and not transition_name:
        raise click.UsageError("Give --transition or --list")

    try:
        config = ToolsConfig.from_env()
        client = _client(config, host)
        transitions = client.get_transitions(issue_key)

        if list_only:
            table = Table(title=f"Transitions for {issue_key}")
            table.add_column("ID", style="cyan")
            table.add_column("Name", style="white")
            table.add_column("To Status", style="green")
            for t in transitions:
                table.add_row(t['id'], t['name'], t['to'])
            console.print(table)
            return

        chosen = find_transition(transitions, transition_name)
        client.transition_issue(issue_key, chosen['id'])
        console.print(f"✅ {issue_key}: {chosen['name']} → {chosen['to'] or 'done'}")

        if comment:
            client.add_comment(issue_key, comment)
            console.print(f"✅ Comment added to {issue_key}")

    except JiraToolsError as e:
        fail(f"Error transitioning issue: {e}")


@cli.command("edit")
@click.argument("issue_key")
@click.option("--scan-dir", "-s", type=click.Path(file_okay=False), help="Queue directory (remembered for later runs)")
@click.option("--assignee", "-a", help="Reassign the issue when the comment is posted")
@click.option("--message", "-m", help="Comment text; skips the editor")
@click.option("--editor", envvar="JIRATOOLS_EDITOR", help="Editor command (defaults to $VISUAL/$EDITOR)")
@common_options
def edit(issue_key, scan_dir, assignee, message, editor):
    """Write a comment into the queue for a later update-comments run."""
    try:
        config = ToolsConfig.from_env()
        settings = QueueSettingsStore(config.config_dir).resolve(scan_dir=scan_dir, require_processed=False)
        path = CommentComposer(settings.scan_dir, editor=editor).compose(issue_key, assignee, text=message)
        console.print(f"✅ Queued {path}", highlight=False, soft_wrap=True)

    except JiraToolsError as e:
        fail(f"Error queueing comment: {e}")


@cli.command("dispatch")
@host_option
@click.option("--quiet", "-q", is_flag=True, help="Do not announce each item")
@click.option("--scan-dir", "-s", type=click.Path(file_okay=False), help="Queue directory (remembered for later runs)")
@click.option("--processed-dir", "-p", type=click.Path(file_okay=False),
              help="Where dispatched files go (remembered for later runs)")
@click.option("--dry-run", "-n", is_flag=True, help="Validate and report without updating Jira or moving files")
@common_options
def dispatch(host, quiet, scan_dir, processed_dir, dry_run):
    """Post every queued comment file and archive it.

    Files named ISSUEKEY[.ASSIGNEE].txt are applied in descending filename
    order. Dispatched files move to the processed directory and are deleted
    once they are older than the retention period. The first invalid file or
    failed update stops the run.
    """
    try:
        config = ToolsConfig.from_env()
        settings = QueueSettingsStore(config.config_dir).resolve(scan_dir=scan_dir, processed_dir=processed_dir)
        executor = None if dry_run else UpdateExecutor(_client(config, host))

        dispatcher = QueueDispatcher(
            executor,
            settings,
            retention_days=config.retention_days,
            dry_run=dry_run,
            announce=None if quiet else lambda message: console.print(message, highlight=False),
        )
        report = dispatcher.run()

        if not quiet:
            verb = "Would dispatch" if dry_run else "Dispatched"
            console.print(f"✅ {verb} {len(report.outcomes)} item(s)")

    except JiraToolsError as e:
        fail(f"Error dispatching comments: {e}")


if __name__ == "__main__":
    cli()
