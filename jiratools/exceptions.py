"""Custom exceptions for jiratools operations"""

from typing import Optional


class JiraToolsError(Exception):
    """Base exception for jiratools operations"""
    pass


class ConfigurationError(JiraToolsError):
    """Raised when a required input (host, issue key, directory) is missing or unresolvable"""
    pass


class UnsupportedAssigneeError(ConfigurationError):
    """Raised when an assignee value is one Jira is known to reject"""
    pass


class QueueValidationError(JiraToolsError):
    """Raised when a queued work item's filename carries an invalid component"""

    def __init__(self, message: str, filename: Optional[str] = None, value: Optional[str] = None):
        super().__init__(message)
        self.filename = filename
        self.value = value


class MalformedFilenameError(QueueValidationError):
    """Raised when a filename does not follow the ISSUEKEY[.ASSIGNEE].txt pattern"""
    pass


class RemoteCallError(JiraToolsError):
    """Raised when a Jira REST call fails or returns a non-success response"""

    def __init__(self, message: str, call: Optional[str] = None):
        super().__init__(message)
        self.call = call


class DispatchError(RemoteCallError):
    """Raised when the update for a queued work item fails"""

    def __init__(self, message: str, filename: str, call: Optional[str] = None):
        super().__init__(message, call=call)
        self.filename = filename


class TransitionNotFoundError(JiraToolsError):
    """Raised when no available transition matches the requested name"""
    pass


class FieldNotFoundError(JiraToolsError):
    """Raised when no issue field matches the requested name"""
    pass


class ComposeAbortedError(JiraToolsError):
    """Raised when the editor session produced no comment text"""
    pass
