"""Tests for the queue filename protocol."""

import pytest

from jiratools.exceptions import MalformedFilenameError, QueueValidationError
from jiratools.queue.filenames import WorkItemName, encode_filename, parse_filename


def test_issue_key_only_leaves_assignee_unset():
    name = parse_filename("ABC-123.txt")
    assert name == WorkItemName(issue_key="ABC-123", assignee=None)


def test_empty_assignee_segment_means_unassigned():
    name = parse_filename("ABC-123..txt")
    assert name.assignee == "unassigned"
    assert name.assignee is not None


def test_underscores_decode_to_dots():
    assert parse_filename("ABC-123.john_doe.txt").assignee == "john.doe"


def test_hyphen_and_default_assignee_are_valid():
    assert parse_filename("ABC-123.mary-jane.txt").assignee == "mary-jane"
    assert parse_filename("ABC-123.-1.txt").assignee == "-1"


@pytest.mark.parametrize("filename", [
    "ABC-123.jdoe.txt",
    "ABC-123.john_doe.txt",
    "PROJ_X-7.a_b_c.txt",
    "ABC-1.-1.txt",
])
def test_decode_then_encode_gives_original(filename):
    name = parse_filename(filename)
    assert encode_filename(name.issue_key, name.assignee) == filename
    assert name.filename == filename


def test_encode_replaces_dots():
    assert encode_filename("ABC-1", "j.r.doe") == "ABC-1.j_r_doe.txt"
    assert encode_filename("ABC-1") == "ABC-1.txt"


@pytest.mark.parametrize("filename,bad_value", [
    ("ABC-123.john doe.txt", "john doe"),
    ("ABC-123.john/doe.txt", "john/doe"),
    ("ABC-123.jdoe!.txt", "jdoe!"),
])
def test_invalid_assignee_names_file_and_value(filename, bad_value):
    with pytest.raises(QueueValidationError) as excinfo:
        parse_filename(filename)
    assert excinfo.value.filename == filename
    assert excinfo.value.value == bad_value
    assert filename in str(excinfo.value)


@pytest.mark.parametrize("filename", ["notes.txt", "123.txt", "ABC.jdoe.txt"])
def test_invalid_issue_key(filename):
    with pytest.raises(QueueValidationError):
        parse_filename(filename)


@pytest.mark.parametrize("filename", ["ABC-1.a.b.txt", "ABC-1.md", ".txt"])
def test_malformed_filenames(filename):
    with pytest.raises(MalformedFilenameError):
        parse_filename(filename)
