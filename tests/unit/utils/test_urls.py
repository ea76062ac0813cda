"""Tests for the URL utilities."""

import pytest

from mcp_jira.utils.urls import (
    extract_issue_key_from_url,
    extract_project_key_from_url,
    is_url,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("https://example.atlassian.net/browse/PROJ-1", True),
        ("http://jira.local/browse/PROJ-1", True),
        ("PROJ-1", False),
        ("ftp://example.com/PROJ-1", False),
    ],
)
def test_is_url(value, expected):
    assert is_url(value) is expected


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://example.atlassian.net/browse/PROJ-123", "PROJ-123"),
        ("https://example.atlassian.net/browse/PROJ-123?focusedCommentId=1", "PROJ-123"),
        (
            "https://example.atlassian.net/jira/software/projects/PROJ/issues/PROJ-7",
            "PROJ-7",
        ),
        ("https://example.atlassian.net/jira/core/board?selectedIssue=AB2-42", "AB2-42"),
        ("https://example.atlassian.net/jira/your-work", None),
    ],
)
def test_extract_issue_key_from_url(url, expected):
    assert extract_issue_key_from_url(url) == expected


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://example.atlassian.net/jira/software/projects/PROJ/boards/1", "PROJ"),
        ("https://example.atlassian.net/browse/OPS-12", "OPS"),
        ("https://example.atlassian.net/jira/your-work", None),
    ],
)
def test_extract_project_key_from_url(url, expected):
    assert extract_project_key_from_url(url) == expected
