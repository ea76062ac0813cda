"""
Default values shared by the model classes.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"

JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"
JIRA_DEFAULT_PROJECT = "UNKNOWN"
